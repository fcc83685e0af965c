# Role: Central configuration module. Loads .env into environment variables and computes runtime flags
# (DEBUG, BACKEND_URL, REQUEST_TIMEOUT). Importers read chatbot.config.<FLAG> instead of threading values through calls.

from __future__ import annotations

import os
from dotenv import load_dotenv

DEBUG: bool = False
BACKEND_URL: str = "http://127.0.0.1:8000"
REQUEST_TIMEOUT: float = 30.0

# How long a copied-indicator stays on after a clipboard write.
COPIED_INDICATOR_SECONDS: float = 2.0

# Page metadata, shared by GET /meta and the Streamlit page.
PAGE_TITLE: str = "AI Chatbot"
PAGE_DESCRIPTION: str = "An AI-powered chatbot interface"


def load_env() -> None:
    """
    Load .env into os.environ, then recompute the flags.
    This makes them correct even if load_env() is called after import.
    """
    global DEBUG, BACKEND_URL, REQUEST_TIMEOUT
    load_dotenv()
    # Key line: accept common truthy values.
    DEBUG = os.getenv("DEBUG", "0").lower() in {"1", "true", "yes"}
    BACKEND_URL = os.getenv("CHATBOT_BACKEND_URL", "http://127.0.0.1:8000").rstrip("/")

    try:
        REQUEST_TIMEOUT = float(os.getenv("CHATBOT_REQUEST_TIMEOUT", "30"))
    except ValueError:
        REQUEST_TIMEOUT = 30.0
