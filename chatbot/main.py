# Role: FastAPI app bootstrap. Loads environment config early, registers routers, and exposes health/docs endpoints.

from fastapi import FastAPI

import chatbot.config
chatbot.config.load_env()

from chatbot.api.chat import router as chat_router
from chatbot.api.meta import router as meta_router

app = FastAPI(title="AI Chatbot API", version="0.1.0")
app.include_router(chat_router)
app.include_router(meta_router)

@app.get("/")
def root() -> dict:
    # Role: quick discoverability for clients (where are docs/health).
    return {
        "message": "AI Chatbot API is running",
        "docs": "/docs",
        "health": "/health",
    }


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}
