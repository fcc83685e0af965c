# Role: HTTP client for the chat form post. Sends the "message" field form-encoded, exactly like the page's
# <form method="post">, and returns the parsed ChatTurn.

from __future__ import annotations

from typing import Optional

import requests
from pydantic import ValidationError

import chatbot.config as config
from chatbot.models.turn import ChatTurn


class ChatReplyError(RuntimeError):
    """Raised when the backend answers 2xx but the body is not a {userMessage, aiResponse} reply."""


def send_message(message: str, base_url: Optional[str] = None, timeout: Optional[float] = None) -> ChatTurn:
    resp = requests.post(
        f"{base_url or config.BACKEND_URL}/chat",
        data={"message": message},
        timeout=timeout or config.REQUEST_TIMEOUT,
    )
    resp.raise_for_status()
    body = resp.json()

    if config.DEBUG:
        print("\n--- CHAT CLIENT ---")
        print("RESPONSE:", body)
        print("-------------------\n")

    try:
        return ChatTurn.model_validate(body)
    except ValidationError as e:
        raise ChatReplyError(f"Unexpected chat reply: {body!r}") from e
