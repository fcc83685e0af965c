# Role: Result of one request/response exchange: the text the user sent and the reply synthesized for it.
# The HTTP layer renders it as {"userMessage": ..., "aiResponse": ...}.

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ChatTurn(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    user_message: str = Field(alias="userMessage")
    ai_response: str = Field(alias="aiResponse")
