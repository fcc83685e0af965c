# Role: Single chat entry shown as one bubble. Created in pairs (user, then assistant) and never edited,
# so the model is frozen. Serializes with the page's field names (id, text, isUser).

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Message(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    text: str
    is_user: bool = Field(alias="isUser")
