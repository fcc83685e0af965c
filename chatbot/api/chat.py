# Role: Thin HTTP adapter for the chat form post. Reads the single "message" form field and delegates the
# exchange to ChatService; the response uses the page's field names (userMessage, aiResponse).

from fastapi import APIRouter, Form, HTTPException
from pydantic import BaseModel, ConfigDict, Field

from chatbot.api.deps import chat_service
from chatbot.core.chat_service import EmptyMessageError

router = APIRouter(tags=["chat"])


class ChatResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    user_message: str = Field(alias="userMessage")
    ai_response: str = Field(alias="aiResponse")


@router.post("/chat", response_model=ChatResponse)
def chat(message: str = Form(...)) -> ChatResponse:
    # 1) FastAPI rejects a missing field (422) before we get here
    # 2) Blank text is rejected by the service and mapped to 422 as well
    try:
        turn = chat_service.handle_message(message)
    except EmptyMessageError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e
    return ChatResponse(user_message=turn.user_message, ai_response=turn.ai_response)
