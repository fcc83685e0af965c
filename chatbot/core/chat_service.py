# Role: Request handler for one chat exchange. Rejects blank input, asks the ReplyGenerator for the assistant
# text, and returns both texts. Holds no state: the same message always yields the same turn.

from __future__ import annotations

from typing import Optional

import chatbot.config as config
from chatbot.llm.reply_generator import ReplyGenerator, TemplateReplyGenerator
from chatbot.models.turn import ChatTurn


class EmptyMessageError(ValueError):
    """Raised when the submitted message is missing or only whitespace."""


class ChatService:
    def __init__(self, reply_generator: Optional[ReplyGenerator] = None) -> None:
        # Key line: the generator is injectable so a real backend can replace the template.
        self.reply_generator = reply_generator or TemplateReplyGenerator()

    def handle_message(self, message: Optional[str]) -> ChatTurn:
        # 1) Reject missing/blank input
        # 2) Generate the reply from the original (unstripped) text
        # 3) Return the pair for the view to append
        if message is None or not message.strip():
            raise EmptyMessageError("message must be non-empty")

        reply = self.reply_generator.generate_reply(message)

        if config.DEBUG:
            print("\n--- CHAT SERVICE ---")
            print("USER MESSAGE:", message)
            print("AI RESPONSE:", reply)
            print("--------------------\n")

        return ChatTurn(user_message=message, ai_response=reply)
