# Role: The one narrow seam between the chat flow and whatever produces assistant text.
# Today the reply is a fixed template; a real model client only has to implement generate_reply(text) -> text.

from __future__ import annotations

from typing import Protocol

REPLY_TEMPLATE = 'You said: "{message}". As an AI, I\'m here to help!'


class ReplyGenerator(Protocol):
    def generate_reply(self, text: str) -> str: ...


class TemplateReplyGenerator:
    """Placeholder generator: embeds the user's text in a fixed sentence."""

    def __init__(self, template: str = REPLY_TEMPLATE) -> None:
        self.template = template

    def generate_reply(self, text: str) -> str:
        # Only the {message} slot is substituted; braces typed by the user stay literal.
        return self.template.replace("{message}", text)
