# Role: Ordered, append-only list of chat entries for one page session (or one CLI run).
# Entries only ever arrive as a (user, assistant) pair, so a user entry is always followed by its reply.

from __future__ import annotations

import time
from typing import Callable, Iterator, List, Optional, Tuple

from chatbot.models.message import Message


class MessageIdFactory:
    """Millisecond-timestamp ids, bumped when the clock has not advanced so ids stay strictly increasing."""

    def __init__(self, clock: Optional[Callable[[], float]] = None, last_id: int = 0) -> None:
        self._clock = clock or time.time
        self._last = last_id

    def next_id(self) -> str:
        now_ms = int(self._clock() * 1000)
        self._last = max(now_ms, self._last + 1)
        return str(self._last)


class ChatHistory:
    def __init__(
        self,
        messages: Optional[List[Message]] = None,
        id_factory: Optional[MessageIdFactory] = None,
    ) -> None:
        self._messages: List[Message] = list(messages or [])
        if id_factory is None:
            last = max((int(m.id) for m in self._messages if m.id.isdigit()), default=0)
            id_factory = MessageIdFactory(last_id=last)
        self._ids = id_factory

    def append_turn(self, user_message: str, ai_response: str) -> Tuple[Message, Message]:
        user = Message(id=self._ids.next_id(), text=user_message, is_user=True)
        assistant = Message(id=self._ids.next_id(), text=ai_response, is_user=False)
        self._messages.extend((user, assistant))
        return user, assistant

    @property
    def messages(self) -> Tuple[Message, ...]:
        # Read-only view; callers cannot reorder or drop entries.
        return tuple(self._messages)

    def last_assistant(self) -> Optional[Message]:
        for m in reversed(self._messages):
            if not m.is_user:
                return m
        return None

    def get(self, message_id: str) -> Optional[Message]:
        for m in self._messages:
            if m.id == message_id:
                return m
        return None

    def __len__(self) -> int:
        return len(self._messages)

    def __iter__(self) -> Iterator[Message]:
        return iter(self._messages)
