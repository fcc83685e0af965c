# Role: Chat View state, independent of Streamlit widgets. Lives inside a session-state mapping
# (st.session_state in the app, a plain dict in tests) and drives the idle -> submitting -> idle cycle.

from __future__ import annotations

from typing import Any, Callable, MutableMapping, Optional, Tuple

from chatbot.core.copy_tracker import CopyTracker
from chatbot.core.history import ChatHistory
from chatbot.models.message import Message
from chatbot.tools.clipboard import ClipboardWriter

IDLE = "idle"
SUBMITTING = "submitting"


class ChatViewState:
    def __init__(
        self,
        store: MutableMapping[str, Any],
        clipboard: Optional[ClipboardWriter] = None,
        clock: Optional[Callable[[], float]] = None,
    ) -> None:
        self._store = store
        self._ensure()
        self.clipboard = clipboard or ClipboardWriter()
        self.copy_tracker = CopyTracker(store=store["copied_at"], clock=clock)

    def _ensure(self) -> None:
        s = self._store
        if "history" not in s:
            s["history"] = ChatHistory()
        if "copied_at" not in s:
            s["copied_at"] = {}
        if "status" not in s:
            s["status"] = IDLE
        if "pending_message" not in s:
            s["pending_message"] = None
        if "input_nonce" not in s:
            s["input_nonce"] = 0
        if "scroll_to_bottom" not in s:
            s["scroll_to_bottom"] = False
        if "error" not in s:
            s["error"] = None

    # ----------------------------
    # Read side
    # ----------------------------
    @property
    def history(self) -> ChatHistory:
        return self._store["history"]

    @property
    def messages(self) -> Tuple[Message, ...]:
        return self.history.messages

    @property
    def status(self) -> str:
        return self._store["status"]

    @property
    def is_submitting(self) -> bool:
        return self._store["status"] == SUBMITTING

    @property
    def pending_message(self) -> Optional[str]:
        return self._store["pending_message"]

    @property
    def error(self) -> Optional[str]:
        return self._store["error"]

    @property
    def submit_label(self) -> str:
        return "Sending..." if self.is_submitting else "Send"

    @property
    def input_key(self) -> str:
        # Key line: a fresh widget key renders an empty input, which is how the field is reset.
        return f"message_input_{self._store['input_nonce']}"

    def input_value(self) -> str:
        return self._store.get(self.input_key) or ""

    # ----------------------------
    # Submission lifecycle
    # ----------------------------
    def begin_submit(self, text: str) -> bool:
        # Ignored while a submission is in flight (the control is disabled anyway).
        if self.is_submitting:
            return False
        self._store["status"] = SUBMITTING
        self._store["pending_message"] = text
        self._store["error"] = None
        return True

    def complete_submit(self, user_message: str, ai_response: str) -> Tuple[Message, Message]:
        # 1) Append the pair
        # 2) Reset the input field
        # 3) Request scroll-to-bottom, back to idle
        pair = self.history.append_turn(user_message, ai_response)
        self._reset_input()
        self._store["scroll_to_bottom"] = True
        self._store["status"] = IDLE
        self._store["pending_message"] = None
        return pair

    def fail_submit(self, error: str) -> None:
        # List untouched: no user entry without its reply.
        self._reset_input()
        self._store["status"] = IDLE
        self._store["pending_message"] = None
        self._store["error"] = error

    def _reset_input(self) -> None:
        self._store.pop(self.input_key, None)
        self._store["input_nonce"] += 1

    def consume_scroll_request(self) -> bool:
        requested = bool(self._store["scroll_to_bottom"])
        self._store["scroll_to_bottom"] = False
        return requested

    # ----------------------------
    # Copy-to-clipboard
    # ----------------------------
    def copy_message(self, text: str, message_id: str) -> bool:
        if not self.clipboard.write_text(text):
            return False
        self.copy_tracker.mark_copied(message_id)
        return True

    def is_copied(self, message_id: str) -> bool:
        return self.copy_tracker.is_copied(message_id)
