# Role: Transient "copied" indicator per message id. A copy turns the indicator on; it reads as off again
# once the configured delay has elapsed. Nothing here is durable.

from __future__ import annotations

import time
from typing import Callable, Dict, MutableMapping, Optional

import chatbot.config as config


class CopyTracker:
    def __init__(
        self,
        store: Optional[MutableMapping[str, float]] = None,
        clock: Optional[Callable[[], float]] = None,
        duration_seconds: Optional[float] = None,
    ) -> None:
        # store maps message id -> copy time; pass a session-backed dict to survive UI reruns.
        self._copied_at: MutableMapping[str, float] = store if store is not None else {}
        self._clock = clock or time.monotonic
        self.duration_seconds = config.COPIED_INDICATOR_SECONDS if duration_seconds is None else duration_seconds

    def mark_copied(self, message_id: str) -> None:
        self._copied_at[message_id] = self._clock()

    def is_copied(self, message_id: str) -> bool:
        copied_at = self._copied_at.get(message_id)
        if copied_at is None:
            return False
        return (self._clock() - copied_at) < self.duration_seconds

    def expire(self) -> int:
        # Drop indicators whose delay has passed; returns how many were cleared.
        now = self._clock()
        to_delete = [mid for mid, at in self._copied_at.items() if (now - at) >= self.duration_seconds]
        for mid in to_delete:
            del self._copied_at[mid]
        return len(to_delete)

    def seconds_left(self, message_id: str) -> float:
        copied_at = self._copied_at.get(message_id)
        if copied_at is None:
            return 0.0
        return max(0.0, self.duration_seconds - (self._clock() - copied_at))

    def snapshot(self) -> Dict[str, bool]:
        return {mid: self.is_copied(mid) for mid in list(self._copied_at)}

    def next_expiry_in(self) -> Optional[float]:
        # Seconds until the soonest active indicator reverts; None when nothing is showing "copied".
        left = [self.seconds_left(mid) for mid in list(self._copied_at)]
        active = [s for s in left if s > 0]
        return min(active) if active else None
