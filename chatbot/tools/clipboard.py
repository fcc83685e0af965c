# Role: Write-only clipboard boundary. Wraps pyperclip so callers get a plain True/False;
# failures are reported on stderr and never surface to the user.

from __future__ import annotations

import sys
from typing import Callable, Optional

import pyperclip

import chatbot.config as config


class ClipboardWriter:
    def __init__(self, copy_func: Optional[Callable[[str], None]] = None) -> None:
        # Key line: copy_func is injectable for tests and for non-local frontends.
        self._copy = copy_func or pyperclip.copy

    def write_text(self, text: str) -> bool:
        try:
            self._copy(text)
        except pyperclip.PyperclipException as e:
            print(f"Failed to copy: {e}", file=sys.stderr)
            return False

        if config.DEBUG:
            print(f"CLIPBOARD: copied {len(text)} chars")
        return True
