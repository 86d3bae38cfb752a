"""Clipboard adapters for the desktop UI and the command line."""

from __future__ import annotations

import pyperclip


class TkClipboard:
    """Clipboard backed by a Tk root window."""

    def __init__(self, root) -> None:
        self.root = root

    def write(self, text: str) -> None:
        self.root.clipboard_clear()
        self.root.clipboard_append(text)
        # Flush so the content survives the window closing.
        self.root.update()


class SystemClipboard:
    """Clipboard backed by pyperclip, used outside of any UI toolkit."""

    def write(self, text: str) -> None:
        pyperclip.copy(text)
