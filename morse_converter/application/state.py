"""Application state for the two-way converter form."""
from __future__ import annotations

from ..domain.codec import decode, encode
from .ports import ClipboardPort
from .ui_hooks import UiHooks

THEME_LIGHT = "light"
THEME_DARK = "dark"
COPY_SUCCESS_MESSAGE = "Copied to clipboard!"
COPY_FAILED_MESSAGE = "Could not copy to clipboard."
CLICKAWAY_REASON = "clickaway"


class ConverterState:
    """Owns the live text/Morse pair and the presentation flags around it.

    Every edit goes through the codec; nothing else writes to ``text`` or
    ``morse``. Clipboard failures are logged and reported through the hooks
    without touching the converted values.
    """

    def __init__(
        self,
        logger,
        *,
        clipboard: ClipboardPort | None = None,
        ui_hooks: UiHooks | None = None,
        theme: str = THEME_LIGHT,
    ) -> None:
        self.logger = logger
        self.clipboard = clipboard
        self.ui_hooks = ui_hooks
        self.theme = THEME_DARK if theme == THEME_DARK else THEME_LIGHT
        self.text = ""
        self.morse = ""
        self.notice_open = False

    def update_text(self, value: str) -> str:
        self.text = value or ""
        self.morse = encode(self.text)
        self.logger.debug("Encoded %s char(s) into %s token char(s)", len(self.text), len(self.morse))
        return self.morse

    def update_morse(self, value: str) -> str:
        self.morse = value or ""
        self.text = decode(self.morse)
        self.logger.debug("Decoded %s token char(s) into %s char(s)", len(self.morse), len(self.text))
        return self.text

    def clear(self) -> tuple[str, str]:
        self.text = ""
        self.morse = ""
        return self.text, self.morse

    def toggle_theme(self) -> str:
        self.theme = THEME_LIGHT if self.theme == THEME_DARK else THEME_DARK
        self.logger.debug("Theme switched to %s", self.theme)
        return self.theme

    @property
    def theme_label(self) -> str:
        return "Dark Mode" if self.theme == THEME_DARK else "Light Mode"

    def copy_to_clipboard(self, content: str) -> bool:
        if self.clipboard is None:
            self.logger.warning("Clipboard is not configured; copy skipped")
            self._notify(False)
            return False
        try:
            self.clipboard.write(content or "")
        except Exception:
            self.logger.exception("Clipboard write failed")
            self._notify(False)
            return False
        self.notice_open = True
        self._notify(True)
        return True

    def close_notice(self, reason: str | None = None) -> None:
        if reason == CLICKAWAY_REASON:
            return
        self.notice_open = False

    def _notify(self, succeeded: bool) -> None:
        if self.ui_hooks is None:
            return
        if succeeded:
            self.ui_hooks.info(COPY_SUCCESS_MESSAGE)
        else:
            self.ui_hooks.warn(COPY_FAILED_MESSAGE)
