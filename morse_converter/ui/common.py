"""UI-neutral helpers shared by the desktop and web front ends."""
from __future__ import annotations

from typing import Any

APP_TITLE = "Morse Code Converter"
HEADING = "-- --- .-. ... . Code Converter"
TEXT_LABEL = "Text"
MORSE_LABEL = "Morse Code"
CLEAR_LABEL = "Clear"
COPY_LABEL = "Copy"

PALETTES: dict[str, dict[str, str]] = {
    "light": {
        "bg": "#ffffff",
        "surface": "#f5f5f5",
        "text": "#1f1f1f",
        "muted": "#616161",
        "primary": "#1976d2",
        "input_bg": "#ffffff",
        "border": "#c4c4c4",
        "error": "#d32f2f",
        "contrast": "#ffffff",
        "notice_bg": "#2e7d32",
    },
    "dark": {
        "bg": "#121212",
        "surface": "#1e1e1e",
        "text": "#f5f5f5",
        "muted": "#b0b0b0",
        "primary": "#90caf9",
        "input_bg": "#1a1a1a",
        "border": "#5c5c5c",
        "error": "#f44336",
        "contrast": "#121212",
        "notice_bg": "#388e3c",
    },
}


def palette_for(mode_value: Any) -> dict[str, str]:
    return PALETTES.get(str(mode_value or "").strip().lower(), PALETTES["light"])
