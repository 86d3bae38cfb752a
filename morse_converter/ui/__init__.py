"""User interface layer."""

from .common import (
    APP_TITLE,
    HEADING,
    MORSE_LABEL,
    PALETTES,
    TEXT_LABEL,
    palette_for,
)
from .desktop_types import DesktopApp

__all__ = [
    "APP_TITLE",
    "DesktopApp",
    "HEADING",
    "MORSE_LABEL",
    "PALETTES",
    "TEXT_LABEL",
    "palette_for",
]
