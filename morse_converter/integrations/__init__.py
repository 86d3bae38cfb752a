"""Integrations for external services and libraries."""

from .clipboard import SystemClipboard, TkClipboard

__all__ = [
    "SystemClipboard",
    "TkClipboard",
]
