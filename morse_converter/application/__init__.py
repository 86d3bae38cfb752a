"""Application layer orchestration."""

from .bootstrap import AppServices, build_desktop_app, initialize_app_services
from .context import AppContext
from .ports import ClipboardPort
from .state import ConverterState
from .ui_hooks import UiHooks

__all__ = [
    "AppContext",
    "AppServices",
    "ClipboardPort",
    "ConverterState",
    "UiHooks",
    "build_desktop_app",
    "initialize_app_services",
]
