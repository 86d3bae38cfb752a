"""Runtime dependency container for the converter application."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from ..config import AppConfig
    from .bootstrap import AppServices


@dataclass
class AppContext:
    """Holds runtime dependencies assembled at startup."""

    config: "AppConfig"
    logger: Any
    skip_app_init: bool
    app_state: Any = None
    app: Any = None

    def bind_services(self, services: "AppServices") -> None:
        self.app_state = services.app_state
        self.app = services.app
