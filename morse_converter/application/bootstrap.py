"""Application bootstrap assembly for converter state and UI services."""
from __future__ import annotations

from dataclasses import dataclass

from ..config import AppConfig
from ..ui.desktop_types import DesktopApp
from .state import ConverterState


@dataclass(frozen=True)
class AppServices:
    app_state: ConverterState
    app: DesktopApp


def build_desktop_app(config: AppConfig, logger, app_state: ConverterState) -> DesktopApp:
    """Create the front end selected by ``config.ui_backend``."""
    if config.ui_backend == "gradio":
        from ..ui.gradio_app import GradioWebApp, create_gradio_app

        blocks = create_gradio_app(config=config, logger=logger)
        return GradioWebApp(blocks, config=config, logger=logger)

    from ..ui.tkinter_app import create_tkinter_app

    return create_tkinter_app(config=config, logger=logger, state=app_state)


def initialize_app_services(*, config: AppConfig, logger) -> AppServices:
    """Construct all runtime services and return a typed service bundle."""
    app_state = ConverterState(logger, theme=config.default_theme)
    logger.info("UI backend: %s (theme=%s)", config.ui_backend, app_state.theme)
    app = build_desktop_app(config, logger, app_state)
    return AppServices(app_state=app_state, app=app)
