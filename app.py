"""Desktop entrypoint and compatibility facade for the Morse converter."""

from __future__ import annotations

import os
import platform
import sys

from morse_converter.application.bootstrap import initialize_app_services
from morse_converter.application.context import AppContext
from morse_converter.config import load_config
from morse_converter.domain.codec import decode, encode
from morse_converter.domain.symbols import (
    INVERSE_SYMBOL_MAP,
    SYMBOL_MAP,
    SYMBOL_PAIRS,
    find_collisions,
)
from morse_converter.logging_config import setup_logging

CONFIG = load_config()
logger = setup_logging(CONFIG)


def _env_flag(name: str, default: str = "0") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


SKIP_APP_INIT = _env_flag("MORSE_SKIP_APP_INIT")

logger.info("Starting app")
logger.info("Log file: %s", CONFIG.log_file)
logger.debug(
    "Log config: LOG_LEVEL=%s FILE_LOG_LEVEL=%s LOG_DIR=%s UI_BACKEND=%s UI_THEME=%s "
    "SNACKBAR_DURATION_MS=%s GRADIO_SERVER_NAME=%s GRADIO_SERVER_PORT=%s",
    CONFIG.log_level,
    CONFIG.file_log_level,
    CONFIG.log_dir,
    CONFIG.ui_backend,
    CONFIG.default_theme,
    CONFIG.snackbar_duration_ms,
    CONFIG.server_name,
    CONFIG.server_port,
)
logger.debug("Python version: %s", sys.version.replace("\n", " "))
logger.debug("Platform: %s", platform.platform())
logger.debug(
    "Symbol table: symbols=%s tokens=%s ambiguous_tokens=%s",
    len(SYMBOL_MAP),
    len(INVERSE_SYMBOL_MAP),
    sorted(find_collisions(SYMBOL_PAIRS)),
)

APP_CONTEXT = AppContext(
    config=CONFIG,
    logger=logger,
    skip_app_init=SKIP_APP_INIT,
)
APP_STATE = None
app = None


def text_to_morse(text):
    return encode(text or "")


def morse_to_text(morse):
    return decode(morse or "")


if not SKIP_APP_INIT:
    services = initialize_app_services(config=CONFIG, logger=logger)
    APP_CONTEXT.bind_services(services)
    APP_STATE = APP_CONTEXT.app_state
    app = APP_CONTEXT.app
else:
    logger.info("MORSE_SKIP_APP_INIT enabled; skipping UI initialization")


def launch() -> None:
    if SKIP_APP_INIT:
        logger.info("MORSE_SKIP_APP_INIT enabled; launch skipped")
        return
    if app is None:
        raise RuntimeError("Desktop app is not initialized.")
    logger.info("Launching %s", app.title)
    try:
        app.launch()
    except Exception:
        logger.exception("UI main loop failed")
        raise


if __name__ == "__main__":
    launch()
