"""Logging configuration for the app."""

from __future__ import annotations

import logging

from .config import AppConfig

FILE_ONLY_LOGGERS = ("py.warnings", "gradio", "httpx")


def setup_logging(config: AppConfig, *, console: bool = True) -> logging.Logger:
    """Configure the `morse_app` logger.

    With `console=False` records only reach the log file, which keeps
    command line output limited to what the command prints itself.
    """
    logger = logging.getLogger("morse_app")
    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(config.log_level)
    console_handler.setFormatter(logging.Formatter("%(asctime)s | %(levelname)s | %(message)s"))

    file_handler = logging.FileHandler(config.log_file, encoding="utf-8")
    file_handler.setLevel(config.file_log_level)
    file_handler.setFormatter(
        logging.Formatter(
            "%(asctime)s | %(levelname)s | %(name)s | %(module)s:%(lineno)d | "
            "%(funcName)s | %(message)s"
        )
    )

    if console:
        logger.addHandler(console_handler)
    logger.addHandler(file_handler)

    logging.captureWarnings(True)
    for name in FILE_ONLY_LOGGERS:
        routed = logging.getLogger(name)
        routed.setLevel(logging.DEBUG)
        routed.propagate = False
        for handler in list(routed.handlers):
            routed.removeHandler(handler)
        routed.addHandler(file_handler)
    return logger
