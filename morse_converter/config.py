"""Configuration loading from environment variables."""
from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from .utils import parse_choice_env, parse_int_env, resolve_path

UI_BACKENDS = ("tkinter", "gradio")
THEME_MODES = ("light", "dark")


@dataclass(frozen=True)
class AppConfig:
    log_level: str
    file_log_level: str
    log_dir: str
    log_file: str
    ui_backend: str = "tkinter"
    default_theme: str = "light"
    snackbar_duration_ms: int = 6000
    server_name: str = "127.0.0.1"
    server_port: int = 7860


def load_config() -> AppConfig:
    base_dir = str(Path(__file__).resolve().parents[1])
    log_level = os.getenv("LOG_LEVEL", "INFO").upper()
    file_log_level = os.getenv("FILE_LOG_LEVEL", "DEBUG").upper()
    log_dir = resolve_path(os.getenv("LOG_DIR", "logs"), base_dir)
    os.makedirs(log_dir, exist_ok=True)
    log_file = os.path.join(
        log_dir, f"app_{datetime.now().strftime('%Y%m%d_%H%M%S_%f')}.log"
    )
    ui_backend = parse_choice_env("UI_BACKEND", "tkinter", UI_BACKENDS)
    default_theme = parse_choice_env("UI_THEME", "light", THEME_MODES)
    snackbar_duration_ms = parse_int_env(
        "SNACKBAR_DURATION_MS",
        6000,
        min_value=500,
        max_value=60000,
    )
    server_name = os.getenv("GRADIO_SERVER_NAME", "127.0.0.1").strip() or "127.0.0.1"
    server_port = parse_int_env("GRADIO_SERVER_PORT", 7860, min_value=1, max_value=65535)
    return AppConfig(
        log_level=log_level,
        file_log_level=file_log_level,
        log_dir=log_dir,
        log_file=log_file,
        ui_backend=ui_backend,
        default_theme=default_theme,
        snackbar_duration_ms=snackbar_duration_ms,
        server_name=server_name,
        server_port=server_port,
    )
