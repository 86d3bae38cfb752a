"""Gradio UI construction for the Morse converter."""
from __future__ import annotations

import os
from functools import partial

import gradio as gr

from ..application.state import COPY_SUCCESS_MESSAGE
from ..application.ui_hooks import UiHooks
from ..config import AppConfig
from ..domain.codec import decode, encode
from .common import APP_TITLE, CLEAR_LABEL, HEADING, MORSE_LABEL, TEXT_LABEL
from .desktop_types import DesktopApp

UI_PRIMARY_HUE = os.getenv("UI_PRIMARY_HUE", "blue").strip() or "blue"
APP_THEME = gr.themes.Base(primary_hue=UI_PRIMARY_HUE)

TOGGLE_THEME_JS = "() => { document.body.classList.toggle('dark'); }"
FORCE_DARK_JS = "() => { document.body.classList.add('dark'); }"


def create_gradio_app(*, config: AppConfig, logger) -> gr.Blocks:
    """Build the Blocks app.

    Handlers are plain codec calls so concurrent browser sessions share no
    state. Copy and theme switching run in the browser; the copy event only
    raises the notice.
    """
    notice_seconds = config.snackbar_duration_ms / 1000
    hooks = UiHooks(
        info=partial(gr.Info, duration=notice_seconds),
        warn=partial(gr.Warning, duration=notice_seconds),
    )

    def on_text_input(value):
        return encode(value or "")

    def on_morse_input(value):
        return decode(value or "")

    def on_clear():
        return "", ""

    def on_copy():
        hooks.info(COPY_SUCCESS_MESSAGE)

    load_js = FORCE_DARK_JS if config.default_theme == "dark" else None
    with gr.Blocks(theme=APP_THEME, title=APP_TITLE, js=load_js) as app:
        with gr.Row():
            gr.Markdown(f"# {HEADING}")
            theme_btn = gr.Button("Toggle dark mode", variant="secondary", size="sm")
        text = gr.Textbox(
            label=TEXT_LABEL,
            lines=4,
            show_copy_button=True,
        )
        morse = gr.Textbox(
            label=MORSE_LABEL,
            lines=4,
            show_copy_button=True,
        )
        clear_btn = gr.Button(CLEAR_LABEL, variant="stop")

        # .input fires on user edits only, so writing one box never re-triggers the other.
        text.input(fn=on_text_input, inputs=[text], outputs=[morse], queue=False, api_name=False)
        morse.input(fn=on_morse_input, inputs=[morse], outputs=[text], queue=False, api_name=False)
        text.copy(fn=on_copy, api_name=False)
        morse.copy(fn=on_copy, api_name=False)
        clear_btn.click(fn=on_clear, outputs=[text, morse], queue=False, api_name=False)
        theme_btn.click(fn=None, js=TOGGLE_THEME_JS, api_name=False)

    logger.debug("UI wiring complete")
    return app


class GradioWebApp(DesktopApp):
    """Serves the Blocks app through the Gradio web server."""

    def __init__(self, blocks: gr.Blocks, *, config: AppConfig, logger) -> None:
        self.title = APP_TITLE
        self.blocks = blocks
        self.config = config
        self.logger = logger

    def launch(self) -> None:
        self.logger.info(
            "Serving web UI on http://%s:%s", self.config.server_name, self.config.server_port
        )
        self.blocks.launch(
            server_name=self.config.server_name,
            server_port=self.config.server_port,
        )
