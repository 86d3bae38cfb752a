"""Tkinter desktop UI for the Morse converter."""
from __future__ import annotations

import os
import tkinter as tk
from tkinter import ttk
from typing import Any

from ..application.state import THEME_DARK, ConverterState
from ..application.ui_hooks import UiHooks
from ..config import AppConfig
from ..integrations.clipboard import TkClipboard
from .common import (
    APP_TITLE,
    CLEAR_LABEL,
    COPY_LABEL,
    HEADING,
    MORSE_LABEL,
    TEXT_LABEL,
    palette_for,
)
from .desktop_types import DesktopApp


class TkinterDesktopApp(DesktopApp):
    """Tkinter implementation of the converter form."""

    def __init__(
        self,
        *,
        config: AppConfig,
        logger,
        state: ConverterState,
    ) -> None:
        self.title = APP_TITLE
        self.config = config
        self.logger = logger
        self.state = state

        self.root: tk.Tk | None = None
        self.style: ttk.Style | None = None
        self.notice_job: str | None = None

        self.dark_mode_var: tk.BooleanVar | None = None
        self.theme_label_var: tk.StringVar | None = None
        self.notice_var: tk.StringVar | None = None
        self.status_var: tk.StringVar | None = None

        # Widgets assigned during UI build.
        self.text_input: tk.Text | None = None
        self.morse_input: tk.Text | None = None
        self.theme_switch: ttk.Checkbutton | None = None
        self.clear_btn: ttk.Button | None = None
        self.notice_label: tk.Label | None = None

    def launch(self) -> None:
        self._ensure_root()
        assert self.root is not None
        self.root.mainloop()

    def build_for_test(self) -> tk.Tk:
        """Build root/widgets without entering mainloop (for tests)."""
        self._ensure_root()
        assert self.root is not None
        return self.root

    def _ensure_root(self) -> None:
        if self.root is not None:
            return
        root = tk.Tk()
        self._configure_high_dpi(root)
        root.title(APP_TITLE)
        root.geometry("640x520")
        root.minsize(420, 360)
        self.root = root
        if self.state.clipboard is None:
            self.state.clipboard = TkClipboard(root)
        if self.state.ui_hooks is None:
            self.state.ui_hooks = UiHooks(info=self._show_notice, warn=self._set_error_status)
        self.style = ttk.Style(root)
        for theme_name in ("clam", "alt", "default"):
            if theme_name in set(self.style.theme_names()):
                self.style.theme_use(theme_name)
                break
        self._init_tk_variables()
        self._build_layout()
        self._apply_palette()
        root.protocol("WM_DELETE_WINDOW", self._on_close)
        self.logger.debug("Tkinter UI wiring complete")

    def _configure_high_dpi(self, root: tk.Tk) -> None:
        if os.name != "nt":
            return
        try:
            import ctypes

            try:
                ctypes.windll.shcore.SetProcessDpiAwareness(1)
            except Exception:
                ctypes.windll.user32.SetProcessDPIAware()
        except Exception:
            self.logger.debug("High DPI awareness is unavailable")
        try:
            pixels_per_inch = float(root.winfo_fpixels("1i"))
            scaling = max(1.0, min(2.5, pixels_per_inch / 72.0))
            root.tk.call("tk", "scaling", scaling)
        except tk.TclError:
            self.logger.debug("Tk scaling could not be adjusted")

    def _init_tk_variables(self) -> None:
        self.dark_mode_var = tk.BooleanVar(value=self.state.theme == THEME_DARK)
        self.theme_label_var = tk.StringVar(value=self.state.theme_label)
        self.notice_var = tk.StringVar(value="")
        self.status_var = tk.StringVar(value="")

    def _build_layout(self) -> None:
        assert self.root is not None
        container = ttk.Frame(self.root, padding=16, style="AppBg.TFrame")
        container.pack(fill=tk.BOTH, expand=True)
        container.columnconfigure(0, weight=1)

        ttk.Label(container, text=HEADING, style="Title.TLabel").grid(
            row=0, column=0, sticky="w", pady=(0, 8)
        )
        self.theme_switch = ttk.Checkbutton(
            container,
            textvariable=self.theme_label_var,
            variable=self.dark_mode_var,
            command=self._on_theme_toggle,
            style="Switch.TCheckbutton",
        )
        self.theme_switch.grid(row=1, column=0, sticky="e", pady=(0, 8))

        self.text_input = self._build_surface(
            container, row=2, label=TEXT_LABEL, on_copy=self._on_copy_text
        )
        self.morse_input = self._build_surface(
            container, row=3, label=MORSE_LABEL, on_copy=self._on_copy_morse
        )
        self.text_input.bind("<<Modified>>", self._on_text_modified)
        self.morse_input.bind("<<Modified>>", self._on_morse_modified)

        self.clear_btn = ttk.Button(
            container, text=CLEAR_LABEL, command=self._on_clear, style="Danger.TButton"
        )
        self.clear_btn.grid(row=4, column=0, sticky="ew", pady=(8, 0))
        ttk.Label(container, textvariable=self.status_var, style="Muted.TLabel").grid(
            row=5, column=0, sticky="w", pady=(8, 0)
        )
        container.rowconfigure(2, weight=1)
        container.rowconfigure(3, weight=1)

        self.notice_label = tk.Label(
            self.root, textvariable=self.notice_var, padx=16, pady=8, anchor="w"
        )
        self.notice_label.bind("<Button-1>", lambda _event: self._hide_notice())

    def _build_surface(self, parent: ttk.Frame, *, row: int, label: str, on_copy) -> tk.Text:
        frame = ttk.LabelFrame(parent, text=label, style="Card.TLabelframe")
        frame.grid(row=row, column=0, sticky="nsew", pady=(0, 8))
        frame.columnconfigure(0, weight=1)
        frame.rowconfigure(0, weight=1)
        widget = tk.Text(frame, height=6, wrap="word", undo=True, relief="flat", borderwidth=0)
        widget.grid(row=0, column=0, sticky="nsew")
        scrollbar = ttk.Scrollbar(frame, orient=tk.VERTICAL, command=widget.yview)
        scrollbar.grid(row=0, column=1, sticky="ns")
        widget.configure(yscrollcommand=scrollbar.set)
        ttk.Button(frame, text=COPY_LABEL, command=on_copy).grid(
            row=0, column=2, sticky="ne", padx=(8, 0)
        )
        return widget

    def _apply_palette(self) -> None:
        assert self.root is not None and self.style is not None
        palette = palette_for(self.state.theme)
        style = self.style
        self.root.configure(background=palette["bg"])
        style.configure(".", background=palette["bg"], foreground=palette["text"])
        style.configure("AppBg.TFrame", background=palette["bg"])
        style.configure("TFrame", background=palette["bg"])
        style.configure("TLabel", background=palette["bg"], foreground=palette["text"])
        style.configure(
            "Title.TLabel",
            background=palette["bg"],
            foreground=palette["primary"],
            font=("Segoe UI", 18, "bold"),
        )
        style.configure("Muted.TLabel", background=palette["bg"], foreground=palette["muted"])
        style.configure(
            "Card.TLabelframe",
            background=palette["bg"],
            bordercolor=palette["border"],
            padding=8,
        )
        style.configure(
            "Card.TLabelframe.Label", background=palette["bg"], foreground=palette["muted"]
        )
        style.configure(
            "Switch.TCheckbutton", background=palette["bg"], foreground=palette["text"]
        )
        style.configure("TButton", background=palette["surface"], foreground=palette["primary"])
        style.configure(
            "Danger.TButton", background=palette["error"], foreground=palette["contrast"]
        )
        style.map("Danger.TButton", background=[("active", palette["error"])])
        for widget in (self.text_input, self.morse_input):
            if widget is None:
                continue
            widget.configure(
                background=palette["input_bg"],
                foreground=palette["text"],
                insertbackground=palette["text"],
                selectbackground=palette["primary"],
                selectforeground=palette["contrast"],
            )
        if self.notice_label is not None:
            self.notice_label.configure(background=palette["notice_bg"], foreground="#ffffff")

    def _read_text(self, widget: tk.Text | None) -> str:
        if widget is None:
            return ""
        # end-1c drops the newline Tk always keeps after the content.
        return widget.get("1.0", "end-1c")

    def _write_text(self, widget: tk.Text | None, text: str) -> None:
        if widget is None:
            return
        widget.delete("1.0", tk.END)
        widget.insert("1.0", text or "")

    def _on_text_modified(self, _event: tk.Event[Any] | None = None) -> None:
        if self.text_input is None:
            return
        value = self._read_text(self.text_input)
        self.text_input.edit_modified(False)
        if value == self.state.text:
            return
        self._write_text(self.morse_input, self.state.update_text(value))

    def _on_morse_modified(self, _event: tk.Event[Any] | None = None) -> None:
        if self.morse_input is None:
            return
        value = self._read_text(self.morse_input)
        self.morse_input.edit_modified(False)
        if value == self.state.morse:
            return
        self._write_text(self.text_input, self.state.update_morse(value))

    def _on_copy_text(self) -> None:
        self.state.copy_to_clipboard(self.state.text)

    def _on_copy_morse(self) -> None:
        self.state.copy_to_clipboard(self.state.morse)

    def _on_clear(self) -> None:
        text, morse = self.state.clear()
        self._write_text(self.text_input, text)
        self._write_text(self.morse_input, morse)
        if self.status_var is not None:
            self.status_var.set("")

    def _on_theme_toggle(self) -> None:
        self.state.toggle_theme()
        if self.dark_mode_var is not None:
            self.dark_mode_var.set(self.state.theme == THEME_DARK)
        if self.theme_label_var is not None:
            self.theme_label_var.set(self.state.theme_label)
        self._apply_palette()

    def _show_notice(self, message: str) -> None:
        if self.root is None or self.notice_label is None or self.notice_var is None:
            return
        self._cancel_notice_job()
        self.notice_var.set(message)
        self.notice_label.place(relx=0.0, rely=1.0, x=16, y=-16, anchor="sw")
        self.notice_job = self.root.after(self.config.snackbar_duration_ms, self._hide_notice)

    def _hide_notice(self) -> None:
        self._cancel_notice_job()
        self.state.close_notice()
        if self.notice_label is not None:
            self.notice_label.place_forget()

    def _cancel_notice_job(self) -> None:
        if self.root is not None and self.notice_job:
            try:
                self.root.after_cancel(self.notice_job)
            except tk.TclError:
                self.logger.debug("Notice timer was already gone")
        self.notice_job = None

    def _set_error_status(self, message: str) -> None:
        if self.status_var is not None:
            self.status_var.set(f"Error: {message}")

    def _on_close(self) -> None:
        self._cancel_notice_job()
        if self.root is not None:
            self.root.destroy()


def create_tkinter_app(
    *,
    config: AppConfig,
    logger,
    state: ConverterState,
) -> DesktopApp:
    """Create the Tkinter desktop app instance."""
    return TkinterDesktopApp(config=config, logger=logger, state=state)
