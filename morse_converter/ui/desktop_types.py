"""UI front-end interfaces."""

from __future__ import annotations

from typing import Protocol


class DesktopApp(Protocol):
    """Launchable front-end contract shared by the Tk and Gradio apps."""

    title: str

    def launch(self) -> None:
        """Start the UI main loop."""
