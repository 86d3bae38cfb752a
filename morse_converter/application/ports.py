"""Application-level ports for collaborator services."""

from __future__ import annotations

from typing import Protocol


class ClipboardPort(Protocol):
    """Port abstraction for a system or toolkit clipboard."""

    def write(self, text: str) -> None: ...
