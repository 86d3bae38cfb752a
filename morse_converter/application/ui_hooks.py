"""UI notification hooks for application layer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable


@dataclass(frozen=True)
class UiHooks:
    info: Callable[[str], None]
    warn: Callable[[str], None]
