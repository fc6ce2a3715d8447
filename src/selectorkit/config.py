from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SelectorkitConfig:
    strict_combinators: bool = False  # reject tokens other than " ", "+", "~", ">"
    log_level: str = "WARNING"
