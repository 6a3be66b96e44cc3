from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class LazyRulesConfig:
    images: tuple[str, ...] = ()
    stylesheet: str = "style.css"
    watch: bool = False
    interval: float = 0.2  # seconds between watch polls
    fail_on_empty: bool = False
