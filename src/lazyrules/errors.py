"""Error types raised while turning image paths into CSS rules."""

from __future__ import annotations


class LazyRulesError(Exception):
    """Base error for all lazyrules errors."""

    def __init__(self, message: str, path: str | None = None) -> None:
        self.path = path
        super().__init__(message)


class ParseError(LazyRulesError):
    """Raised when a filename cannot be turned into a class selector."""


class DimensionError(LazyRulesError):
    """Raised when an image has missing, zero, or negative dimensions."""


class EmptyInputError(LazyRulesError):
    """Raised when a build requires assets but no image matched."""
