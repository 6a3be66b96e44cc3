"""Result model: per-asset failures and the outcome of a compilation pass."""

from __future__ import annotations

from dataclasses import dataclass, field

from lazyrules.errors import LazyRulesError
from lazyrules.model.asset import AssetDescriptor


@dataclass(frozen=True)
class AssetFailure:
    """An asset that was skipped, with the error explaining why."""

    path: str
    error: LazyRulesError

    @property
    def kind(self) -> str:
        return type(self.error).__name__

    def __str__(self) -> str:
        return f"{self.kind} [{self.path}]: {self.error}"


@dataclass
class CompileResult:
    """CSS text produced by one pass, plus every asset that failed."""

    css: str = ""
    descriptors: list[AssetDescriptor] = field(default_factory=list)
    failures: list[AssetFailure] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        """True if no asset failed."""
        return not self.failures

    @property
    def is_empty(self) -> bool:
        """True if no rule was rendered."""
        return not self.descriptors
