"""Lazyrules: compile image assets into background-image CSS rules."""
from __future__ import annotations

__version__ = "0.1.0"

from lazyrules.compiler import compile_assets
from lazyrules.config import LazyRulesConfig
from lazyrules.errors import DimensionError, EmptyInputError, LazyRulesError, ParseError
from lazyrules.model import AssetDescriptor, AssetFailure, CompileResult, Dimensions
from lazyrules.runner import LazyRulesRunner

__all__ = [
    "__version__",
    "compile_assets",
    "LazyRulesConfig",
    "LazyRulesRunner",
    "AssetDescriptor",
    "AssetFailure",
    "CompileResult",
    "Dimensions",
    "LazyRulesError",
    "ParseError",
    "DimensionError",
    "EmptyInputError",
]
