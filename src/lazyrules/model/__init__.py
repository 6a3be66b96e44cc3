"""Lazyrules model layer -- public type re-exports."""

from lazyrules.model.asset import AssetDescriptor, Dimensions, FilenameParts
from lazyrules.model.result import AssetFailure, CompileResult

__all__ = [
    # asset
    "Dimensions",
    "FilenameParts",
    "AssetDescriptor",
    # result
    "AssetFailure",
    "CompileResult",
]
