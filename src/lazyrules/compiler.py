"""Compile (path, dimensions) pairs into a stylesheet.

This is the pure core: no I/O and no logging. Each asset either becomes a
rule or an :class:`AssetFailure`; one bad file never stops the others.
"""

from __future__ import annotations

from typing import Iterable

from lazyrules.descriptor import build_descriptor
from lazyrules.emitter import render_stylesheet
from lazyrules.errors import DimensionError, ParseError
from lazyrules.grouping import group_by_ratio
from lazyrules.model.asset import AssetDescriptor, Dimensions
from lazyrules.model.result import AssetFailure, CompileResult

__all__ = ["compile_assets", "Asset"]

Asset = tuple[str, Dimensions | None]


def compile_assets(assets: Iterable[Asset], stylesheet: str) -> CompileResult:
    """Build descriptors for *assets* and render them relative to *stylesheet*.

    An empty *assets* sequence gives an empty result, not an error.
    """
    descriptors: list[AssetDescriptor] = []
    failures: list[AssetFailure] = []
    for path, dimensions in assets:
        try:
            descriptors.append(build_descriptor(path, dimensions, stylesheet))
        except (ParseError, DimensionError) as exc:
            failures.append(AssetFailure(path=str(path), error=exc))

    css = render_stylesheet(group_by_ratio(descriptors))
    return CompileResult(css=css, descriptors=descriptors, failures=failures)
