"""Build an AssetDescriptor from a path, its size, and the target stylesheet."""

from __future__ import annotations

import os

from lazyrules.errors import DimensionError, ParseError
from lazyrules.model.asset import AssetDescriptor, Dimensions
from lazyrules.naming import build_selector, parse_filename

__all__ = ["build_descriptor", "relative_url"]


def relative_url(path: str, stylesheet: str) -> str:
    """Return *path* relative to the directory holding *stylesheet*.

    The result always uses forward slashes, whatever the platform.
    """
    start = os.path.dirname(str(stylesheet)) or os.curdir
    return os.path.relpath(str(path), start).replace("\\", "/")


def build_descriptor(
    path: str, dimensions: Dimensions | None, stylesheet: str
) -> AssetDescriptor:
    """Combine *path*, its raw *dimensions*, and its parsed name.

    Raises :class:`ParseError` if the filename yields no usable selector and
    :class:`DimensionError` if either side is missing, zero, or negative.
    """
    parts = parse_filename(path)
    try:
        selector = build_selector(parts)
    except ParseError as exc:
        raise ParseError(str(exc), path=path) from exc

    if dimensions is None or not dimensions.valid:
        size = (
            "unknown"
            if dimensions is None
            else f"{dimensions.width}x{dimensions.height}"
        )
        raise DimensionError(f"Invalid image dimensions: {size}", path=path)

    return AssetDescriptor(
        url=relative_url(path, stylesheet),
        dimensions=dimensions,
        ratio=parts.ratio,
        selector=selector,
        path=str(path),
    )
