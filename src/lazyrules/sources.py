"""Input collaborators: glob expansion and image dimension probing."""

from __future__ import annotations

import glob
import os
from typing import Iterable

from PIL import Image

from lazyrules.model.asset import Dimensions

__all__ = ["expand_patterns", "probe_dimensions", "collect_assets", "watch_roots"]


def expand_patterns(patterns: Iterable[str]) -> list[str]:
    """Expand glob *patterns* into an ordered, de-duplicated list of files.

    Matches of one pattern are sorted; patterns keep their given order. A
    pattern naming an existing file is returned unchanged. ``**`` recurses.
    """
    seen: set[str] = set()
    paths: list[str] = []
    for pattern in patterns:
        if os.path.isfile(pattern):
            matches = [pattern]
        else:
            matches = sorted(glob.glob(pattern, recursive=True))
        for match in matches:
            if match in seen or not os.path.isfile(match):
                continue
            seen.add(match)
            paths.append(match)
    return paths


def probe_dimensions(path: str) -> Dimensions | None:
    """Read the pixel size from an image header, or None if unreadable."""
    try:
        with Image.open(path) as image:
            width, height = image.size
    except (OSError, Image.DecompressionBombError):
        return None
    return Dimensions(width=width, height=height)


def collect_assets(paths: Iterable[str]) -> list[tuple[str, Dimensions | None]]:
    """Pair every path with its probed dimensions."""
    return [(path, probe_dimensions(path)) for path in paths]


def watch_roots(patterns: Iterable[str]) -> list[str]:
    """Return the directories to watch for the given patterns.

    For a glob pattern this is the longest leading directory without magic
    characters; for a plain path it is the containing directory.
    """
    roots: list[str] = []
    for pattern in patterns:
        if glob.has_magic(pattern):
            head = pattern
            while glob.has_magic(head):
                head = os.path.dirname(head)
            root = head
        elif os.path.isdir(pattern):
            root = pattern
        else:
            root = os.path.dirname(pattern)
        root = root or os.curdir
        if root not in roots:
            roots.append(root)
    return roots
