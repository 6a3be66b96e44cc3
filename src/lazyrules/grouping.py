"""Partition descriptors into density groups."""

from __future__ import annotations

from itertools import groupby
from typing import Iterable

from lazyrules.model.asset import AssetDescriptor

__all__ = ["group_by_ratio"]


def group_by_ratio(
    descriptors: Iterable[AssetDescriptor],
) -> dict[int, list[AssetDescriptor]]:
    """Group *descriptors* by ratio, lowest ratio first.

    ``sorted`` is stable, so descriptors sharing a ratio keep their input
    order inside the group.
    """
    ordered = sorted(descriptors, key=lambda d: d.ratio)
    return {ratio: list(run) for ratio, run in groupby(ordered, key=lambda d: d.ratio)}
