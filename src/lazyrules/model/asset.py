"""Asset model: Dimensions, FilenameParts, and AssetDescriptor dataclasses."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Dimensions:
    """Raw pixel size of an image, as reported by the prober."""

    width: float | None
    height: float | None

    @property
    def valid(self) -> bool:
        """True if both sides are present and strictly positive."""
        return (
            self.width is not None
            and self.height is not None
            and self.width > 0
            and self.height > 0
        )


@dataclass(frozen=True)
class FilenameParts:
    """Tokens extracted from an asset's basename."""

    base: str
    state: str | None = None
    ratio: int = 1


@dataclass(frozen=True)
class AssetDescriptor:
    """Everything needed to render one CSS rule for an image.

    Attributes:
        url: Path to the image relative to the stylesheet directory,
            always with forward slashes.
        dimensions: Raw pixel size of the image.
        ratio: Device pixel density multiplier (1 for base density).
        selector: Complete CSS selector list for the rule.
        path: The source path the descriptor was built from.
    """

    url: str
    dimensions: Dimensions
    ratio: int
    selector: str
    path: str = ""

    @property
    def width(self) -> float:
        """Width in CSS pixels, unrounded."""
        return self.dimensions.width / self.ratio

    @property
    def height(self) -> float:
        """Height in CSS pixels, unrounded."""
        return self.dimensions.height / self.ratio
