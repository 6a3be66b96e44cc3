"""CSS emitter: renders descriptors and wraps high-density groups in media queries."""

from __future__ import annotations

from typing import Iterable, Mapping

from lazyrules.model.asset import AssetDescriptor

__all__ = ["format_px", "render_rule", "render_group", "render_stylesheet"]

# Resolution of a ratio-1 display, used for the min-resolution query
REFERENCE_DPI = 96

_RULE_TEMPLATE = (
    "{selector} {{ background: url({url}) no-repeat 0 0; "
    "background-size: 100% 100%; "
    "width: {width}px; height: {height}px; "
    "display: inline-block; vertical-align: middle; font-size: 0; }}"
)

_MEDIA_TEMPLATE = (
    "@media (-webkit-min-device-pixel-ratio: {ratio}), "
    "(min-resolution: {dpi}dpi) {{\n{body}\n}}"
)


def format_px(value: float) -> str:
    """Format a pixel length: ``25`` for whole numbers, ``12.5`` otherwise."""
    if value == int(value):
        return str(int(value))
    return repr(float(value))


def render_rule(descriptor: AssetDescriptor) -> str:
    """Render a single background-image rule."""
    return _RULE_TEMPLATE.format(
        selector=descriptor.selector,
        url=descriptor.url,
        width=format_px(descriptor.width),
        height=format_px(descriptor.height),
    )


def render_group(ratio: int, descriptors: Iterable[AssetDescriptor]) -> str:
    """Render one density group.

    Ratio 1 is returned as bare rules; higher ratios are wrapped in a
    device-pixel-ratio media query with each rule indented one tab.
    """
    rules = [render_rule(d) for d in descriptors]
    if ratio <= 1:
        return "\n".join(rules)
    body = "\n".join(f"\t{rule}" for rule in rules)
    return _MEDIA_TEMPLATE.format(ratio=ratio, dpi=ratio * REFERENCE_DPI, body=body)


def render_stylesheet(groups: Mapping[int, list[AssetDescriptor]]) -> str:
    """Render all groups in ascending ratio order, separated by a blank line."""
    return "\n\n".join(
        render_group(ratio, groups[ratio]) for ratio in sorted(groups)
    )
