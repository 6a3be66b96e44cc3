"""Filename parsing and selector building.

Two suffix grammars are recognised in an image's basename:

    circle@2x.png       density suffix   -> ratio 2
    button_hover.png    pseudo-state     -> base "button", state "hover"
    button_hover@2x.png both

The state is split off at the *last* underscore, so ``my_icon_set.png``
yields base ``my_icon`` and state ``set``.
"""

from __future__ import annotations

import os
import re

from lazyrules.errors import ParseError
from lazyrules.model.asset import FilenameParts

__all__ = ["parse_filename", "kebab_case", "build_selector"]

# Matches a density suffix right before the final extension: @2x, @3X
_DENSITY_RE = re.compile(
    r"""
    @(?P<ratio>\d)      # single decimal digit
    [xX]$               # literal x, end of name
    """,
    re.VERBOSE,
)

# Runs of letters and digits in any script; everything else separates words
_CHUNK_RE = re.compile(r"[^\W_]+")

# Contexts in which a stateful variant applies: its own class, a descendant
# of an interactive ancestor in that state, or an explicit state class.
_STATE_CLAUSES = (
    ".{base}-{state}",
    "a:{state} .{base}",
    "button:{state} .{base}",
    "a.{state} .{base}",
    "button.{state} .{base}",
    ".{base}.{state}",
)


def parse_filename(path: str) -> FilenameParts:
    """Extract the base name, pseudo state, and density ratio from *path*.

    The density suffix is read just before the last extension, so
    ``icon.v2@2x.png`` has ratio 2. The class-name stem then stops at the
    first dot (``icon``). Extensions are not validated. Raises
    :class:`ParseError` if nothing is left for the base.
    """
    name = os.path.basename(str(path))
    head = os.path.splitext(name)[0]

    ratio = 1
    match = _DENSITY_RE.search(head)
    if match:
        ratio = int(match.group("ratio"))
        if ratio < 1:
            raise ParseError(f"Density ratio must be at least 1 in {name!r}", path=path)
        head = head[: match.start()]
    stem = head.split(".", 1)[0]

    base, state = stem, None
    if "_" in stem:
        head, _, tail = stem.rpartition("_")
        base = head
        state = tail or None

    if not base:
        raise ParseError(f"No base name left in {name!r}", path=path)
    return FilenameParts(base=base, state=state, ratio=ratio)


def _split_case(chunk: str) -> list[str]:
    """Split a letter/digit run at case changes and digit boundaries.

    An uppercase run followed by a lowercase letter keeps its last capital
    for the next word: ``HTMLParser`` -> ``HTML``, ``Parser``.
    """
    words: list[str] = []
    current = ""
    for char in chunk:
        if current:
            prev = current[-1]
            if char.isdigit() != prev.isdigit():
                words.append(current)
                current = ""
            elif char.isupper() and not prev.isupper():
                words.append(current)
                current = ""
            elif not char.isupper() and prev.isupper() and len(current) > 1:
                words.append(current[:-1])
                current = prev
        current += char
    if current:
        words.append(current)
    return words


def kebab_case(text: str) -> str:
    """Lowercase *text* and join its words with hyphens.

    >>> kebab_case("myIcon_Set")
    'my-icon-set'
    """
    words: list[str] = []
    for chunk in _CHUNK_RE.findall(text):
        words.extend(_split_case(chunk))
    return "-".join(word.lower() for word in words)


def _class_name(token: str) -> str:
    name = kebab_case(token)
    if not name or not name[0].isalpha():
        raise ParseError(f"Cannot build a CSS class name from {token!r}")
    return name


def build_selector(parts: FilenameParts) -> str:
    """Build the selector list for a parsed filename."""
    base = _class_name(parts.base)
    if parts.state is None:
        return f".{base}"
    state = _class_name(parts.state)
    return ", ".join(
        clause.format(base=base, state=state) for clause in _STATE_CLAUSES
    )
