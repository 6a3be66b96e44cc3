"""Write the compiled stylesheet to disk."""

from __future__ import annotations

from pathlib import Path


def write_stylesheet(path: str | Path, css: str) -> Path:
    """Write *css* to *path* as UTF-8, creating parent directories.

    A trailing newline is appended to non-empty output. Returns the path
    written.
    """
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    text = css + "\n" if css and not css.endswith("\n") else css
    target.write_text(text, encoding="utf-8")
    return target
