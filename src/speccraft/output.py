# src/speccraft/output.py
"""Write generated specifications to numbered directories.

Layout::

    specs/
        001_user_login/user_login_spec.md
        002_comments/comments_spec.md
"""

from __future__ import annotations

import re
from pathlib import Path

_NUMBERED_DIR = re.compile(r"^(\d{3})_")
_WHITESPACE = re.compile(r"\s+")
_UNSAFE = re.compile(r"[^\w\s-]")


def feature_slug(feature_title: str) -> str:
    """Lowercase the title, drop path and punctuation characters, join words with ``_``.

    "A/B testing" becomes "ab_testing". A title with nothing usable left
    becomes "feature".
    """
    cleaned = _UNSAFE.sub("", feature_title.lower()).strip()
    return _WHITESPACE.sub("_", cleaned) or "feature"


def next_spec_number(specs_dir: str | Path) -> str:
    """Return one more than the highest ``NNN_`` directory prefix, zero-padded.

    Returns "001" when the directory is missing or holds no numbered entries.
    """
    specs_path = Path(specs_dir)
    if not specs_path.is_dir():
        return "001"

    numbers = [
        int(match.group(1))
        for entry in specs_path.iterdir()
        if entry.is_dir() and (match := _NUMBERED_DIR.match(entry.name))
    ]
    return f"{max(numbers, default=0) + 1:03d}"


def default_spec_path(specs_dir: str | Path, feature_title: str) -> Path:
    slug = feature_slug(feature_title)
    return Path(specs_dir) / f"{next_spec_number(specs_dir)}_{slug}" / f"{slug}_spec.md"


def write_specification(
    markdown: str,
    feature_title: str,
    specs_dir: str | Path = "specs",
    output_path: str | Path | None = None,
) -> Path:
    """Write ``markdown`` and return the path written.

    Args:
        markdown: Rendered specification.
        feature_title: Used to name the numbered directory and file.
        specs_dir: Root directory for numbered specs.
        output_path: Explicit destination; skips numbering when given.
    """
    path = Path(output_path) if output_path else default_spec_path(specs_dir, feature_title)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(markdown, encoding="utf-8")
    return path
