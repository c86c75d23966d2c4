"""Packed version number to text rendering.

Two renderings are provided and both are exact inverses of parsing:

* shortest form drops trailing zero segments (``1``, ``1.2``, ``1.0.3``)
* full form always shows three segments (``1.0.0``)
"""

from __future__ import annotations

from typing import SupportsInt

from .layout import major_of, minor_of, patch_of

__all__ = ["format_full", "format_short"]


def format_short(number: SupportsInt) -> str:
    """Return the shortest text that parses back to ``number``."""
    value = int(number)
    minor = minor_of(value)
    patch = patch_of(value)

    text = str(major_of(value))
    if minor > 0:
        text += f".{minor}"
        if patch > 0:
            text += f".{patch}"
    elif patch > 0:
        # minor is positional and cannot be skipped
        text += f".0.{patch}"
    return text


def format_full(number: SupportsInt) -> str:
    """Return the ``major.minor.patch`` rendering of ``number``."""
    value = int(number)
    return f"{major_of(value)}.{minor_of(value)}.{patch_of(value)}"
