"""Bit layout of a packed version number.

A number occupies 32 bits, most significant first: 16 bits of major, 8 bits of
minor and 8 bits of patch. Numeric order of the packed value therefore matches
lexicographic order of ``(major, minor, patch)``.
"""

from __future__ import annotations

MAJOR_BITS = 16
MINOR_BITS = 8
PATCH_BITS = 8

MINOR_SHIFT = PATCH_BITS
MAJOR_SHIFT = MINOR_BITS + PATCH_BITS

MAJOR_MAX = (1 << MAJOR_BITS) - 1
MINOR_MAX = (1 << MINOR_BITS) - 1
PATCH_MAX = (1 << PATCH_BITS) - 1
VALUE_MAX = (1 << (MAJOR_BITS + MINOR_BITS + PATCH_BITS)) - 1

MAJOR_MASK = MAJOR_MAX << MAJOR_SHIFT
MINOR_MASK = MINOR_MAX << MINOR_SHIFT
PATCH_MASK = PATCH_MAX
INV_MAJOR_MASK = MINOR_MASK | PATCH_MASK
INV_MINOR_MASK = MAJOR_MASK | PATCH_MASK
INV_PATCH_MASK = MAJOR_MASK | MINOR_MASK


def pack(major: int, minor: int, patch: int) -> int:
    """Pack components that are already known to be in range."""
    return major << MAJOR_SHIFT | minor << MINOR_SHIFT | patch


def major_of(value: int) -> int:
    return value >> MAJOR_SHIFT & MAJOR_MAX


def minor_of(value: int) -> int:
    return value >> MINOR_SHIFT & MINOR_MAX


def patch_of(value: int) -> int:
    return value & PATCH_MASK
