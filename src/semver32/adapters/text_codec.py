"""Plain text marshaling; no quoting is applied."""

from __future__ import annotations

from semver32.formatting import format_short
from semver32.number import Number, parse

from .base import resolve_strict, unmarshal

__all__ = ["marshal_text", "unmarshal_text"]


def marshal_text(number: Number) -> bytes:
    """Return the shortest form of ``number`` as ASCII bytes."""
    return format_short(number).encode("ascii")


def unmarshal_text(data: bytes | str, *, strict: bool | None = None) -> Number:
    """Parse raw text produced by :func:`marshal_text`."""
    text = data.decode("utf-8", errors="replace") if isinstance(data, (bytes, bytearray)) else data
    return unmarshal("text", text, lambda: parse(text, strict=resolve_strict(strict)))
