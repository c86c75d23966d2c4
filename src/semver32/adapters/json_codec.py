"""JSON marshaling of version numbers as quoted strings.

Key Responsibilities:
    - Render numbers as JSON strings holding the shortest form
    - Unmarshal quoted JSON strings by removing the two framing quotes and
      delegating to the parser
    - Provide a ``json.JSONEncoder`` subclass for ``json.dumps``

Side Effects:
    - Logs unmarshal failures at debug level
"""

from __future__ import annotations

import json
from typing import Any

from semver32.errors import Empty, InvalidCharacter, NumberError
from semver32.formatting import format_short
from semver32.number import Number, parse

from .base import resolve_strict, unmarshal

__all__ = ["NumberJSONEncoder", "marshal_json", "unmarshal_json"]

_QUOTE = '"'


def marshal_json(number: Number) -> str:
    """Return ``number`` as a JSON string literal, e.g. ``"1.2"``."""
    return _QUOTE + format_short(number) + _QUOTE


def _decode(text: str, strict: bool) -> Number:
    if len(text) <= 2:
        raise NumberError(Empty())
    for framing in (text[0], text[-1]):
        if framing != _QUOTE:
            raise NumberError(InvalidCharacter(text, framing))
    return parse(text[1:-1], strict=strict)


def unmarshal_json(data: bytes | str, *, strict: bool | None = None) -> Number:
    """Parse a JSON string literal holding a version number.

    Raises:
        NumberError: ``Empty`` when nothing remains once the framing quotes
            are removed, ``InvalidCharacter`` when the framing characters are
            not double quotes, otherwise whatever the parser raises.
    """
    text = data.decode("utf-8", errors="replace") if isinstance(data, (bytes, bytearray)) else data
    return unmarshal("json", text, lambda: _decode(text, resolve_strict(strict)))


class NumberJSONEncoder(json.JSONEncoder):
    """JSON encoder rendering :class:`Number` values in shortest form."""

    def default(self, o: Any) -> Any:
        if isinstance(o, Number):
            return format_short(o)
        return super().default(o)
