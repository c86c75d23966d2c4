"""Pydantic field type for version numbers.

``NumberField`` accepts version text, bytes, packed integers or ``Number``
instances and serializes to the shortest form. Parse failures surface as
``pydantic.ValidationError`` whose error context keeps the
:class:`~semver32.errors.NumberError`.
"""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import PlainSerializer, PlainValidator, WithJsonSchema

from semver32.formatting import format_short
from semver32.number import Number, parse

from .base import resolve_strict, unmarshal

__all__ = ["NumberField", "validate_number"]


def validate_number(value: Any) -> Number:
    """Coerce ``value`` into a :class:`Number`."""
    if isinstance(value, Number):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return Number(value)
    if isinstance(value, (bytes, bytearray)):
        value = bytes(value).decode("utf-8", errors="replace")
    if isinstance(value, str):
        text = value
        return unmarshal("pydantic", text, lambda: parse(text, strict=resolve_strict(None)))
    raise ValueError(f"expected version text or packed integer, got {type(value).__name__}")


NumberField = Annotated[
    Number,
    PlainValidator(validate_number),
    PlainSerializer(format_short, return_type=str),
    WithJsonSchema({"type": "string", "pattern": r"^[0-9.]+$", "examples": ["1.2.3"]}),
]
