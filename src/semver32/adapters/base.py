"""Helpers shared by the serialization adapters."""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

import structlog

from semver32.config import get_settings
from semver32.errors import NumberError

logger = structlog.get_logger(__name__)

_T = TypeVar("_T")


def resolve_strict(strict: bool | None) -> bool:
    """Return ``strict`` or, when unset, the configured parser strictness."""
    if strict is None:
        return get_settings().parsing.strict
    return strict


def unmarshal(fmt: str, text: str, decode: Callable[[], _T]) -> _T:
    """Run ``decode`` and log failures before letting them propagate."""
    try:
        return decode()
    except NumberError as exc:
        logger.debug(
            "semver32.unmarshal.failed",
            format=fmt,
            kind=exc.kind.value,
            text=text,
        )
        raise
