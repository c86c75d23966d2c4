"""Configuration package exports."""

from __future__ import annotations

from .settings import (
    LoggingSettings,
    ParsingSettings,
    Semver32Settings,
    get_settings,
    load_settings,
)

__all__ = [
    "LoggingSettings",
    "ParsingSettings",
    "Semver32Settings",
    "get_settings",
    "load_settings",
]
