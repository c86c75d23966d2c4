"""Configuration for the version number codec and its adapters.

Settings are read from ``SEMVER32_``-prefixed environment variables, with
``__`` separating nested blocks (``SEMVER32_PARSING__STRICT=true``).
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import BaseModel, Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict


class ParsingSettings(BaseModel):
    """Parser behaviour used by serialization adapters."""

    strict: bool = Field(
        default=False,
        description="Reject a fourth segment instead of ignoring it",
    )


class LoggingSettings(BaseModel):
    """Structured logging configuration."""

    level: str = Field(default="INFO", description="Log level for library output")
    json_output: bool = Field(
        default=True, description="Render structlog events as JSON instead of console text"
    )


class Semver32Settings(BaseSettings):
    """Top-level settings."""

    parsing: ParsingSettings = Field(default_factory=ParsingSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    model_config = SettingsConfigDict(env_prefix="SEMVER32_", env_nested_delimiter="__")


def load_settings() -> Semver32Settings:
    """Load settings from the environment."""
    try:
        return Semver32Settings()
    except ValidationError as err:
        raise RuntimeError(f"Invalid configuration: {err}") from err


@lru_cache(maxsize=1)
def get_settings() -> Semver32Settings:
    """Cached accessor used by production code."""
    return load_settings()
