from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from configurable.constants import DEFAULT_ENV_FILE, DEFAULT_QUALIFIER, ENV_PREFIX


class Settings(BaseSettings):
    """Library-wide defaults, overridable through ``CONFIGURABLE_*`` variables."""

    qualifier: str = Field(default=DEFAULT_QUALIFIER, min_length=1)
    env_file: str = Field(default=DEFAULT_ENV_FILE, min_length=1)
    log_level: Literal["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        case_sensitive=False,
        extra="ignore",
    )


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next access re-reads the environment."""
    global _settings
    _settings = None


# Private singleton instance
_settings: Settings | None = None


__all__ = [
    "Settings",
    "get_settings",
    "reset_settings",
]
