"""Centralized configuration for the value cleaner."""
from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings

_LOG_LEVELS = ("debug", "info", "warning", "error", "critical")


class CleanerSettings(BaseSettings):
    """Cleaner configuration loaded from environment variables."""

    # Logging
    log_level: str = "warning"
    log_json: bool = False
    log_file: Optional[str] = None

    # Engine
    trace_dispatch: bool = False

    model_config = {"env_prefix": "VALUE_CLEANER_", "env_file": ".env", "extra": "ignore"}

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.strip().lower()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}; got '{value}'")
        return level


@lru_cache(maxsize=1)
def get_settings() -> CleanerSettings:
    """Return the process-wide settings, read once from the environment."""
    return CleanerSettings()


def configure_logging(settings: CleanerSettings | None = None) -> None:
    """Apply the logging fields of *settings* (default: :func:`get_settings`)."""
    from .infrastructure.logging import setup_logging

    settings = settings or get_settings()
    setup_logging(
        level=settings.log_level,
        json_output=settings.log_json,
        log_file=settings.log_file,
    )


__all__ = ["CleanerSettings", "get_settings", "configure_logging"]
