"""Logging configuration primitives for structured logging."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

# Built-in loguru levels
LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


def normalize_level(level: str) -> str:
    """Return ``level`` upper-cased, rejecting names loguru does not know."""

    normalized = level.strip().upper()
    if normalized not in LOG_LEVELS:
        raise ValueError(f"Unsupported log level '{level}'. Available levels: {', '.join(LOG_LEVELS)}.")
    return normalized


class LogConfig(BaseModel):
    """Configuration model used to initialise structured logging."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    level: str = "INFO"
    console_output: bool = True
    console_stream: Any = None
    file_output: bool = False
    file_path: str | None = None
    extra: dict[str, Any] = {}

    @field_validator("level")
    @classmethod
    def _check_level(cls, value: str) -> str:
        return normalize_level(value)


__all__ = ["LOG_LEVELS", "LogConfig", "normalize_level"]
