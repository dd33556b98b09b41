"""Logging utilities for monitoring and debugging."""

from marketfeed.core.logging.config import LOG_LEVELS, LogConfig, normalize_level
from marketfeed.core.logging.logger import (
    StructuredLogger,
    configure_logging,
    current_trace_id,
    get_logger,
    log_context,
    logger,
)

__all__ = [
    "LOG_LEVELS",
    "LogConfig",
    "normalize_level",
    "StructuredLogger",
    "current_trace_id",
    "get_logger",
    "configure_logging",
    "log_context",
    "logger",
]
