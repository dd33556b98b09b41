"""
Configuration management for marketfeed.

Settings are read from ``MARKETFEED_*`` environment variables, an optional
``.env`` file, or a TOML file. A process-wide default configuration backs
clients constructed without an explicit config; ``set_proxy`` updates that
default and must be called before the first client is constructed.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import toml
from pydantic import BaseModel, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from marketfeed.core.exceptions import ConfigurationError
from marketfeed.core.logging import configure_logging, get_logger, normalize_level

logger = get_logger(__name__)

DEFAULT_BASE_URL = "https://fapi.binance.com"
DEFAULT_TIMEOUT = 30.0


class LoggingConfig(BaseModel):
    """Configuration for logging."""

    level: str = Field("INFO", description="Log level")
    file_path: str | None = Field(None, description="Optional JSON-lines log file")

    @field_validator("level")
    @classmethod
    def _check_level(cls, value: str) -> str:
        return normalize_level(value)


class MarketFeedConfig(BaseSettings):
    """Main marketfeed configuration."""

    model_config = SettingsConfigDict(
        env_prefix="MARKETFEED_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    base_url: str = Field(DEFAULT_BASE_URL, description="Exchange REST endpoint")
    proxy_url: str | None = Field(None, description="Forward proxy for outbound requests")
    timeout: float = Field(DEFAULT_TIMEOUT, description="Request timeout in seconds")
    verify_ssl: bool = Field(True, description="Verify TLS certificates")
    raise_for_status: bool = Field(
        False, description="Raise HttpStatusError on non-2xx responses"
    )
    user_agent: str = Field("marketfeed/0.1.0", description="User-Agent header")

    logging: LoggingConfig = Field(
        default_factory=lambda: LoggingConfig(), description="Logging configuration"
    )

    @field_validator("base_url")
    @classmethod
    def _check_base_url(cls, value: str) -> str:
        if not value:
            raise ValueError("base_url cannot be empty")
        return value.rstrip("/")

    @field_validator("timeout")
    @classmethod
    def _check_timeout(cls, value: float) -> float:
        if value <= 0:
            raise ValueError("timeout must be positive")
        return value

    @classmethod
    def load_from_file(cls, config_path: Path) -> MarketFeedConfig:
        """Load configuration from a TOML file."""
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        try:
            config_data = toml.load(config_path)
            return cls(**config_data)
        except (toml.TomlDecodeError, ValidationError) as e:
            raise ConfigurationError(
                f"Invalid configuration file {config_path}: {e}",
                details={"path": str(config_path)},
            ) from e

    def save_to_file(self, config_path: Path) -> None:
        """Save configuration to a TOML file."""
        config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(config_path, "w") as f:
            toml.dump(self.model_dump(exclude_none=True), f)

    def with_overrides(self, **overrides: Any) -> MarketFeedConfig:
        """Return a copy with the given fields replaced."""
        return self.model_copy(update=overrides)

    def apply_logging(self, level: str | None = None, **kwargs: Any) -> None:
        """Configure structured logging from the ``logging`` section.

        ``level`` overrides the configured level; extra keyword arguments are
        passed through to :func:`configure_logging`.
        """
        file_path = self.logging.file_path
        configure_logging(
            level or self.logging.level,
            file_output=bool(file_path),
            file_path=file_path,
            **kwargs,
        )


# Process-wide default configuration
_default_config: MarketFeedConfig | None = None


def get_default_config() -> MarketFeedConfig:
    """Return the configuration used by clients built without an explicit config."""
    global _default_config
    if _default_config is None:
        _default_config = MarketFeedConfig()
    return _default_config


def set_proxy(proxy_url: str | None) -> None:
    """Set the forward proxy for clients constructed from now on.

    Compatibility shim over the default configuration. Not synchronised:
    call it during startup, before any client is constructed.
    """
    global _default_config
    _default_config = get_default_config().with_overrides(proxy_url=proxy_url or None)
    logger.info("Market data proxy set: {}", proxy_url)


def reset_default_config() -> None:
    """Drop the cached default configuration."""
    global _default_config
    _default_config = None


__all__ = [
    "DEFAULT_BASE_URL",
    "DEFAULT_TIMEOUT",
    "LoggingConfig",
    "MarketFeedConfig",
    "get_default_config",
    "reset_default_config",
    "set_proxy",
]
