"""Core exception classes for marketfeed."""

from typing import Any

from marketfeed.core.exceptions.codes import ErrorCode


class MarketFeedError(Exception):
    """Base class for all errors raised by marketfeed."""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.GENERAL_ERROR,
        details: dict[str, Any] | None = None,
    ):
        """Initialise the error.

        Args:
            message: Human readable message.
            error_code: Standardised error code.
            details: Extra structured context.
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}

    def to_payload(self) -> dict[str, Any]:
        """Return a serializable payload representing the error."""

        return {
            "code": self.error_code.value,
            "message": self.message,
            "details": dict(self.details),
        }


class TransportError(MarketFeedError):
    """Connection, DNS, proxy or timeout failure while talking to the exchange."""

    def __init__(
        self,
        message: str,
        url: str | None = None,
        error_code: ErrorCode = ErrorCode.TRANSPORT_ERROR,
        details: dict[str, Any] | None = None,
    ):
        super_details = details or {}
        if url is not None:
            super_details["url"] = url
        super().__init__(message, error_code, super_details)
        self.url = url


class HttpStatusError(TransportError):
    """Non-2xx response, raised only when status checking is enabled."""

    def __init__(
        self,
        message: str,
        status_code: int,
        url: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super_details = details or {}
        super_details["status_code"] = status_code
        super().__init__(message, url, ErrorCode.HTTP_STATUS_ERROR, super_details)
        self.status_code = status_code


class DecodeError(MarketFeedError):
    """Response body is not valid JSON or does not have the expected shape."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super_details = details or {}
        if field is not None:
            super_details["field"] = field
        super().__init__(message, ErrorCode.DECODE_ERROR, super_details)
        self.field = field


class ConfigurationError(MarketFeedError):
    """Invalid configuration value or unreadable configuration file."""

    def __init__(
        self,
        message: str,
        setting: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super_details = details or {}
        if setting is not None:
            super_details["setting"] = setting
        super().__init__(message, ErrorCode.CONFIGURATION_ERROR, super_details)
        self.setting = setting
