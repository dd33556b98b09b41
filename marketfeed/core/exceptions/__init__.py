"""Exception handling module."""

from marketfeed.core.exceptions.base import (
    ConfigurationError,
    DecodeError,
    HttpStatusError,
    MarketFeedError,
    TransportError,
)
from marketfeed.core.exceptions.codes import ErrorCode

__all__ = [
    "MarketFeedError",
    "TransportError",
    "HttpStatusError",
    "DecodeError",
    "ConfigurationError",
    "ErrorCode",
]
