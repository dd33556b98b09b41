"""Standardised error codes shared by marketfeed exceptions."""

from enum import Enum


class ErrorCode(str, Enum):
    """Error codes attached to every :class:`MarketFeedError`."""

    GENERAL_ERROR = "GENERAL_ERROR"
    TRANSPORT_ERROR = "TRANSPORT_ERROR"
    DECODE_ERROR = "DECODE_ERROR"
    HTTP_STATUS_ERROR = "HTTP_STATUS_ERROR"
    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"


__all__ = ["ErrorCode"]
