"""Core components of marketfeed."""

from marketfeed.core.client import FuturesMarketClient, create_client
from marketfeed.core.config import (
    MarketFeedConfig,
    get_default_config,
    reset_default_config,
    set_proxy,
)
from marketfeed.core.exceptions import (
    DecodeError,
    HttpStatusError,
    MarketFeedError,
    TransportError,
)
from marketfeed.core.models import ExchangeInfo, Kline, PriceTicker

__all__ = [
    "FuturesMarketClient",
    "create_client",
    "MarketFeedConfig",
    "get_default_config",
    "reset_default_config",
    "set_proxy",
    "MarketFeedError",
    "TransportError",
    "HttpStatusError",
    "DecodeError",
    "ExchangeInfo",
    "Kline",
    "PriceTicker",
]
