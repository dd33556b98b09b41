"""
marketfeed - REST client for futures exchange market data.

Examples:
    >>> import marketfeed
    >>> marketfeed.set_proxy("http://127.0.0.1:7890")  # optional, before any client
    >>> with marketfeed.FuturesMarketClient() as client:
    ...     klines = client.get_klines("BTCUSDT", "1h", 100)
    ...     price = client.get_current_price("BTCUSDT")
"""

from marketfeed.core import (
    DecodeError,
    ExchangeInfo,
    FuturesMarketClient,
    HttpStatusError,
    Kline,
    MarketFeedConfig,
    MarketFeedError,
    PriceTicker,
    TransportError,
    create_client,
    get_default_config,
    reset_default_config,
    set_proxy,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
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
