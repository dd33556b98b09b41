"""Data models for marketfeed."""

from .exchange import AssetInfo, ExchangeInfo, RateLimitRule, SymbolInfo
from .kline import KLINE_FIELD_COUNT, Kline, KlineResponse
from .ticker import PriceTicker

__all__ = [
    "AssetInfo",
    "ExchangeInfo",
    "KLINE_FIELD_COUNT",
    "Kline",
    "KlineResponse",
    "PriceTicker",
    "RateLimitRule",
    "SymbolInfo",
]
