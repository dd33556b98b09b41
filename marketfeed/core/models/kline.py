"""Candlestick models."""

from typing import Any

from pydantic import BaseModel, ConfigDict

# Raw exchange row: [open_time, open, high, low, close, volume, close_time,
# quote_volume, trades, taker_buy_base_volume, taker_buy_quote_volume, ...]
KlineResponse = list[Any]

KLINE_FIELD_COUNT = 11


class Kline(BaseModel):
    """Single candlestick record."""

    model_config = ConfigDict(frozen=True)

    open_time: int
    open: float
    high: float
    low: float
    close: float
    volume: float
    close_time: int
    quote_volume: float
    trades: int
    taker_buy_base_volume: float
    taker_buy_quote_volume: float
