"""Exchange metadata models.

Only the commonly used keys are typed; everything else the exchange sends is
kept as extra fields so the payload passes through unchanged.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class _WireModel(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)


class RateLimitRule(_WireModel):
    """Request or order rate limit advertised by the exchange."""

    rate_limit_type: str | None = Field(None, alias="rateLimitType")
    interval: str | None = None
    interval_num: int | None = Field(None, alias="intervalNum")
    limit: int | None = None


class AssetInfo(_WireModel):
    """Margin asset entry."""

    asset: str
    margin_available: bool | None = Field(None, alias="marginAvailable")
    auto_asset_exchange: str | None = Field(None, alias="autoAssetExchange")


class SymbolInfo(_WireModel):
    """Trading rules for a single instrument."""

    symbol: str
    pair: str | None = None
    contract_type: str | None = Field(None, alias="contractType")
    status: str | None = None
    base_asset: str | None = Field(None, alias="baseAsset")
    quote_asset: str | None = Field(None, alias="quoteAsset")
    margin_asset: str | None = Field(None, alias="marginAsset")
    price_precision: int | None = Field(None, alias="pricePrecision")
    quantity_precision: int | None = Field(None, alias="quantityPrecision")
    onboard_date: int | None = Field(None, alias="onboardDate")
    filters: list[dict[str, Any]] = Field(default_factory=list)
    order_types: list[str] = Field(default_factory=list, alias="orderTypes")


class ExchangeInfo(_WireModel):
    """Exchange-wide metadata from ``/fapi/v1/exchangeInfo``."""

    timezone: str | None = None
    server_time: int | None = Field(None, alias="serverTime")
    rate_limits: list[RateLimitRule] = Field(default_factory=list, alias="rateLimits")
    exchange_filters: list[dict[str, Any]] = Field(default_factory=list, alias="exchangeFilters")
    assets: list[AssetInfo] = Field(default_factory=list)
    symbols: list[SymbolInfo] = Field(default_factory=list)

    def symbol_names(self) -> list[str]:
        return [info.symbol for info in self.symbols]

    def get_symbol(self, symbol: str) -> SymbolInfo | None:
        for info in self.symbols:
            if info.symbol == symbol:
                return info
        return None
