"""Exchange data client for USD-M futures REST endpoints."""

from __future__ import annotations

from typing import Optional

import httpx

from marketfeed.core.config import MarketFeedConfig, get_default_config
from marketfeed.core.decoding import parse_exchange_info, parse_klines, parse_price
from marketfeed.core.http_adapter import HttpClient, HttpConfig
from marketfeed.core.logging import get_logger
from marketfeed.core.models import ExchangeInfo, Kline

logger = get_logger(__name__)

EXCHANGE_INFO_PATH = "/fapi/v1/exchangeInfo"
KLINES_PATH = "/fapi/v1/klines"
TICKER_PRICE_PATH = "/fapi/v1/ticker/price"


class FuturesMarketClient:
    """Fetches exchange metadata, klines and current prices.

    Each call is one blocking GET. The client keeps no state between calls
    beyond its transport, so separate instances may be used from separate
    threads.

    Args:
        config: Explicit configuration. Defaults to the process-wide default,
            which picks up a proxy registered with :func:`set_proxy`.
        transport: Optional httpx transport, mainly for tests.
    """

    def __init__(
        self,
        config: Optional[MarketFeedConfig] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self.config = config or get_default_config()
        self._http = HttpClient(
            HttpConfig(
                base_url=self.config.base_url,
                timeout=self.config.timeout,
                verify_ssl=self.config.verify_ssl,
                proxy_url=self.config.proxy_url,
                raise_for_status=self.config.raise_for_status,
                user_agent=self.config.user_agent,
            ),
            transport=transport,
        )

    def __enter__(self) -> "FuturesMarketClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    @property
    def proxy(self) -> Optional[str]:
        """Proxy actually in use, ``None`` for a direct connection."""
        return self._http.proxy

    def close(self) -> None:
        self._http.close()

    def get_exchange_info(self) -> ExchangeInfo:
        """Return exchange trading rules and symbol metadata.

        Raises:
            TransportError: The request could not be completed.
            DecodeError: The body is not a valid exchange info document.
        """
        payload = self._http.get_json(EXCHANGE_INFO_PATH)
        return parse_exchange_info(payload)

    def get_klines(self, symbol: str, interval: str, limit: int) -> list[Kline]:
        """Return up to ``limit`` klines in the order sent by the exchange.

        Rows that cannot be decoded are logged and skipped; an empty response
        yields an empty list.

        Raises:
            TransportError: The request could not be completed.
            DecodeError: The body is not a JSON array.
        """
        params = {"symbol": symbol, "interval": interval, "limit": str(limit)}
        payload = self._http.get_json(KLINES_PATH, params=params)
        klines = parse_klines(payload)
        logger.debug(
            "Fetched {} klines for {} {} ({} rows received)",
            len(klines),
            symbol,
            interval,
            len(payload),
        )
        return klines

    def get_current_price(self, symbol: str) -> float:
        """Return the latest price for ``symbol``.

        Raises:
            TransportError: The request could not be completed.
            DecodeError: The body is not a ticker or its price is not numeric.
        """
        payload = self._http.get_json(TICKER_PRICE_PATH, params={"symbol": symbol})
        return parse_price(payload)


def create_client(
    config: Optional[MarketFeedConfig] = None,
    transport: Optional[httpx.BaseTransport] = None,
) -> FuturesMarketClient:
    """Factory function to create a market data client."""
    return FuturesMarketClient(config=config, transport=transport)


__all__ = [
    "EXCHANGE_INFO_PATH",
    "KLINES_PATH",
    "TICKER_PRICE_PATH",
    "FuturesMarketClient",
    "create_client",
]
