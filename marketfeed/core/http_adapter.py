"""
HTTP transport for exchange REST calls.

Wraps a synchronous ``httpx.Client`` configured with the base URL, timeout,
TLS verification and an optional forward proxy. Every request is a single
GET whose body is read in full and decoded as JSON; transport failures and
undecodable bodies are mapped onto the marketfeed exception hierarchy.
There is no retry and no rate limiting.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

import httpx

from marketfeed.core.exceptions import DecodeError, HttpStatusError, TransportError
from marketfeed.core.logging import get_logger

logger = get_logger(__name__)

SUPPORTED_PROXY_SCHEMES = frozenset({"http", "https", "socks5", "socks5h"})


@dataclass
class HttpConfig:
    """Configuration for HTTP client behavior."""

    base_url: str
    timeout: float = 30.0
    verify_ssl: bool = True
    proxy_url: Optional[str] = None
    raise_for_status: bool = False
    user_agent: str = "marketfeed/0.1.0"
    headers: Dict[str, str] = field(default_factory=dict)

    def __post_init__(self):
        """Validate HTTP configuration."""
        if not self.base_url:
            raise ValueError("base_url cannot be empty")
        if self.timeout <= 0:
            raise ValueError("timeout must be positive")


def resolve_proxy(proxy_url: Optional[str]) -> Optional[str]:
    """Return ``proxy_url`` if usable, otherwise ``None``.

    A malformed proxy is logged and ignored so the caller falls back to a
    direct connection.
    """
    if not proxy_url:
        return None

    try:
        parsed = httpx.URL(proxy_url)
    except (httpx.InvalidURL, TypeError) as e:
        logger.warning("Failed to parse proxy URL {!r}: {}", proxy_url, e)
        return None

    if parsed.scheme not in SUPPORTED_PROXY_SCHEMES or not parsed.host:
        logger.warning(
            "Failed to parse proxy URL {!r}: expected scheme://host[:port]", proxy_url
        )
        return None

    logger.info("HTTP client using proxy: {}", proxy_url)
    return proxy_url


class HttpClient:
    """
    Blocking JSON-over-HTTP client.

    The underlying connection pool is owned by the instance; call
    :meth:`close` or use it as a context manager to release it. A custom
    ``transport`` replaces the default one, including its proxy routing.
    """

    def __init__(
        self,
        http_config: HttpConfig,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.http_config = http_config
        self.proxy = resolve_proxy(http_config.proxy_url)

        if transport is None:
            transport = self._build_transport()

        self._client = httpx.Client(
            base_url=http_config.base_url,
            timeout=httpx.Timeout(http_config.timeout),
            headers={"User-Agent": http_config.user_agent, **http_config.headers},
            transport=transport,
            follow_redirects=True,
            trust_env=False,
        )

    def _build_transport(self) -> httpx.HTTPTransport:
        """Build the default transport, dropping a proxy httpx refuses."""
        if self.proxy is not None:
            try:
                return httpx.HTTPTransport(
                    verify=self.http_config.verify_ssl,
                    proxy=self.proxy,
                    trust_env=False,
                )
            except ValueError as e:
                logger.warning(
                    "Proxy {!r} rejected by transport, connecting directly: {}", self.proxy, e
                )
                self.proxy = None

        return httpx.HTTPTransport(verify=self.http_config.verify_ssl, trust_env=False)

    def __enter__(self) -> "HttpClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    @property
    def closed(self) -> bool:
        return self._client.is_closed

    def close(self) -> None:
        """Close the connection pool."""
        self._client.close()

    def get_json(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """GET ``path`` and return the decoded JSON body.

        The status code is only inspected when ``raise_for_status`` is set;
        otherwise error bodies are decoded like any other.

        Raises:
            TransportError: Connection, DNS, proxy or timeout failure.
            HttpStatusError: Non-2xx status with ``raise_for_status`` enabled.
            DecodeError: Body is not valid JSON.
        """
        url = f"{self.http_config.base_url}{path}"
        logger.debug("GET {} params={}", url, params)

        try:
            response = self._client.get(path, params=params)
        except httpx.RequestError as e:
            logger.bind(error_code="TRANSPORT_ERROR").error(
                "Request to {} failed: {}: {}", url, type(e).__name__, e
            )
            raise TransportError(
                f"Request to {url} failed: {e}",
                url=url,
                details={"error_type": type(e).__name__},
            ) from e

        if self.http_config.raise_for_status and not response.is_success:
            raise HttpStatusError(
                f"HTTP {response.status_code} from {url}",
                status_code=response.status_code,
                url=url,
                details={"body": response.text[:200]},
            )

        try:
            return response.json()
        except ValueError as e:
            logger.bind(error_code="DECODE_ERROR").error(
                "Undecodable body from {} (status {})", url, response.status_code
            )
            raise DecodeError(
                f"Malformed JSON from {url}: {e}",
                details={"status_code": response.status_code, "url": url},
            ) from e


__all__ = ["HttpClient", "HttpConfig", "SUPPORTED_PROXY_SCHEMES", "resolve_proxy"]
