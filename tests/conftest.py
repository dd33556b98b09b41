"""Pytest configuration and fixtures for marketfeed testing."""

from __future__ import annotations

import io
from collections.abc import Callable, Iterator
from typing import Any

import httpx
import pytest

from marketfeed.core.config import MarketFeedConfig, reset_default_config
from marketfeed.core.logging import configure_logging

Handler = Callable[[httpx.Request], httpx.Response]


class RecordingTransport(httpx.MockTransport):
    """Mock transport that remembers every request it served."""

    def __init__(self, handler: Handler) -> None:
        self.requests: list[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(_record)


@pytest.fixture(autouse=True)
def _isolate_default_config(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Every test starts from a fresh process-wide configuration."""
    monkeypatch.delenv("MARKETFEED_PROXY_URL", raising=False)
    monkeypatch.delenv("MARKETFEED_LOGGING__LEVEL", raising=False)
    monkeypatch.delenv("MARKETFEED_LOGGING__FILE_PATH", raising=False)
    reset_default_config()
    yield
    reset_default_config()
    configure_logging()


@pytest.fixture
def log_stream() -> Iterator[io.StringIO]:
    """Capture structured log output at DEBUG level."""
    buffer = io.StringIO()
    configure_logging("DEBUG", console_stream=buffer)
    yield buffer
    configure_logging()


@pytest.fixture
def config() -> MarketFeedConfig:
    return MarketFeedConfig(base_url="https://fapi.example.test")


@pytest.fixture
def json_transport() -> Callable[..., RecordingTransport]:
    """Build a transport answering every request with a fixed body."""

    def _build(body: Any, status_code: int = 200, raw: bool = False) -> RecordingTransport:
        def handler(request: httpx.Request) -> httpx.Response:
            if raw:
                return httpx.Response(status_code, content=body)
            return httpx.Response(status_code, json=body)

        return RecordingTransport(handler)

    return _build


@pytest.fixture
def kline_row() -> Callable[..., list[Any]]:
    """Build a well-formed kline wire row."""

    def _build(open_time: int = 1499040000000, close: str = "0.01577100") -> list[Any]:
        return [
            open_time,
            "0.01634790",
            "0.80000000",
            "0.01575800",
            close,
            "148976.11427815",
            open_time + 3_599_999,
            "2434.19055334",
            308,
            "1756.87402397",
            "28.46694368",
            "17928899.62484339",
        ]

    return _build
