"""Market data commands for the marketfeed CLI."""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from typing import TypeVar

import typer

from marketfeed.core.client import FuturesMarketClient
from marketfeed.core.config import MarketFeedConfig, get_default_config
from marketfeed.core.exceptions import DecodeError, TransportError

from .constants import DECODE_EXIT_CODE, TRANSPORT_EXIT_CODE
from .utils import emit_error, get_cli_options, prepare_output

T = TypeVar("T")

SYMBOL_COLUMNS = ["symbol", "pair", "contract_type", "status", "base_asset", "quote_asset"]
KLINE_COLUMNS = [
    "open_time",
    "open",
    "high",
    "low",
    "close",
    "volume",
    "close_time",
    "quote_volume",
    "trades",
    "taker_buy_base_volume",
    "taker_buy_quote_volume",
]


def get_client(config: MarketFeedConfig) -> FuturesMarketClient:
    """Factory hook for obtaining a :class:`FuturesMarketClient` instance."""

    return FuturesMarketClient(config)


def _resolve_config(ctx: typer.Context) -> MarketFeedConfig:
    options = get_cli_options(ctx)
    config = get_default_config()
    if options.strict_status:
        config = config.with_overrides(raise_for_status=True)
    return config


def _call(ctx: typer.Context, operation: Callable[[FuturesMarketClient], T]) -> T:
    client = get_client(_resolve_config(ctx))
    try:
        return operation(client)
    except TransportError as exc:
        emit_error(exc.message, exc.error_code.value, details=exc.details)
        raise typer.Exit(code=TRANSPORT_EXIT_CODE) from exc
    except DecodeError as exc:
        emit_error(exc.message, exc.error_code.value, details=exc.details)
        raise typer.Exit(code=DECODE_EXIT_CODE) from exc
    finally:
        client.close()


def _render(ctx: typer.Context, rows: Sequence[Mapping[str, object]], columns: Sequence[str]) -> None:
    formatter, stream, stack = prepare_output(ctx)
    with stack:
        formatter.render(rows, stream=stream, columns=columns)


def exchange_info_command(
    ctx: typer.Context,
    status: str | None = typer.Option(None, "--status", help="Only list symbols with this status (e.g. TRADING)."),
) -> None:
    """List the instruments described by the exchange info endpoint."""

    info = _call(ctx, lambda client: client.get_exchange_info())
    rows = [
        symbol.model_dump(include=set(SYMBOL_COLUMNS))
        for symbol in info.symbols
        if status is None or symbol.status == status
    ]
    _render(ctx, rows, SYMBOL_COLUMNS)


def klines_command(
    ctx: typer.Context,
    symbol: str = typer.Argument(..., help="Instrument symbol, e.g. BTCUSDT."),
    interval: str = typer.Option("1h", "--interval", "-i", help="Kline interval code."),
    limit: int = typer.Option(500, "--limit", "-l", help="Maximum number of klines."),
) -> None:
    """Fetch historical klines for a symbol."""

    klines = _call(ctx, lambda client: client.get_klines(symbol.upper(), interval, limit))
    _render(ctx, [kline.model_dump() for kline in klines], KLINE_COLUMNS)


def price_command(
    ctx: typer.Context,
    symbol: str = typer.Argument(..., help="Instrument symbol, e.g. BTCUSDT."),
) -> None:
    """Print the current price of a symbol."""

    price = _call(ctx, lambda client: client.get_current_price(symbol.upper()))
    _render(ctx, [{"symbol": symbol.upper(), "price": price}], ["symbol", "price"])


def register(app: typer.Typer) -> None:
    """Register market data commands on the provided application."""

    app.command("exchange-info")(exchange_info_command)
    app.command("klines")(klines_command)
    app.command("price")(price_command)


__all__ = ["get_client", "register"]
