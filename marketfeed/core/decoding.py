"""
Decoders turning exchange JSON payloads into marketfeed models.

Kline rows are fixed-position heterogeneous arrays. Integer fields must be
JSON numbers and decimal fields must be JSON strings; a type mismatch or a
short row rejects the row. A decimal string that does not parse as a number
is read as ``0.0`` and the row is kept. Batch decoding skips rejected rows,
whereas the single-value price decoder fails outright.
"""

from __future__ import annotations

import math
from typing import Any

from pydantic import ValidationError

from marketfeed.core.exceptions import DecodeError
from marketfeed.core.logging import get_logger
from marketfeed.core.models import (
    KLINE_FIELD_COUNT,
    ExchangeInfo,
    Kline,
    KlineResponse,
    PriceTicker,
)

logger = get_logger(__name__)

# (field name, position, kind) in wire order
KLINE_LAYOUT: tuple[tuple[str, int, str], ...] = (
    ("open_time", 0, "int"),
    ("open", 1, "decimal"),
    ("high", 2, "decimal"),
    ("low", 3, "decimal"),
    ("close", 4, "decimal"),
    ("volume", 5, "decimal"),
    ("close_time", 6, "int"),
    ("quote_volume", 7, "decimal"),
    ("trades", 8, "int"),
    ("taker_buy_base_volume", 9, "decimal"),
    ("taker_buy_quote_volume", 10, "decimal"),
)


def parse_number(text: str) -> float:
    """Parse a numeric string strictly.

    Unlike ``float()``, surrounding whitespace, digit separators, non-ASCII
    digits and finite literals that overflow to infinity are rejected.

    Raises:
        ValueError: If ``text`` is not a plain decimal number in float range.
    """
    if not text or not text.isascii() or text != text.strip() or "_" in text:
        raise ValueError(f"invalid numeric string: {text!r}")
    value = float(text)
    if math.isinf(value) and "inf" not in text.lower():
        raise ValueError(f"numeric string out of range: {text!r}")
    return value


def _coerce_int(value: Any, field: str) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise DecodeError(
            f"{field} must be a number, got {type(value).__name__}", field=field
        )
    try:
        return int(value)
    except (ValueError, OverflowError) as e:
        raise DecodeError(f"{field} is not a finite number", field=field) from e


def _coerce_decimal(value: Any, field: str) -> float:
    if not isinstance(value, str):
        raise DecodeError(
            f"{field} must be a numeric string, got {type(value).__name__}",
            field=field,
        )
    try:
        return parse_number(value)
    except ValueError:
        return 0.0


def parse_kline(row: KlineResponse) -> Kline:
    """Decode a single wire row into a :class:`Kline`.

    Raises:
        DecodeError: If the row is too short or a field has the wrong JSON type.
    """
    if not isinstance(row, list):
        raise DecodeError(f"kline row must be an array, got {type(row).__name__}")
    if len(row) < KLINE_FIELD_COUNT:
        raise DecodeError(
            f"invalid kline data: expected at least {KLINE_FIELD_COUNT} fields, got {len(row)}",
            details={"length": len(row)},
        )

    values: dict[str, Any] = {}
    for field, position, kind in KLINE_LAYOUT:
        if kind == "int":
            values[field] = _coerce_int(row[position], field)
        else:
            values[field] = _coerce_decimal(row[position], field)
    return Kline(**values)


def parse_klines(payload: Any) -> list[Kline]:
    """Decode a klines response body, skipping rows that cannot be decoded.

    Raises:
        DecodeError: If the body itself is not a JSON array.
    """
    if not isinstance(payload, list):
        raise DecodeError(
            f"klines response must be an array, got {type(payload).__name__}"
        )

    klines: list[Kline] = []
    for index, row in enumerate(payload):
        try:
            klines.append(parse_kline(row))
        except DecodeError as e:
            logger.bind(error_code=e.error_code.value).warning(
                "Failed to parse kline at index {}: {}", index, e.message
            )
            continue
    return klines


def parse_price(payload: Any) -> float:
    """Decode a price ticker body and return its price.

    Raises:
        DecodeError: If the body is not a ticker or the price is not numeric.
    """
    try:
        ticker = PriceTicker.model_validate(payload)
    except ValidationError as e:
        raise DecodeError(f"Invalid price ticker: {e}", field="price") from e

    try:
        return parse_number(ticker.price)
    except ValueError as e:
        raise DecodeError(
            f"Invalid price {ticker.price!r} for {ticker.symbol}",
            field="price",
            details={"symbol": ticker.symbol},
        ) from e


def parse_exchange_info(payload: Any) -> ExchangeInfo:
    """Decode an exchange info body.

    Raises:
        DecodeError: If the body does not match the exchange info shape.
    """
    try:
        return ExchangeInfo.model_validate(payload)
    except ValidationError as e:
        raise DecodeError(f"Invalid exchange info: {e}") from e


__all__ = [
    "KLINE_LAYOUT",
    "parse_exchange_info",
    "parse_kline",
    "parse_klines",
    "parse_number",
    "parse_price",
]
