"""Tests for kline, ticker and exchange info decoding."""

import json

import pytest

from marketfeed.core.decoding import (
    parse_exchange_info,
    parse_kline,
    parse_klines,
    parse_number,
    parse_price,
)
from marketfeed.core.exceptions import DecodeError, ErrorCode
from marketfeed.core.models import ExchangeInfo, Kline


def _read_records(stream):
    return [json.loads(line) for line in stream.getvalue().splitlines() if line.strip()]


class TestParseNumber:
    def test_plain_decimal(self):
        assert parse_number("123.45") == 123.45
        assert parse_number("-0.5") == -0.5
        assert parse_number("1e3") == 1000.0

    @pytest.mark.parametrize("text", ["", "abc", " 1.5", "1.5 ", "1_000", "1,5"])
    def test_rejects_non_numeric(self, text):
        with pytest.raises(ValueError):
            parse_number(text)

    @pytest.mark.parametrize("text", ["1e400", "-1e400", "\u0661\u0662\u0663", "\uff11.5"])
    def test_rejects_overflow_and_non_ascii_digits(self, text):
        with pytest.raises(ValueError):
            parse_number(text)

    def test_explicit_infinity_allowed(self):
        assert parse_number("inf") == float("inf")


class TestParseKline:
    def test_positional_mapping(self, kline_row):
        kline = parse_kline(kline_row())

        assert kline == Kline(
            open_time=1499040000000,
            open=0.0163479,
            high=0.8,
            low=0.015758,
            close=0.015771,
            volume=148976.11427815,
            close_time=1499043599999,
            quote_volume=2434.19055334,
            trades=308,
            taker_buy_base_volume=1756.87402397,
            taker_buy_quote_volume=28.46694368,
        )

    def test_price_string_decodes_to_float(self, kline_row):
        kline = parse_kline(kline_row(close="123.45"))
        assert kline.close == 123.45

    def test_exactly_eleven_fields(self, kline_row):
        kline = parse_kline(kline_row()[:11])
        assert kline.taker_buy_quote_volume == 28.46694368

    def test_short_row_rejected(self, kline_row):
        with pytest.raises(DecodeError, match="invalid kline data") as exc_info:
            parse_kline(kline_row()[:10])
        assert exc_info.value.details["length"] == 10

    def test_non_numeric_decimal_becomes_zero(self, kline_row):
        row = kline_row()
        row[2] = "abc"
        row[9] = ""

        kline = parse_kline(row)

        assert kline.high == 0.0
        assert kline.taker_buy_base_volume == 0.0
        assert kline.open == 0.0163479

    def test_overflowing_decimal_becomes_zero(self, kline_row):
        row = kline_row()
        row[5] = "1e400"
        assert parse_kline(row).volume == 0.0

    def test_integer_fields_accept_float_numbers(self, kline_row):
        row = kline_row()
        row[8] = 308.0
        assert parse_kline(row).trades == 308

    def test_integer_field_as_string_rejected(self, kline_row):
        row = kline_row()
        row[0] = "1499040000000"
        with pytest.raises(DecodeError) as exc_info:
            parse_kline(row)
        assert exc_info.value.field == "open_time"

    def test_boolean_trade_count_rejected(self, kline_row):
        row = kline_row()
        row[8] = True
        with pytest.raises(DecodeError):
            parse_kline(row)

    def test_decimal_field_as_number_rejected(self, kline_row):
        row = kline_row()
        row[5] = 148976.1
        with pytest.raises(DecodeError) as exc_info:
            parse_kline(row)
        assert exc_info.value.field == "volume"

    def test_row_must_be_array(self):
        with pytest.raises(DecodeError, match="must be an array"):
            parse_kline({"open_time": 1})

    def test_kline_is_immutable(self, kline_row):
        kline = parse_kline(kline_row())
        with pytest.raises(Exception):
            kline.close = 1.0


class TestParseKlines:
    def test_empty_array(self):
        result = parse_klines([])
        assert result == []
        assert isinstance(result, list)

    def test_short_row_skipped_and_order_preserved(self, kline_row):
        rows = [kline_row(open_time=t) for t in (1000, 2000, 3000, 4000)]
        rows[2] = rows[2][:5]

        klines = parse_klines(rows)

        assert [k.open_time for k in klines] == [1000, 2000, 4000]

    def test_bad_field_does_not_drop_record(self, kline_row):
        rows = [kline_row(open_time=1000), kline_row(open_time=2000)]
        rows[1][4] = "abc"

        klines = parse_klines(rows)

        assert len(klines) == 2
        assert klines[1].close == 0.0

    def test_mixed_bad_rows(self, kline_row):
        rows = [None, kline_row(open_time=1000), "garbage", [], kline_row(open_time=2000)]
        assert [k.open_time for k in parse_klines(rows)] == [1000, 2000]

    def test_no_sorting(self, kline_row):
        rows = [kline_row(open_time=3000), kline_row(open_time=1000), kline_row(open_time=1000)]
        assert [k.open_time for k in parse_klines(rows)] == [3000, 1000, 1000]

    @pytest.mark.parametrize("payload", [{"code": -1121, "msg": "Invalid symbol."}, "x", None, 42])
    def test_outer_body_must_be_array(self, payload):
        with pytest.raises(DecodeError, match="must be an array"):
            parse_klines(payload)

    def test_skipped_row_is_logged(self, kline_row, log_stream):
        parse_klines([kline_row(), [1, 2, 3]])

        records = [r for r in _read_records(log_stream) if r["level"] == "WARNING"]
        assert len(records) == 1
        assert "index 1" in records[0]["message"]
        assert records[0]["error_code"] == ErrorCode.DECODE_ERROR.value


class TestParsePrice:
    def test_valid_ticker(self):
        assert parse_price({"symbol": "BTCUSDT", "price": "67123.50"}) == 67123.50

    def test_symbol_optional(self):
        assert parse_price({"price": "1.25"}) == 1.25

    @pytest.mark.parametrize("price", ["1e400", "\u0667\u0660\u0660"])
    def test_out_of_range_or_non_ascii_price(self, price):
        with pytest.raises(DecodeError):
            parse_price({"symbol": "BTCUSDT", "price": price})

    def test_non_numeric_price(self):
        with pytest.raises(DecodeError) as exc_info:
            parse_price({"symbol": "BTCUSDT", "price": "abc"})
        assert exc_info.value.field == "price"
        assert exc_info.value.details["symbol"] == "BTCUSDT"

    @pytest.mark.parametrize(
        "payload",
        [
            {"symbol": "BTCUSDT"},
            {"symbol": "BTCUSDT", "price": 67123.5},
            {"symbol": "BTCUSDT", "price": ""},
            [{"symbol": "BTCUSDT", "price": "1"}],
            {"code": -1121, "msg": "Invalid symbol."},
        ],
    )
    def test_invalid_ticker_shapes(self, payload):
        with pytest.raises(DecodeError):
            parse_price(payload)


class TestParseExchangeInfo:
    def test_known_and_unknown_fields(self):
        payload = {
            "timezone": "UTC",
            "serverTime": 1700000000000,
            "futuresType": "U_MARGINED",
            "rateLimits": [
                {"rateLimitType": "REQUEST_WEIGHT", "interval": "MINUTE", "intervalNum": 1, "limit": 2400}
            ],
            "assets": [{"asset": "USDT", "marginAvailable": True}],
            "symbols": [
                {
                    "symbol": "BTCUSDT",
                    "pair": "BTCUSDT",
                    "contractType": "PERPETUAL",
                    "status": "TRADING",
                    "baseAsset": "BTC",
                    "quoteAsset": "USDT",
                    "pricePrecision": 2,
                    "filters": [{"filterType": "PRICE_FILTER", "tickSize": "0.10"}],
                    "triggerProtect": "0.0500",
                }
            ],
        }

        info = parse_exchange_info(payload)

        assert isinstance(info, ExchangeInfo)
        assert info.server_time == 1700000000000
        assert info.rate_limits[0].limit == 2400
        assert info.symbol_names() == ["BTCUSDT"]
        btc = info.get_symbol("BTCUSDT")
        assert btc.contract_type == "PERPETUAL"
        assert btc.filters[0]["tickSize"] == "0.10"
        assert btc.model_extra["triggerProtect"] == "0.0500"
        assert info.model_extra["futuresType"] == "U_MARGINED"
        assert info.get_symbol("ETHUSDT") is None

    def test_empty_object(self):
        info = parse_exchange_info({})
        assert info.symbols == []

    @pytest.mark.parametrize("payload", [[], "x", {"symbols": "BTCUSDT"}, {"symbols": [{"pair": "X"}]}])
    def test_invalid_shapes(self, payload):
        with pytest.raises(DecodeError):
            parse_exchange_info(payload)
