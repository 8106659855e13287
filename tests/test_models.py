"""Tests for candle, ticker and packet models."""

import json
from datetime import datetime, timezone
from decimal import Decimal

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st
from pydantic import ValidationError

from chartype.errors import DecimalParseError
from chartype.models import Candle, Packet, Ticker, parse_candle, parse_ticker
from chartype.models.parsing import parse_decimal

TS = datetime(2024, 1, 15, 9, 30, tzinfo=timezone.utc)

CANDLE_KEYS = ["open", "high", "low", "close", "volume"]
TICKER_KEYS = ["last", "ask", "bid", "change", "percent_change", "volume"]


class TestParseDecimal:
    @pytest.mark.parametrize("raw,expected", [
        ("1", Decimal(1)),
        ("0.1", Decimal("0.1")),
        ("-0.5", Decimal("-0.5")),
        ("1e3", Decimal("1e3")),
        ("123456789.123456789", Decimal("123456789.123456789")),
    ])
    def test_valid(self, raw, expected):
        assert parse_decimal("open", raw) == expected

    def test_keeps_exact_text(self):
        assert str(parse_decimal("close", "101.250")) == "101.250"

    @pytest.mark.parametrize("raw", ["-", "", "abc", "1.2.3", "NaN", "Infinity", "-inf", " 1", "1_000"])
    def test_invalid(self, raw):
        with pytest.raises(DecimalParseError) as exc_info:
            parse_decimal("close", raw)
        assert exc_info.value.field == "close"
        assert exc_info.value.value == raw

    def test_non_string(self):
        with pytest.raises(DecimalParseError):
            parse_decimal("close", 1.5)

    @given(value=st.decimals(allow_nan=False, allow_infinity=False))
    @settings(max_examples=100)
    def test_exact(self, value):
        assert parse_decimal("last", str(value)) == value


class TestCandle:
    def test_parse(self):
        candle = parse_candle(TS, "1", "3", "5", "7", "9")
        assert candle == Candle(
            timestamp=TS,
            open=Decimal(1), high=Decimal(3), low=Decimal(5),
            close=Decimal(7), volume=Decimal(9),
        )

    @pytest.mark.parametrize("position", range(5))
    def test_parse_invalid_value(self, position):
        raw = ["1", "3", "5", "7", "9"]
        raw[position] = "-"
        with pytest.raises(DecimalParseError) as exc_info:
            parse_candle(TS, *raw)
        assert exc_info.value.field == CANDLE_KEYS[position]

    def test_first_error_wins(self):
        with pytest.raises(DecimalParseError) as exc_info:
            parse_candle(TS, "1", "x", "5", "y", "9")
        assert exc_info.value.field == "high"

    def test_timestamp_only_is_empty(self):
        candle = Candle(timestamp=TS)
        assert candle.timestamp == TS
        for key in CANDLE_KEYS:
            assert getattr(candle, key) == Decimal(0)

    def test_no_sanity_checks(self):
        candle = parse_candle(TS, "10", "1", "20", "5", "0")
        assert candle.high < candle.low

    def test_frozen(self):
        candle = Candle(timestamp=TS)
        with pytest.raises(ValidationError):
            candle.close = Decimal(1)  # type: ignore[misc]

    def test_json_keys(self):
        data = json.loads(parse_candle(TS, "1.5", "3", "5", "7", "9").model_dump_json())
        assert sorted(data) == sorted(["timestamp"] + CANDLE_KEYS)
        assert data["open"] == "1.5"

    def test_json_accepts_numbers_and_strings(self):
        candle = Candle.model_validate_json(
            '{"timestamp": "2024-01-15T09:30:00Z", "open": "1.10", "high": 2,'
            ' "low": "0.5", "close": "1", "volume": "100"}'
        )
        assert candle.open == Decimal("1.10")
        assert candle.high == Decimal(2)
        assert candle.timestamp == TS


class TestTicker:
    def test_parse(self):
        ticker = parse_ticker("1", "3", "5", "-0.5", "-1.2", "100")
        assert ticker == Ticker(
            last=Decimal(1), ask=Decimal(3), bid=Decimal(5),
            change=Decimal("-0.5"), percent_change=Decimal("-1.2"), volume=Decimal(100),
        )

    @pytest.mark.parametrize("position", range(6))
    def test_parse_invalid_value(self, position):
        raw = ["1", "3", "5", "7", "9", "11"]
        raw[position] = "-"
        with pytest.raises(DecimalParseError) as exc_info:
            parse_ticker(*raw)
        assert exc_info.value.field == TICKER_KEYS[position]

    def test_defaults_are_zero(self):
        ticker = Ticker()
        for key in TICKER_KEYS:
            assert getattr(ticker, key) == Decimal(0)

    def test_json_keys(self):
        data = json.loads(parse_ticker("1", "2", "3", "4", "5", "6").model_dump_json())
        assert sorted(data) == sorted(TICKER_KEYS)
        assert data["percent_change"] == "5"


class TestPacket:
    def test_create(self):
        ticker = parse_ticker("1", "2", "3", "4", "5", "6")
        candles = [parse_candle(TS, "1", "2", "3", "4", "5")]
        packet = Packet(ticker=ticker, candles=candles)
        assert packet.ticker == ticker
        assert packet.candles == candles

    def test_candles_default_empty(self):
        assert Packet(ticker=Ticker()).candles == []

    def test_json_round_trip(self):
        packet = Packet(
            ticker=parse_ticker("1", "2", "3", "4", "5", "6"),
            candles=[
                parse_candle(TS, "1", "2", "3", "4", "5"),
                parse_candle(TS, "6", "7", "8", "9", "10"),
            ],
        )
        data = json.loads(packet.model_dump_json())
        assert sorted(data) == ["candles", "ticker"]
        assert Packet.model_validate_json(packet.model_dump_json()) == packet
