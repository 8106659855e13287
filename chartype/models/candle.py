"""Candle (OHLCV) data model."""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field

from chartype.models.parsing import parse_decimals


class Candle(BaseModel):
    """Represents a single OHLCV candle.

    Values are exact decimals. No relation between them is enforced, a
    candle with high below low is still a candle.
    """

    timestamp: datetime = Field(..., description="Start of the candle's timeframe")
    open: Decimal = Field(default=Decimal(0), description="Opening price")
    high: Decimal = Field(default=Decimal(0), description="Highest price")
    low: Decimal = Field(default=Decimal(0), description="Lowest price")
    close: Decimal = Field(default=Decimal(0), description="Closing price")
    volume: Decimal = Field(default=Decimal(0), description="Traded volume")

    model_config = {"frozen": True}


def parse_candle(
    timestamp: datetime,
    open: str,
    high: str,
    low: str,
    close: str,
    volume: str,
) -> Candle:
    """Build a candle from raw decimal strings.

    Raises:
        DecimalParseError: For the first token that is not a decimal.
    """
    values = parse_decimals((
        ("open", open),
        ("high", high),
        ("low", low),
        ("close", close),
        ("volume", volume),
    ))
    return Candle(timestamp=timestamp, **values)
