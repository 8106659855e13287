"""Ticker (quote snapshot) data model."""

from decimal import Decimal

from pydantic import BaseModel, Field

from chartype.models.parsing import parse_decimals


class Ticker(BaseModel):
    """Holds current last, ask and bid prices plus 24h metrics."""

    last: Decimal = Field(default=Decimal(0), description="Last traded price")
    ask: Decimal = Field(default=Decimal(0), description="Best ask price")
    bid: Decimal = Field(default=Decimal(0), description="Best bid price")
    change: Decimal = Field(default=Decimal(0), description="24h change of last price")
    percent_change: Decimal = Field(
        default=Decimal(0), description="24h change of last price, in percent"
    )
    volume: Decimal = Field(default=Decimal(0), description="24h traded volume")

    model_config = {"frozen": True}


def parse_ticker(
    last: str,
    ask: str,
    bid: str,
    change: str,
    percent_change: str,
    volume: str,
) -> Ticker:
    """Build a ticker from raw decimal strings.

    Raises:
        DecimalParseError: For the first token that is not a decimal.
    """
    values = parse_decimals((
        ("last", last),
        ("ask", ask),
        ("bid", bid),
        ("change", change),
        ("percent_change", percent_change),
        ("volume", volume),
    ))
    return Ticker(**values)
