"""Candle field identifiers and batch projection."""

from decimal import Decimal
from typing import Any, Iterable

from chartype.fields.base import FieldEnum
from chartype.models.candle import Candle


class CandleField(FieldEnum):
    """Numeric attribute of a candle.

    Can be included in configuration structures, e.g. to pick the price
    series an indicator is computed on.
    """

    OPEN = 1, "open", "o"
    HIGH = 2, "high", "h"
    LOW = 3, "low", "l"
    CLOSE = 4, "close", "c"
    VOLUME = 5, "volume", "v"


def from_candles(candles: Iterable[Candle], field: Any) -> list[Decimal]:
    """Extract one field from every candle, preserving order.

    Args:
        candles: Candles to project.
        field: CandleField member or raw code. Invalid codes give zeros.

    Returns:
        One value per candle.
    """
    return [CandleField.extract(field, candle) for candle in candles]
