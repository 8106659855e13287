"""Field identifiers for candles and tickers.

CandleField and TickerField are decoded by separate closed sets. Some short
forms overlap between them ("c" is CandleField.CLOSE and TickerField.CHANGE),
so a token is only meaningful together with the enumeration it is decoded by.
"""

from chartype.fields.base import FieldEnum
from chartype.fields.candle import CandleField, from_candles
from chartype.fields.ticker import TickerField

__all__ = [
    "FieldEnum",
    "CandleField",
    "TickerField",
    "from_candles",
]
