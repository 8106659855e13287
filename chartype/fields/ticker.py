"""Ticker field identifiers."""

from chartype.fields.base import FieldEnum


class TickerField(FieldEnum):
    """Numeric attribute of a ticker."""

    LAST = 1, "last", "l"
    ASK = 2, "ask", "a"
    BID = 3, "bid", "b"
    # 24h change of the last price, in price units and in percent.
    CHANGE = 4, "change", "c"
    PERCENT_CHANGE = 5, "percent_change", "pc"
    VOLUME = 6, "volume", "v"
