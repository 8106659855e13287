"""Data models for chartype."""

from chartype.models.candle import Candle, parse_candle
from chartype.models.packet import Packet
from chartype.models.ticker import Ticker, parse_ticker

__all__ = [
    "Candle",
    "Ticker",
    "Packet",
    "parse_candle",
    "parse_ticker",
]
