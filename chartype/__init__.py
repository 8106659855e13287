"""chartype - typed candle and ticker records with fields addressable by name.

Quick start::

    from chartype import CandleField, from_candles, parse_candle

    field = CandleField.decode_text("c")
    closes = from_candles(candles, field)
"""

from chartype.config import Config, ExtractionConfig, load_config, save_config
from chartype.errors import (
    ChartypeError,
    ConfigError,
    DecimalParseError,
    InvalidFieldError,
    MalformedPayloadError,
)
from chartype.fields import CandleField, TickerField, from_candles
from chartype.models import Candle, Packet, Ticker, parse_candle, parse_ticker

__version__ = "0.1.0"

__all__ = [
    # Fields
    "CandleField",
    "TickerField",
    "from_candles",
    # Models
    "Candle",
    "Ticker",
    "Packet",
    "parse_candle",
    "parse_ticker",
    # Config
    "Config",
    "ExtractionConfig",
    "load_config",
    "save_config",
    # Errors
    "ChartypeError",
    "InvalidFieldError",
    "MalformedPayloadError",
    "DecimalParseError",
    "ConfigError",
]
