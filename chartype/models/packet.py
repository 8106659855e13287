"""Packet data model."""

from pydantic import BaseModel, Field

from chartype.models.candle import Candle
from chartype.models.ticker import Ticker


class Packet(BaseModel):
    """Ticker information plus all known candles for one timeframe."""

    ticker: Ticker = Field(..., description="Latest quote snapshot")
    candles: list[Candle] = Field(default_factory=list, description="Candles in feed order")

    model_config = {"frozen": True}
