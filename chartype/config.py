"""Configuration for chartype.

Settings live in ``~/.config/chartype/config.toml``::

    [extraction]
    candle_field = "close"
    ticker_field = "last"

Field names accept the long form or the short alias in any case.
"""

import logging
from pathlib import Path
from typing import Optional

import toml
from pydantic import BaseModel, Field, ValidationError, field_serializer, field_validator

from chartype.errors import ConfigError
from chartype.fields import CandleField, TickerField

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "chartype" / "config.toml"


class ExtractionConfig(BaseModel):
    """Default fields used when extracting values from records."""

    candle_field: CandleField = Field(
        default=CandleField.CLOSE, description="Candle field to extract"
    )
    ticker_field: TickerField = Field(
        default=TickerField.LAST, description="Ticker field to extract"
    )

    model_config = {"frozen": True}

    @field_validator("candle_field", mode="before")
    @classmethod
    def _decode_candle_field(cls, value):
        if isinstance(value, (str, bytes)):
            return CandleField.decode_text(value)
        return CandleField.validate(value)

    @field_validator("ticker_field", mode="before")
    @classmethod
    def _decode_ticker_field(cls, value):
        if isinstance(value, (str, bytes)):
            return TickerField.decode_text(value)
        return TickerField.validate(value)

    @field_serializer("candle_field")
    def _encode_candle_field(self, value: CandleField) -> str:
        return CandleField.encode_text(value)

    @field_serializer("ticker_field")
    def _encode_ticker_field(self, value: TickerField) -> str:
        return TickerField.encode_text(value)


class Config(BaseModel):
    """Top-level chartype configuration."""

    extraction: ExtractionConfig = Field(default_factory=ExtractionConfig)

    model_config = {"frozen": True}


def load_config(path: Optional[Path] = None) -> Config:
    """Load configuration from a TOML file.

    Args:
        path: Config file path. Defaults to DEFAULT_CONFIG_PATH.

    Returns:
        The loaded config, or defaults if the file does not exist.

    Raises:
        ConfigError: If the file can't be read or holds invalid settings.
    """
    config_path = Path(path) if path is not None else DEFAULT_CONFIG_PATH

    if not config_path.exists():
        logger.debug("No config at %s, using defaults", config_path)
        return Config()

    logger.debug("Loading config from %s", config_path)
    try:
        data = toml.load(config_path)
    except (OSError, toml.TomlDecodeError) as e:
        raise ConfigError(f"can't read {config_path}: {e}") from e

    try:
        return Config.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"invalid settings in {config_path}: {e}") from e


def save_config(config: Config, path: Optional[Path] = None) -> Path:
    """Write configuration as TOML, creating parent directories.

    Returns:
        The path written to.
    """
    config_path = Path(path) if path is not None else DEFAULT_CONFIG_PATH
    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, "w") as f:
        toml.dump(config.model_dump(), f)

    logger.debug("Wrote config to %s", config_path)
    return config_path
