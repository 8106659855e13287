"""Record commands for chartype CLI.

Parses raw feed tokens into candles and tickers, and extracts field values
from records stored as JSON.
"""

import json
import logging
from datetime import datetime
from decimal import Decimal
from typing import Any, Optional

import click
from pydantic import TypeAdapter, ValidationError
from rich.markup import escape

from chartype.cli.output import console, fail
from chartype.config import Config, load_config
from chartype.errors import ChartypeError
from chartype.fields import CandleField, TickerField, from_candles
from chartype.models import Candle, Packet, Ticker, parse_candle, parse_ticker

logger = logging.getLogger(__name__)

_candle_list = TypeAdapter(list[Candle])


def _get_config(ctx: click.Context) -> Config:
    """Load configuration from the path given to the CLI group."""
    config_path = (ctx.obj or {}).get("config_path")
    try:
        return load_config(config_path)
    except ChartypeError as e:
        fail(escape(str(e)))


def _read_json(file) -> Any:
    try:
        return json.load(file, parse_float=Decimal)
    except ValueError as e:
        fail(escape(f"Not valid JSON in {file.name}: {e}"))


def load_candles(data: Any) -> list[Candle]:
    """Build candles from a JSON array of candles or a packet object."""
    if isinstance(data, dict):
        return list(Packet.model_validate(data).candles)
    return _candle_list.validate_python(data)


def load_ticker(data: Any) -> Ticker:
    """Build a ticker from a ticker object or a packet object."""
    if isinstance(data, dict) and "ticker" in data:
        return Packet.model_validate(data).ticker
    return Ticker.model_validate(data)


@click.group("parse")
def parse() -> None:
    """Parse raw decimal strings into a record and print it as JSON.

    Prefix negative values with "--", e.g. `parse ticker -- 1 2 3 -0.5 -1 9`.
    """


@parse.command("candle")
@click.argument("timestamp")
@click.argument("open_", metavar="OPEN")
@click.argument("high")
@click.argument("low")
@click.argument("close")
@click.argument("volume")
def parse_candle_cmd(timestamp: str, open_: str, high: str, low: str, close: str, volume: str) -> None:
    """Parse a candle. TIMESTAMP is ISO 8601, e.g. 2024-01-15T09:30:00+00:00."""
    try:
        ts = datetime.fromisoformat(timestamp)
    except ValueError:
        fail(escape(f"invalid timestamp: {timestamp!r}"))

    try:
        candle = parse_candle(ts, open_, high, low, close, volume)
    except ChartypeError as e:
        fail(escape(str(e)))

    console.print_json(candle.model_dump_json())


@parse.command("ticker")
@click.argument("last")
@click.argument("ask")
@click.argument("bid")
@click.argument("change")
@click.argument("percent_change")
@click.argument("volume")
def parse_ticker_cmd(last: str, ask: str, bid: str, change: str, percent_change: str, volume: str) -> None:
    """Parse a ticker from its six decimal values."""
    try:
        ticker = parse_ticker(last, ask, bid, change, percent_change, volume)
    except ChartypeError as e:
        fail(escape(str(e)))

    console.print_json(ticker.model_dump_json())


@click.group("extract")
def extract() -> None:
    """Print one field of the records stored in a JSON file.

    FILE may be "-" to read from stdin. Without --field the field comes
    from the [extraction] section of the config file.
    """


@extract.command("candle")
@click.argument("file", type=click.File("r"))
@click.option("-f", "--field", "field_token", default=None, help="Candle field, e.g. close or c.")
@click.pass_context
def extract_candle(ctx: click.Context, file, field_token: Optional[str]) -> None:
    """Print a field of every candle in FILE, one value per line.

    FILE holds a JSON array of candles or a packet object.
    """
    try:
        if field_token is not None:
            field = CandleField.decode_text(field_token)
        else:
            field = _get_config(ctx).extraction.candle_field
        candles = load_candles(_read_json(file))
    except (ChartypeError, ValidationError) as e:
        fail(escape(str(e)))

    logger.debug("Extracting %s from %d candles", field, len(candles))
    for value in from_candles(candles, field):
        click.echo(str(value))


@extract.command("ticker")
@click.argument("file", type=click.File("r"))
@click.option("-f", "--field", "field_token", default=None, help="Ticker field, e.g. last or l.")
@click.pass_context
def extract_ticker(ctx: click.Context, file, field_token: Optional[str]) -> None:
    """Print a field of the ticker in FILE (a ticker or packet object)."""
    try:
        if field_token is not None:
            field = TickerField.decode_text(field_token)
        else:
            field = _get_config(ctx).extraction.ticker_field
        ticker = load_ticker(_read_json(file))
    except (ChartypeError, ValidationError) as e:
        fail(escape(str(e)))

    logger.debug("Extracting %s from ticker", field)
    click.echo(str(TickerField.extract(field, ticker)))
