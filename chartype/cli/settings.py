"""Config command for chartype CLI."""

from typing import Optional

import click
from pydantic import ValidationError
from rich.markup import escape
from rich.panel import Panel

from chartype.cli.output import console, fail
from chartype.config import DEFAULT_CONFIG_PATH, Config, load_config, save_config
from chartype.errors import ChartypeError


@click.command("config")
@click.option("--candle-field", default=None, help="Default candle field (e.g. close, c).")
@click.option("--ticker-field", default=None, help="Default ticker field (e.g. last, l).")
@click.pass_context
def config(ctx: click.Context, candle_field: Optional[str], ticker_field: Optional[str]) -> None:
    """Show the configuration, or update default extraction fields.

    \b
    Examples:
      chartype config                       # Show current settings
      chartype config --candle-field h      # Extract highs by default
    """
    config_path = (ctx.obj or {}).get("config_path") or DEFAULT_CONFIG_PATH

    try:
        current = load_config(config_path)
    except ChartypeError as e:
        fail(escape(str(e)))

    updates = {}
    if candle_field is not None:
        updates["candle_field"] = candle_field
    if ticker_field is not None:
        updates["ticker_field"] = ticker_field

    if updates:
        try:
            current = Config.model_validate({
                "extraction": {**current.extraction.model_dump(), **updates},
            })
        except ValidationError as e:
            fail(escape(str(e)))
        save_config(current, config_path)

    extraction = current.extraction
    console.print(Panel(
        f"Candle field: [green]{extraction.candle_field}[/green]\n"
        f"Ticker field: [green]{extraction.ticker_field}[/green]",
        title=f"[bold]{escape(str(config_path))}[/bold]",
        border_style="green" if updates else "blue",
    ))
