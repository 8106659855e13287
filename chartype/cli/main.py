"""Main CLI entry point for chartype.

This module provides the main click group and registers the field,
record and config commands on it.
"""

import logging
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.logging import RichHandler

from chartype.cli.fields import decode, encode, fields
from chartype.cli.records import extract, parse
from chartype.cli.settings import config

CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


def setup_logging(verbose: bool) -> None:
    """Route log records through rich, at DEBUG when verbose."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="chartype")
@click.option(
    "--config", "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Config file (default: ~/.config/chartype/config.toml)",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, config_path: Optional[Path], verbose: bool) -> None:
    """chartype - work with candle and ticker fields by name.

    \b
    Quick Start:
      chartype fields candle            # List candle fields and aliases
      chartype decode ticker pc         # Resolve a field token
      chartype extract candle bars.json # Print the configured field
    """
    setup_logging(verbose)
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path


for command in (fields, decode, encode, parse, extract, config):
    cli.add_command(command)


def main() -> None:
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
