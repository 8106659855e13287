"""Field commands for chartype CLI.

Lists field identifiers and converts between tokens and codes.
"""

import click
from rich.markup import escape
from rich.table import Table

from chartype.cli.output import console, fail
from chartype.errors import ChartypeError
from chartype.fields import CandleField, TickerField

FIELD_KINDS = {
    "candle": CandleField,
    "ticker": TickerField,
}


def _fields_table(field_type) -> Table:
    table = Table(title=f"{field_type.label().title()} fields")
    table.add_column("Code", justify="right", style="cyan")
    table.add_column("Name")
    table.add_column("Long form", style="green")
    table.add_column("Short form", style="yellow")

    for member in field_type:
        table.add_row(str(member.code), member.name, member.token, ", ".join(member.aliases))

    return table


@click.command("fields")
@click.argument("kind", required=False, type=click.Choice(list(FIELD_KINDS)))
def fields(kind: str | None) -> None:
    """List field identifiers with their tokens.

    KIND limits the listing to candle or ticker fields.
    """
    kinds = [kind] if kind else list(FIELD_KINDS)
    for name in kinds:
        console.print(_fields_table(FIELD_KINDS[name]))


@click.command("decode")
@click.argument("kind", type=click.Choice(list(FIELD_KINDS)))
@click.argument("token")
@click.option("--json", "as_json", is_flag=True, help="TOKEN is a JSON string, e.g. '\"close\"'.")
def decode(kind: str, token: str, as_json: bool) -> None:
    """Resolve a long-form token or short alias to a field.

    \b
    Examples:
      chartype decode candle c
      chartype decode ticker PERCENT_CHANGE
      chartype decode ticker --json '"pc"'
    """
    field_type = FIELD_KINDS[kind]
    try:
        member = field_type.decode_json(token) if as_json else field_type.decode_text(token)
    except ChartypeError as e:
        fail(escape(str(e)))

    console.print(f"[bold]{member.token}[/bold] code={member.code}")


@click.command("encode")
@click.argument("kind", type=click.Choice(list(FIELD_KINDS)))
@click.argument("code", type=int)
@click.option("--json", "as_json", is_flag=True, help="Print a JSON string instead of text.")
def encode(kind: str, code: int, as_json: bool) -> None:
    """Print the long-form token of a field code."""
    field_type = FIELD_KINDS[kind]
    try:
        if as_json:
            click.echo(field_type.encode_json(code).decode("utf-8"))
        else:
            click.echo(field_type.encode_text(code))
    except ChartypeError as e:
        fail(escape(str(e)))
