"""Shared rich output for chartype CLI commands."""

from typing import NoReturn

from rich.console import Console
from rich.panel import Panel

# Console for rich output
console = Console()


def fail(message: str) -> NoReturn:
    """Print an error panel and exit with status 1."""
    console.print(Panel(
        f"[red]{message}[/red]",
        title="[bold red]Error[/bold red]",
        border_style="red",
    ))
    raise SystemExit(1)
