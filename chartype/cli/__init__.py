"""CLI commands for chartype.

This package provides the command-line interface for listing field
identifiers, converting field tokens and extracting values from records.
"""

from chartype.cli.main import cli, main

__all__ = ["cli", "main"]
