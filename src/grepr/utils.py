"""Small helpers for terminating the CLI."""

from typing import NoReturn

import click
import typer


def fatal(message: str, code: int = 1) -> NoReturn:
    """Print ``message`` to stderr and exit with ``code``."""
    click.echo(message, err=True)
    raise typer.Exit(code)
