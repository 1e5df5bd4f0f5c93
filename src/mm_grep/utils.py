"""Small CLI helpers."""

import sys
from typing import NoReturn

import typer


def fatal(message: str) -> NoReturn:
    """Print a message to stderr and exit with code 1."""
    print(message, file=sys.stderr)  # noqa: T201
    raise typer.Exit(1)
