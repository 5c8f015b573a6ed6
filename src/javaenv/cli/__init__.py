"""CLI shared utilities: helpers used across all commands."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import NoReturn

import typer
from rich.console import Console

console = Console()


def cli_error(message: str) -> NoReturn:
    """Print a red error message and exit with code 1."""
    console.print(f"[red]{message}[/red]")
    raise typer.Exit(code=1)


def workspace_option():
    return typer.Option(
        Path("."), "--workspace", "-w",
        help="Workspace root; javaconfig.json is never searched above it.",
    )


def configure_logging(debug: bool) -> None:
    """Send ``javaenv`` records to stderr; DEBUG with ``--debug``, WARNING otherwise."""
    logging.basicConfig(level=logging.WARNING, format="%(name)s %(levelname)s: %(message)s")
    logging.getLogger("javaenv").setLevel(logging.DEBUG if debug else logging.WARNING)
