"""Config commands: show the javaconfig.json governing a source file."""

from __future__ import annotations

import logging
from pathlib import Path

import typer
from pydantic import ValidationError
from rich.table import Table

from javaenv.cli import cli_error, console, workspace_option
from javaenv.compiler.options import compiler_options
from javaenv.core.models import Found, JavaConfig
from javaenv.service import get_environment

logger = logging.getLogger(__name__)


def _load(workspace: Path, source_file: Path) -> tuple[Found | None, JavaConfig]:
    resolver = get_environment().resolver
    try:
        location = resolver.locate(workspace, source_file)
        config = resolver.load(location)
    except ValidationError as exc:
        cli_error(f"Invalid javaconfig.json: {exc}")
    except OSError as exc:
        cli_error(f"Could not read configuration: {exc}")
    logger.debug("Resolved %s to %s", source_file, location)
    return (location if isinstance(location, Found) else None), config


def config_command(
    source_file: Path = typer.Argument(..., help="Source file, absolute or relative to the workspace."),
    workspace: Path = workspace_option(),
    as_json: bool = typer.Option(False, "--json", help="Print the resolved config as JSON."),
) -> None:
    """Show the configuration that applies to SOURCE_FILE."""
    location, config = _load(workspace, source_file)

    if as_json:
        typer.echo(config.model_dump_json(by_alias=True, indent=2))
        return

    if location is None:
        console.print("[yellow]No javaconfig.json found, using defaults.[/yellow]")
    else:
        console.print(f"[bold]Config:[/bold] {location.path}", highlight=False, soft_wrap=True)

    table = Table(show_header=True)
    table.add_column("Setting", style="cyan")
    table.add_column("Value")
    table.add_row("sourcePath", "\n".join(str(p) for p in config.source_path))
    table.add_row("outputDirectory", str(config.output_directory))
    table.add_row("classPath", "\n".join(config.class_path) or "[dim](empty)[/dim]")
    console.print(table)


def javac_args_command(
    source_file: Path = typer.Argument(..., help="Source file, absolute or relative to the workspace."),
    workspace: Path = workspace_option(),
) -> None:
    """Print the compiler options for SOURCE_FILE, one per line."""
    _, config = _load(workspace, source_file)
    for option in compiler_options(config):
        typer.echo(option)
