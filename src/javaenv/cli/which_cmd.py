"""Which command: show where a Java executable resolves to."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv

from javaenv.cli import cli_error, console
from javaenv.config import JAVA_HOME_VAR, PATH_VAR
from javaenv.service import get_environment

logger = logging.getLogger(__name__)


def which_command(
    name: str = typer.Argument("java", help="Binary name without extension."),
    env_file: Optional[Path] = typer.Option(
        None, "--env-file", "-e",
        help="Load JAVA_HOME/PATH from this .env file (existing variables win).",
    ),
) -> None:
    """Locate a Java binary on JAVA_HOME, then PATH."""
    if env_file is not None:
        if not env_file.exists():
            cli_error(f"Env file not found: {env_file}")
        load_dotenv(env_file, override=False)
        logger.debug("Loaded environment from %s", env_file)

    locator = get_environment().locator
    path = locator.find_executable(name)
    if not locator.was_found(name):
        cli_error(f"{path} not found on {JAVA_HOME_VAR} or {PATH_VAR}.")
    console.print(path, highlight=False, soft_wrap=True)
