import logging
import os
from importlib.metadata import version as pkg_version
from typing import Optional

import typer

from javaenv.cli import configure_logging
from javaenv.cli.config_cmd import config_command, javac_args_command
from javaenv.cli.which_cmd import which_command
from javaenv.config import JAVA_HOME_VAR, PATH_VAR

logger = logging.getLogger("javaenv")

app = typer.Typer(
    name="javaenv",
    help="Locate Java executables and resolve javaconfig.json settings.",
    no_args_is_help=True,
    invoke_without_command=True,
)

app.command("which")(which_command)
app.command("config")(config_command)
app.command("javac-args")(javac_args_command)


def version_callback(value: bool):
    if value:
        typer.echo(f"javaenv {pkg_version('javaenv')}")
        raise typer.Exit()


@app.callback()
def main(
    version: Optional[bool] = typer.Option(
        None, "--version", "-v", callback=version_callback, is_eager=True,
        help="Show version and exit.",
    ),
    debug: bool = typer.Option(
        False, "--debug", help="Log lookups, cache hits and the variables searched.",
    ),
):
    """Locate Java executables and resolve javaconfig.json settings."""
    configure_logging(debug)
    for var in (JAVA_HOME_VAR, PATH_VAR):
        logger.debug("%s=%s", var, os.environ.get(var, "<unset>"))


if __name__ == "__main__":
    app()
