"""Typer application and main entry point for the CLI.

Contains the Typer app, the version callback and subcommand registration.
"""

from typing import Annotated

import typer

from bigmama_starter.cli.init import init
from bigmama_starter.utils.console import show_version

app = typer.Typer(
    name="bigmama-starter",
    help="Bootstrap new projects with ease",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Display version and exit."""
    if value:
        show_version()
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version information",
        ),
    ] = None,
) -> None:
    """Bootstrap new projects with ease."""


app.command(name="init")(init)
