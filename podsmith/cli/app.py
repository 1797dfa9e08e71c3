"""Typer application and main entry point for the CLI.

Contains the root Typer app, its callback and the version callback.
"""

from typing import Annotated

import typer

from podsmith.cli.spec import spec_app
from podsmith.config.manager import ConfigManager
from podsmith.utils.console import show_version
from podsmith.utils.logging import setup_logging

# Create Typer app
app = typer.Typer(
    name="podsmith",
    help="PODSMITH - Create, lint and inspect CocoaPods specs",
    add_completion=False,
    no_args_is_help=True,
)
app.add_typer(spec_app, name="spec")


def version_callback(value: bool) -> None:
    """Display version and exit."""
    if value:
        show_version()
        raise typer.Exit()


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    show_config: Annotated[
        bool,
        typer.Option(
            "--config",
            help="Show current configuration and exit",
        ),
    ] = False,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-v",
            callback=version_callback,
            is_eager=True,
            help="Show version information",
        ),
    ] = None,
) -> None:
    """PODSMITH - Create, lint and inspect CocoaPods specs."""
    setup_logging()

    config = ConfigManager()
    ctx.obj = config.load()

    if show_config:
        config.show()
        raise typer.Exit()

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


__all__ = ["app", "main", "version_callback"]
