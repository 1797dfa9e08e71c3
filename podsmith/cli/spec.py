"""The `spec` command group.

Each subcommand turns its arguments into a command variant and hands it
to dispatch(). Errors are reported here, once, as a single line.
"""

from typing import Annotated

import typer

from podsmith.commands.base import (
    CatCommand,
    CommandContext,
    CreateCommand,
    LintCommand,
    SpecCommand,
    dispatch,
)
from podsmith.config.manager import ConfigManager
from podsmith.config.settings import Settings
from podsmith.core.models import LintOptions
from podsmith.utils.console import print_error, print_info
from podsmith.utils.errors import ExitCode, PodsmithError, UserCancelledError
from podsmith.utils.logging import log_message

spec_app = typer.Typer(
    name="spec",
    help="Manage pod specs",
    no_args_is_help=True,
)


def _settings_for(ctx: typer.Context) -> Settings:
    # The root callback stores the loaded settings; load them when invoked standalone
    root = ctx.find_root()
    if isinstance(root.obj, Settings):
        return root.obj
    return ConfigManager().load()


def _execute(ctx: typer.Context, command: SpecCommand) -> None:
    """Dispatch command and translate errors into exit codes."""
    try:
        dispatch(command, CommandContext(settings=_settings_for(ctx)))

    except UserCancelledError as e:
        print_info(f"\n{e}")
        raise typer.Exit(ExitCode.USER_CANCELLED) from e

    except PodsmithError as e:
        log_message(f"{type(e).__name__}: {e}")
        print_error(str(e))
        raise typer.Exit(e.exit_code) from e

    except KeyboardInterrupt as e:
        print_info("\nOperation cancelled by user")
        raise typer.Exit(ExitCode.USER_CANCELLED) from e


@spec_app.command()
def create(
    ctx: typer.Context,
    name_or_url: Annotated[
        str | None,
        typer.Argument(
            help="Pod name, or a GitHub URL (https://github.com/USER/REPO) to prefill the spec",
        ),
    ] = None,
    url: Annotated[
        str | None,
        typer.Argument(help="GitHub URL to prefill from when NAME_OR_URL is a pod name"),
    ] = None,
) -> None:
    """Create a spec file stub.

    Writes NAME.podspec in the current directory. If a GitHub URL is
    given the spec is prefilled from the repository.
    """
    _execute(ctx, CreateCommand(name_or_url=name_or_url, url=url))


@spec_app.command()
def lint(
    ctx: typer.Context,
    targets: Annotated[
        list[str] | None,
        typer.Argument(
            help="Spec files, directories or URLs to validate (default: current directory)",
        ),
    ] = None,
    quick: Annotated[
        bool,
        typer.Option(
            "--quick",
            help="Lint skips checks that would require to download and build the spec",
        ),
    ] = False,
    local: Annotated[
        bool,
        typer.Option(
            "--local",
            help="Lint a spec against the local files contained in its directory",
        ),
    ] = False,
    only_errors: Annotated[
        bool,
        typer.Option(
            "--only-errors",
            help="Lint validates even if warnings are present",
        ),
    ] = False,
    clean: Annotated[
        bool,
        typer.Option(
            "--clean/--no-clean",
            help="Remove the build directory after linting (--no-clean keeps it for inspection)",
        ),
    ] = True,
) -> None:
    """Validate spec files.

    Exits with status 0 only if every target passed.
    """
    options = LintOptions(quick=quick, local=local, only_errors=only_errors, clean=clean)
    _execute(ctx, LintCommand(paths=tuple(targets or ()), options=options))


@spec_app.command()
def cat(
    ctx: typer.Context,
    name: Annotated[
        str | None,
        typer.Argument(help="Name of the pod to print"),
    ] = None,
) -> None:
    """Print the highest known version of a spec to standard output."""
    _execute(ctx, CatCommand(name=name))


__all__ = ["spec_app", "create", "lint", "cat"]
