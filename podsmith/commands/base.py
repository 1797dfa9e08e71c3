"""Command variants and dispatch.

Each `spec` subcommand is a frozen dataclass describing one invocation.
`dispatch()` routes a command to its handler together with the shared
CommandContext.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from podsmith.config.settings import Settings
from podsmith.core.models import LintOptions
from podsmith.utils.logging import log_message


@dataclass(frozen=True)
class CreateCommand:
    """`spec create [NAME_OR_URL] [URL]`."""

    name_or_url: str | None = None
    url: str | None = None


@dataclass(frozen=True)
class LintCommand:
    """`spec lint [TARGET...]` with its validator flags."""

    paths: tuple[str, ...] = ()
    options: LintOptions = field(default_factory=LintOptions)


@dataclass(frozen=True)
class CatCommand:
    """`spec cat NAME`."""

    name: str | None = None


SpecCommand = CreateCommand | LintCommand | CatCommand


@dataclass
class CommandContext:
    """State shared by every command handler.

    Attributes:
        settings: Effective configuration
        cwd: Directory that created specs are written to
    """

    settings: Settings = field(default_factory=Settings)
    cwd: Path = field(default_factory=Path.cwd)


def dispatch(command: SpecCommand, context: CommandContext) -> object:
    """Run the handler for command.

    Returns:
        Whatever the handler returns (written path, lint summary, ...)

    Raises:
        PodsmithError: Propagated from the handler
    """
    # Handlers import this module for their annotations
    from podsmith.commands.cat import run_cat
    from podsmith.commands.create import run_create
    from podsmith.commands.lint import run_lint

    log_message(f"Dispatching {command!r}")
    match command:
        case CreateCommand():
            return run_create(command, context)
        case LintCommand():
            return run_lint(command, context)
        case CatCommand():
            return run_cat(command, context)
        case _:
            raise TypeError(f"Unknown command: {command!r}")


__all__ = [
    "CatCommand",
    "CommandContext",
    "CreateCommand",
    "LintCommand",
    "SpecCommand",
    "dispatch",
]
