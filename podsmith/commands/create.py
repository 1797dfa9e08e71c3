"""Handler for `spec create`."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from podsmith.core.create import SpecCreateOrchestrator
from podsmith.core.template import render_podspec
from podsmith.integrations.github import GitHubClient
from podsmith.utils.console import console, print_raw, print_success
from podsmith.utils.errors import UsageError
from podsmith.utils.logging import log_message

if TYPE_CHECKING:
    from podsmith.commands.base import CommandContext, CreateCommand


def run_create(command: CreateCommand, context: CommandContext) -> Path:
    """Write `<name>.podspec` into the context directory.

    Returns:
        Path of the written spec

    Raises:
        UsageError: If no pod name or URL was given
        RemoteFetchError: If GitHub metadata cannot be fetched
        NoDefaultBranchError: If no ref can be suggested
    """
    if not command.name_or_url:
        raise UsageError("A pod name or repo URL is required.")

    with GitHubClient.from_settings(context.settings) as client:
        orchestrator = SpecCreateOrchestrator(client)
        data = orchestrator.create(command.name_or_url, command.url)

    if data.notice:
        print_raw(data.notice)

    destination = context.cwd / data.file_name
    destination.write_text(render_podspec(data), encoding="utf-8")
    log_message(f"Wrote {destination}")

    console.print()
    print_success(f"Specification created at {data.file_name}")
    return destination


__all__ = ["run_create"]
