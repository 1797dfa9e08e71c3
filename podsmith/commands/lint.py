"""Handler for `spec lint`."""

from __future__ import annotations

from typing import TYPE_CHECKING

from podsmith.core.lint import LintOrchestrator
from podsmith.core.models import LintSummary
from podsmith.core.targets import TargetSetExpander
from podsmith.integrations.http import Downloader, build_http_client
from podsmith.integrations.validator import PodValidator

if TYPE_CHECKING:
    from podsmith.commands.base import CommandContext, LintCommand


def run_lint(command: LintCommand, context: CommandContext) -> LintSummary:
    """Resolve the targets, validate each and fail on any failure.

    Raises:
        ValidatorNotInstalledError: Before any target is touched
        SpecNotFoundError: A file target is missing
        NoSpecsInDirectoryError: A directory target holds no specs
        RemoteFetchError: A remote target could not be downloaded
        LintFailuresError: At least one target failed validation
    """
    settings = context.settings
    validator = PodValidator(
        settings.validation_root_dir,
        command=settings.validator_command,
        timeout_seconds=settings.validator_timeout_seconds or None,
    )
    validator.ensure_available()
    orchestrator = LintOrchestrator(validator, settings.scratch_dir)

    try:
        with build_http_client(settings.http_timeout_seconds) as http_client:
            downloader = Downloader(http_client, settings.retry_policy())
            expander = TargetSetExpander(settings.scratch_dir, downloader)
            targets = expander.expand(list(command.paths))
    except Exception:
        # Downloads made before a later target failed to resolve
        if command.options.clean:
            orchestrator.remove_scratch_dir()
        raise

    summary = orchestrator.run(targets, command.options)
    summary.raise_for_failures()
    return summary


__all__ = ["run_lint"]
