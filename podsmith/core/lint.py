"""Lint run orchestration.

Validates each target in turn, reports per-target outcomes and folds
them into a LintSummary. Individual failures never abort the run; only
the aggregate decides the command's outcome.
"""

from __future__ import annotations

import shutil
from collections.abc import Sequence
from pathlib import Path

from rich.markup import escape

from podsmith.core.models import (
    LintOptions,
    LintResult,
    LintSummary,
    LintTarget,
    ValidationResult,
)
from podsmith.integrations.validator import Validator
from podsmith.utils.console import console, print_step, print_success
from podsmith.utils.logging import log_message

# Location of the generated project inside a validation directory
INSPECTION_PROJECT = Path("Pods") / "Pods.xcodeproj"


class LintOrchestrator:
    """Drives the validator over a resolved target list.

    Attributes:
        scratch_dir: Shared download directory, removed when cleaning
    """

    def __init__(self, validator: Validator, scratch_dir: Path) -> None:
        self._validator = validator
        self.scratch_dir = scratch_dir

    def run(self, targets: Sequence[LintTarget], options: LintOptions) -> LintSummary:
        """Validate every target sequentially.

        The scratch directory is removed afterwards when options.clean is
        set, whatever the outcome.

        Returns:
            Summary with one result per target
        """
        summary = LintSummary()
        console.print()
        try:
            for target in targets:
                result = self._lint_one(target, options)
                summary.record(result)

                if not options.clean:
                    console.print(
                        f"Pods project available at "
                        f"`{result.validation_dir / INSPECTION_PROJECT}` for inspection.",
                        markup=False,
                        highlight=False,
                    )
                    console.print()
        finally:
            if options.clean:
                self.remove_scratch_dir()

        console.print(summary.analyzed_message())
        console.print()
        if summary.passed and summary.total:
            print_success(summary.success_message())
        log_message(f"Lint finished: {summary.failed} of {summary.total} failed")
        return summary

    def _lint_one(self, target: LintTarget, options: LintOptions) -> LintResult:
        name = escape(target.name)
        print_step(f"Validating {target.name}")
        try:
            verdict = self._validator.validate(target.path, options)
        except Exception as e:
            log_message(f"Validator error for {target.path}: {e}")
            verdict = ValidationResult(
                passed=False,
                validation_dir=target.path.parent,
                diagnostics=[str(e) or type(e).__name__],
            )

        status = "[green]passed[/green]" if verdict.passed else "[red]failed[/red]"
        console.print(f"  -> {name} {status}")
        for line in verdict.diagnostics:
            console.print(f"     {line}", markup=False, highlight=False)

        return LintResult(
            target=target,
            passed=verdict.passed,
            validation_dir=verdict.validation_dir,
            diagnostics=list(verdict.diagnostics),
        )

    def remove_scratch_dir(self) -> None:
        """Delete downloaded remote specs."""
        if self.scratch_dir.exists():
            shutil.rmtree(self.scratch_dir, ignore_errors=True)
            log_message(f"Removed lint scratch directory {self.scratch_dir}")


__all__ = [
    "INSPECTION_PROJECT",
    "LintOrchestrator",
]
