"""Spec validation through the CocoaPods command line.

The lint orchestrator treats validation as a black box: a spec path and
LintOptions go in, a ValidationResult comes out. PodValidator fulfils
that contract by running `pod spec lint` (or `pod lib lint` for local
validation) in a dedicated working directory per spec.
"""

from __future__ import annotations

import shutil
import subprocess
from pathlib import Path
from typing import Protocol

from podsmith.core.models import LintOptions, ValidationResult
from podsmith.utils.errors import ValidatorNotInstalledError
from podsmith.utils.logging import log_command, log_message


class Validator(Protocol):
    """Anything able to validate one spec file."""

    def validate(self, path: Path, options: LintOptions) -> ValidationResult: ...


def _spec_stem(path: Path) -> str:
    # Foo.podspec.json -> Foo
    return path.name.split(".podspec", 1)[0] or path.stem


class PodValidator:
    """Validator backed by the `pod` executable.

    Attributes:
        command: Executable to invoke (default "pod")
        validation_root: Parent directory of per-spec working directories
        timeout_seconds: Per-spec limit, None for no limit
    """

    def __init__(
        self,
        validation_root: Path,
        command: str = "pod",
        timeout_seconds: float | None = None,
    ) -> None:
        self.validation_root = validation_root
        self.command = command
        self.timeout_seconds = timeout_seconds

    def ensure_available(self) -> None:
        """Fail early when the validator executable is not installed.

        Raises:
            ValidatorNotInstalledError: If the command is not in PATH
        """
        if shutil.which(self.command) is None:
            raise ValidatorNotInstalledError(
                f"`{self.command}' was not found in PATH. "
                "Install CocoaPods or set VALIDATOR_COMMAND."
            )

    def validation_dir_for(self, path: Path) -> Path:
        return self.validation_root / _spec_stem(path)

    def build_command(self, path: Path, options: LintOptions) -> list[str]:
        """Translate LintOptions into a `pod ... lint` invocation."""
        command = [self.command, "lib" if options.local else "spec", "lint", str(path)]
        if options.quick:
            command.append("--quick")
        if options.only_errors:
            command.append("--allow-warnings")
        if not options.clean:
            command.append("--no-clean")
        return command

    def validate(self, path: Path, options: LintOptions) -> ValidationResult:
        validation_dir = self.validation_dir_for(path)
        validation_dir.mkdir(parents=True, exist_ok=True)
        command = self.build_command(path, options)

        try:
            result = subprocess.run(
                command,
                cwd=validation_dir,
                capture_output=True,
                encoding="utf-8",
                errors="replace",
                stdin=subprocess.DEVNULL,
                timeout=self.timeout_seconds,
            )
        except subprocess.TimeoutExpired:
            log_command(" ".join(command), -1)
            return ValidationResult(
                passed=False,
                validation_dir=validation_dir,
                diagnostics=[f"Validation timed out after {self.timeout_seconds}s"],
            )
        except OSError as e:
            log_message(f"Failed to run validator for {path}: {e}")
            return ValidationResult(
                passed=False,
                validation_dir=validation_dir,
                diagnostics=[f"Failed to run `{self.command}': {e}"],
            )

        log_command(" ".join(command), result.returncode)
        output = "\n".join(part for part in (result.stdout, result.stderr) if part)
        diagnostics = [line.rstrip() for line in output.splitlines() if line.strip()]
        return ValidationResult(
            passed=result.returncode == 0,
            validation_dir=validation_dir,
            diagnostics=diagnostics,
        )


__all__ = [
    "PodValidator",
    "Validator",
]
