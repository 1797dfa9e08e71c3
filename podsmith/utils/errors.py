"""Custom exceptions and exit codes for PODSMITH.

This module defines the exit codes and exception hierarchy used throughout
the application. Every error surfaces to the user as a single line.
"""

from __future__ import annotations

from enum import IntEnum
from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from podsmith.core.models import LintSummary


class ExitCode(IntEnum):
    """Exit codes reported by the CLI.

    These codes are used for consistent error reporting and can be
    checked by calling scripts or CI systems.
    """

    SUCCESS = 0
    GENERAL_ERROR = 1
    USAGE_ERROR = 2  # Same code Typer/Click use for bad invocations
    SPEC_NOT_FOUND = 3
    USER_CANCELLED = 4
    REMOTE_ERROR = 5
    LINT_FAILED = 6


class PodsmithError(Exception):
    """Base exception for PODSMITH errors.

    All custom exceptions in this application should inherit from this class.
    Each exception type has an associated exit code for proper error reporting.

    Attributes:
        exit_code: The exit code to use when this exception causes program termination
    """

    _default_exit_code: ClassVar[ExitCode] = ExitCode.GENERAL_ERROR

    def __init__(self, message: str, exit_code: ExitCode | None = None) -> None:
        """Initialize the exception.

        Args:
            message: Error message describing what went wrong
            exit_code: Optional override for the default exit code
        """
        super().__init__(message)
        self._exit_code = exit_code

    @property
    def exit_code(self) -> ExitCode:
        """Get the exit code for this exception.

        Returns:
            The instance exit code if set, otherwise the class default exit code.
        """
        if self._exit_code is not None:
            return self._exit_code
        return self.__class__._default_exit_code


class UsageError(PodsmithError):
    """A required argument is missing or malformed.

    Raised before any side effect takes place.
    """

    _default_exit_code: ClassVar[ExitCode] = ExitCode.USAGE_ERROR


class SpecNotFoundError(PodsmithError):
    """A named local spec does not exist or lacks the spec extension.

    Attributes:
        path: The path the user supplied
    """

    _default_exit_code: ClassVar[ExitCode] = ExitCode.SPEC_NOT_FOUND

    def __init__(self, path: str, message: str | None = None) -> None:
        self.path = path
        super().__init__(message or f"Unable to find a spec named `{path}'.")


class NoSpecsInDirectoryError(PodsmithError):
    """A directory input yielded zero podspec files.

    Attributes:
        directory: The directory that was scanned
    """

    _default_exit_code: ClassVar[ExitCode] = ExitCode.SPEC_NOT_FOUND

    def __init__(self, directory: str) -> None:
        self.directory = directory
        if directory in (".", "./"):
            message = "No specs found in the current directory."
        else:
            message = f"No specs found in directory `{directory}'."
        super().__init__(message)


class SpecLookupError(PodsmithError):
    """Search index lookup returned zero or several candidates.

    Attributes:
        query: The name that was searched for
        candidates: Names of every matching pod (empty when none matched)
    """

    _default_exit_code: ClassVar[ExitCode] = ExitCode.SPEC_NOT_FOUND

    def __init__(self, query: str, candidates: list[str] | None = None) -> None:
        self.query = query
        self.candidates = list(candidates or [])
        if not self.candidates:
            message = f"Unable to find a spec named `{query}'."
        else:
            message = f"More than one fitting spec found: {', '.join(self.candidates)}"
        super().__init__(message)


class NoDefaultBranchError(PodsmithError):
    """Fallback ref resolution found no branch with the default branch name.

    Attributes:
        branch_name: The branch name that was looked up
    """

    def __init__(self, branch_name: str) -> None:
        self.branch_name = branch_name
        super().__init__(
            f"Unable to find the default branch `{branch_name}' to suggest a commit."
        )


class LintFailuresError(PodsmithError):
    """One or more lint targets failed validation.

    This is an aggregate, expected outcome: every target was processed.

    Attributes:
        summary: The LintSummary of the run
    """

    _default_exit_code: ClassVar[ExitCode] = ExitCode.LINT_FAILED

    def __init__(self, message: str, summary: LintSummary) -> None:
        self.summary = summary
        super().__init__(message)


class RemoteFetchError(PodsmithError):
    """Fetching remote data failed.

    Raised when:
    - A repository or file is not found
    - The API rate limit is exhausted
    - The transport fails

    Attributes:
        status_code: HTTP status code when the server answered, else None
    """

    _default_exit_code: ClassVar[ExitCode] = ExitCode.REMOTE_ERROR

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        exit_code: ExitCode | None = None,
    ) -> None:
        self.status_code = status_code
        super().__init__(message, exit_code)


class RemoteTimeoutError(RemoteFetchError):
    """A network operation exceeded the configured timeout."""


class ValidatorNotInstalledError(PodsmithError):
    """The external validator command is not available in PATH."""


class UserCancelledError(PodsmithError):
    """User cancelled the operation (e.g. pressed Ctrl+C)."""

    _default_exit_code: ClassVar[ExitCode] = ExitCode.USER_CANCELLED


__all__ = [
    "ExitCode",
    "PodsmithError",
    "UsageError",
    "SpecNotFoundError",
    "NoSpecsInDirectoryError",
    "SpecLookupError",
    "NoDefaultBranchError",
    "LintFailuresError",
    "RemoteFetchError",
    "RemoteTimeoutError",
    "ValidatorNotInstalledError",
    "UserCancelledError",
]
