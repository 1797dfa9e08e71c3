"""Data model shared by the create, lint and cat commands."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from packaging.version import Version

from podsmith.utils.errors import LintFailuresError

# Version suggested when a repository has no usable release tags
FALLBACK_VERSION = "0.0.1"


class RefKind(Enum):
    """Kind of source-control pointer a spec's source uses."""

    TAG = "tag"
    COMMIT = "commit"


@dataclass(frozen=True)
class Tag:
    """A tag name paired with its parsed version (None when unparseable)."""

    name: str
    version: Version | None

    @property
    def is_versioned(self) -> bool:
        return self.version is not None


@dataclass(frozen=True)
class Branch:
    name: str
    commit_sha: str


@dataclass(frozen=True)
class RefSuggestion:
    """Suggested version and source ref for a new spec.

    Attributes:
        version: Version string to write into the spec
        ref_kind: Whether ref_value is a tag name or a commit sha
        ref_value: The tag name (original, unstripped) or the commit sha
    """

    version: str
    ref_kind: RefKind
    ref_value: str

    @property
    def is_fallback(self) -> bool:
        """True when no release tag was usable."""
        return self.version == FALLBACK_VERSION


@dataclass(frozen=True)
class RepositoryMetadata:
    """Repository information needed to prefill a spec."""

    name: str
    description: str
    homepage_url: str
    clone_url: str
    default_branch: str
    owner_display_name: str
    owner_email: str
    tags: tuple[str, ...] = ()
    branches: tuple[Branch, ...] = ()


@dataclass
class RenderableSpecData:
    """Values substituted into the podspec template.

    Attributes:
        notice: Semantic-versioning reminder to show the user, if any
    """

    name: str
    version: str
    summary: str
    homepage: str
    author_name: str
    author_email: str
    source_url: str
    ref_kind: RefKind
    ref_value: str
    license: str = "MIT (example)"
    notice: str | None = None

    @property
    def file_name(self) -> str:
        return f"{self.name}.podspec"


@dataclass(frozen=True)
class LintTarget:
    """A resolved, existing local spec file.

    Attributes:
        path: Absolute path of the file to validate
        remote_url: URL the file was downloaded from, for scratch copies
    """

    path: Path
    remote_url: str | None = None

    @property
    def name(self) -> str:
        return self.path.name


@dataclass(frozen=True)
class LintOptions:
    """Flags forwarded to the validator.

    Attributes:
        quick: Skip checks that need to download and build the spec
        local: Validate against the files next to the spec
        only_errors: Pass even if warnings are present
        clean: Remove build and scratch directories afterwards
    """

    quick: bool = False
    local: bool = False
    only_errors: bool = False
    clean: bool = True


@dataclass
class ValidationResult:
    """Verdict returned by a Validator for a single spec."""

    passed: bool
    validation_dir: Path
    diagnostics: list[str] = field(default_factory=list)


@dataclass
class LintResult:
    target: LintTarget
    passed: bool
    validation_dir: Path
    diagnostics: list[str] = field(default_factory=list)


def pluralize(count: int, word: str) -> str:
    """Return word with an 's' appended unless count is exactly one."""
    return word if count == 1 else f"{word}s"


@dataclass
class LintSummary:
    """Aggregate outcome of a lint run."""

    total: int = 0
    failed: int = 0
    results: list[LintResult] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return self.failed == 0

    def record(self, result: LintResult) -> None:
        self.results.append(result)
        self.total += 1
        if not result.passed:
            self.failed += 1

    def analyzed_message(self) -> str:
        return f"Analyzed {self.total} {pluralize(self.total, 'podspec')}."

    def success_message(self) -> str:
        if self.total == 1:
            return f"{self.results[0].target.name} passed validation."
        return "All the specs passed validation."

    def failure_message(self) -> str:
        if self.total == 1:
            return f"{self.results[0].target.name} did not pass validation."
        return (
            f"{self.failed} out of {self.total} {pluralize(self.total, 'spec')} "
            "failed validation."
        )

    def raise_for_failures(self) -> None:
        """Raise LintFailuresError if any target failed.

        Raises:
            LintFailuresError: Carries this summary and the count message
        """
        if not self.passed:
            raise LintFailuresError(self.failure_message(), summary=self)


__all__ = [
    "FALLBACK_VERSION",
    "RefKind",
    "Tag",
    "Branch",
    "RefSuggestion",
    "RepositoryMetadata",
    "RenderableSpecData",
    "LintTarget",
    "LintOptions",
    "ValidationResult",
    "LintResult",
    "LintSummary",
    "pluralize",
]
