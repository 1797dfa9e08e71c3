"""Shared pytest fixtures for PODSMITH tests."""

from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from podsmith.config.settings import Settings
from podsmith.core.models import Branch, LintOptions, RepositoryMetadata, ValidationResult


@pytest.fixture
def temp_config_file(tmp_path: Path) -> Path:
    """Create a temporary config file with sample values."""
    config_file = tmp_path / ".podsmith-config"
    config_file.write_text(
        """# PODSMITH Configuration
GITHUB_API_URL="https://github.example.com/api/v3"
GITHUB_TOKEN="ghp_secret"
HTTP_TIMEOUT_SECONDS=15
HTTP_RETRY_DELAY_SECONDS='0.5'
VALIDATOR_COMMAND=pod
"""
    )
    return config_file


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    """Settings whose every directory lives under tmp_path."""
    return Settings(
        http_max_retries=0,
        http_retry_delay_seconds=0.0,
        lint_scratch_dir=str(tmp_path / "scratch"),
        validation_root=str(tmp_path / "validation"),
        spec_repos_dir=str(tmp_path / "repos"),
    )


@pytest.fixture
def mock_subprocess():
    """Mock subprocess.run for external command tests."""
    with patch("subprocess.run") as mock_run:
        mock_run.return_value = MagicMock(returncode=0, stdout="", stderr="")
        yield mock_run


@pytest.fixture
def spec_tree(tmp_path: Path) -> Path:
    """A project directory holding podspecs at several depths."""
    root = tmp_path / "project"
    (root / "nested" / "deeper").mkdir(parents=True)
    (root / "Alpha.podspec").write_text("Pod::Spec.new")
    (root / "nested" / "Beta.podspec").write_text("Pod::Spec.new")
    (root / "nested" / "deeper" / "Gamma.podspec").write_text("Pod::Spec.new")
    (root / "nested" / "README.md").write_text("not a spec")
    return root


@pytest.fixture
def spec_repos(tmp_path: Path) -> Path:
    """Two local spec repositories with overlapping pods.

    master (under Specs/): AFNetworking 1.0.0 and 1.2.0, JSONKit 1.4
    private (flat):        AFNetworking 2.0.0 (JSON spec), AFOAuth2 0.1.0
    """
    repos = tmp_path / "repos"

    master = repos / "master" / "Specs"
    for name, version in (("AFNetworking", "1.0.0"), ("AFNetworking", "1.2.0"), ("JSONKit", "1.4")):
        version_dir = master / name / version
        version_dir.mkdir(parents=True)
        (version_dir / f"{name}.podspec").write_text(f"# {name} {version} from master\n")

    private = repos / "private"
    af2 = private / "AFNetworking" / "2.0.0"
    af2.mkdir(parents=True)
    (af2 / "AFNetworking.podspec.json").write_text('{"name": "AFNetworking", "version": "2.0.0"}\n')
    oauth = private / "AFOAuth2" / "0.1.0"
    oauth.mkdir(parents=True)
    (oauth / "AFOAuth2.podspec").write_text("# AFOAuth2 0.1.0\n")

    return repos


@pytest.fixture
def repository_metadata() -> RepositoryMetadata:
    """Metadata of a repository with semantic version tags."""
    return RepositoryMetadata(
        name="Kiwi",
        description='A "BDD" library',
        homepage_url="https://kiwi.example.com",
        clone_url="https://github.com/allending/Kiwi.git",
        default_branch="master",
        owner_display_name="Allen Ding",
        owner_email="alding@example.com",
        tags=("v1.0.0", "v2.0.0", "1.5.0-beta"),
        branches=(Branch("master", "abc123"),),
    )


class FakeValidator:
    """Validator double that fails the file names it is told to fail."""

    def __init__(self, root: Path, failing: set[str] | None = None) -> None:
        self.root = root
        self.failing = failing or set()
        self.calls: list[tuple[Path, LintOptions]] = []

    def validate(self, path: Path, options: LintOptions) -> ValidationResult:
        self.calls.append((path, options))
        passed = path.name not in self.failing
        return ValidationResult(
            passed=passed,
            validation_dir=self.root / path.stem,
            diagnostics=[] if passed else [f"- ERROR | {path.stem}: missing source"],
        )


@pytest.fixture
def fake_validator(tmp_path: Path) -> FakeValidator:
    return FakeValidator(tmp_path / "validation")
