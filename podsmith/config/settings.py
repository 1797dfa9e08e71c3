"""Settings dataclass for PODSMITH configuration.

This module defines the Settings dataclass that holds all configuration
values and the mapping between config-file keys and attributes.
"""

from __future__ import annotations

import tempfile
from dataclasses import dataclass, field
from pathlib import Path

from podsmith.utils.retry import RetryPolicy

# Process-wide scratch area; concurrent runs against the same path are not safe
DEFAULT_SCRATCH_ROOT = Path(tempfile.gettempdir()) / "podsmith"


@dataclass
class Settings:
    """Configuration settings for PODSMITH.

    All settings have sensible defaults and can be loaded from
    the configuration file (~/.podsmith-config).

    Attributes:
        github_api_url: Base URL of the GitHub REST API
        github_token: Optional token for authenticated API calls
        http_timeout_seconds: Timeout applied to every network operation
        http_max_retries: Retries for transient network failures
        http_retry_delay_seconds: Base delay for retry backoff
        lint_scratch_dir: Where remote lint targets are downloaded
        validation_root: Parent of the per-target validation directories
        validator_command: Executable used to validate specs
        validator_timeout_seconds: Per-target validation limit (0 = none)
        spec_repos_dir: Directory holding the local spec repositories
    """

    # GitHub settings
    github_api_url: str = "https://api.github.com"
    github_token: str = ""

    # Network settings
    http_timeout_seconds: int = 30
    http_max_retries: int = 2
    http_retry_delay_seconds: float = 1.0

    # Lint settings
    lint_scratch_dir: str = str(DEFAULT_SCRATCH_ROOT / "lint_podspec")
    validation_root: str = str(DEFAULT_SCRATCH_ROOT / "validation")
    validator_command: str = "pod"
    validator_timeout_seconds: int = 0

    # Search index settings
    spec_repos_dir: str = str(Path.home() / ".cocoapods" / "repos")

    # Config key to attribute mapping
    _key_mapping: dict[str, str] = field(
        default_factory=lambda: {
            "GITHUB_API_URL": "github_api_url",
            "GITHUB_TOKEN": "github_token",
            "HTTP_TIMEOUT_SECONDS": "http_timeout_seconds",
            "HTTP_MAX_RETRIES": "http_max_retries",
            "HTTP_RETRY_DELAY_SECONDS": "http_retry_delay_seconds",
            "LINT_SCRATCH_DIR": "lint_scratch_dir",
            "VALIDATION_ROOT": "validation_root",
            "VALIDATOR_COMMAND": "validator_command",
            "VALIDATOR_TIMEOUT_SECONDS": "validator_timeout_seconds",
            "SPEC_REPOS_DIR": "spec_repos_dir",
        },
        repr=False,
    )

    def get_attribute_for_key(self, key: str) -> str | None:
        """Get the attribute name for a config key.

        Args:
            key: Configuration key (e.g., "GITHUB_TOKEN")

        Returns:
            Attribute name or None if key is unknown
        """
        return self._key_mapping.get(key)

    def get_key_for_attribute(self, attr: str) -> str | None:
        """Get the config key for an attribute name."""
        for key, value in self._key_mapping.items():
            if value == attr:
                return key
        return None

    @classmethod
    def get_config_keys(cls) -> list[str]:
        """Get list of all valid configuration keys."""
        temp = cls()
        return list(temp._key_mapping.keys())

    @property
    def scratch_dir(self) -> Path:
        return Path(self.lint_scratch_dir).expanduser()

    @property
    def validation_root_dir(self) -> Path:
        return Path(self.validation_root).expanduser()

    @property
    def spec_repos_path(self) -> Path:
        return Path(self.spec_repos_dir).expanduser()

    def retry_policy(self) -> RetryPolicy:
        """Build the retry policy for network calls."""
        return RetryPolicy(
            max_retries=max(self.http_max_retries, 0),
            base_delay_seconds=max(self.http_retry_delay_seconds, 0.0),
        )


# Default configuration file path
CONFIG_FILE = Path.home() / ".podsmith-config"


__all__ = [
    "Settings",
    "CONFIG_FILE",
    "DEFAULT_SCRATCH_ROOT",
]
