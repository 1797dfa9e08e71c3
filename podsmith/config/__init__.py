"""Configuration management for PODSMITH.

This package contains:
- settings: Settings dataclass with configuration fields
- manager: ConfigManager class for loading configuration

Configuration Format
====================
Configuration files use flat KEY=VALUE lines (environment variable style):

    GITHUB_TOKEN=${GH_TOKEN}
    HTTP_TIMEOUT_SECONDS=15
    LINT_SCRATCH_DIR=/tmp/podsmith/lint_podspec
"""

from podsmith.config.manager import ConfigManager
from podsmith.config.settings import CONFIG_FILE, Settings

__all__ = [
    "Settings",
    "ConfigManager",
    "CONFIG_FILE",
]
