"""Configuration loading for PODSMITH.

Settings are layered, later layers winning:

    1. Built-in defaults (the Settings dataclass)
    2. Global config, ~/.podsmith-config
    3. Local config, the nearest .podsmith between CWD and the repository root
    4. Environment variables, for known keys only

Config files hold KEY=VALUE lines. Values may be single- or double-quoted
and may reference ``${VAR}`` environment variables. Files are never
executed.
"""

from __future__ import annotations

import logging
import os
import re
from pathlib import Path

from rich.markup import escape

from podsmith.config.settings import CONFIG_FILE, Settings
from podsmith.utils.console import console, print_header, print_info
from podsmith.utils.env_utils import expand_env_vars, mask_value
from podsmith.utils.logging import log_message

logger = logging.getLogger(__name__)

_ASSIGNMENT = re.compile(r"^(?P<key>[A-Za-z_]\w*)=(?P<value>.*)$")
_TRUTHY = frozenset({"true", "1", "yes"})


def read_config_file(path: Path) -> dict[str, str]:
    """Return the KEY=VALUE assignments in path, quotes removed.

    Blank lines, comments and anything that is not an assignment are
    skipped. A key assigned twice keeps its last value.
    """
    values: dict[str, str] = {}
    for raw_line in path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        match = _ASSIGNMENT.match(line)
        if match is None:
            continue
        value = match["value"]
        if len(value) >= 2 and value[0] == value[-1] and value[0] in "'\"":
            value = value[1:-1]
        values[match["key"]] = value
    return values


def _coerce(key: str, raw: str, default: object) -> object:
    """Convert raw to the type of default; keep default when it does not parse."""
    if isinstance(default, bool):
        return raw.lower() in _TRUTHY
    for kind in (int, float):
        if isinstance(default, kind):
            try:
                return kind(raw)
            except ValueError:
                logger.warning(f"Ignoring invalid {kind.__name__} value for {key}")
                return default
    return raw


class ConfigManager:
    """Loads Settings from defaults, config files and the environment.

    Attributes:
        settings: Result of the last load()
        global_config_path: The user-wide config file
        local_config_path: The project config file found by load(), if any
    """

    LOCAL_CONFIG_NAME = ".podsmith"

    def __init__(self, global_config_path: Path | None = None) -> None:
        self.global_config_path = global_config_path or CONFIG_FILE
        self.local_config_path: Path | None = None
        self.settings = Settings()
        self._raw_values: dict[str, str] = {}
        self._config_sources: dict[str, str] = {}

    def load(self) -> Settings:
        """Build fresh Settings from every layer.

        Each call starts over from defaults, so values removed from a file
        since the previous load do not linger.
        """
        self.local_config_path = self._find_local_config()
        self._raw_values = {}
        self._config_sources = {}

        for source, values in self._layers():
            self._raw_values.update(values)
            self._config_sources.update(dict.fromkeys(values, source))

        settings = Settings()
        for key, raw in self._raw_values.items():
            attr = settings.get_attribute_for_key(key)
            if attr is not None:
                value = expand_env_vars(raw, context=key)
                setattr(settings, attr, _coerce(key, value, getattr(settings, attr)))

        self.settings = settings
        log_message(f"Configuration loaded ({len(self._raw_values)} keys)")
        return settings

    def _layers(self) -> list[tuple[str, dict[str, str]]]:
        layers = []
        if self.global_config_path.is_file():
            log_message(f"Reading global configuration from {self.global_config_path}")
            layers.append(("global", read_config_file(self.global_config_path)))
        if self.local_config_path is not None:
            log_message(f"Reading local configuration from {self.local_config_path}")
            layers.append(
                (f"local ({self.local_config_path})", read_config_file(self.local_config_path))
            )
        environment = {
            key: os.environ[key] for key in Settings.get_config_keys() if key in os.environ
        }
        layers.append(("environment", environment))
        return layers

    def _find_local_config(self) -> Path | None:
        # Walk upwards from CWD; a .git directory marks the last place to look
        cwd = Path.cwd()
        for directory in (cwd, *cwd.parents):
            candidate = directory / self.LOCAL_CONFIG_NAME
            if candidate.is_file():
                return candidate
            if (directory / ".git").exists():
                return None
        return None

    def get(self, key: str, default: str = "") -> str:
        """Raw (unexpanded) value of key from the last load."""
        return self._raw_values.get(key, default)

    def get_source(self, key: str) -> str:
        return self._config_sources.get(key, "default")

    def show(self) -> None:
        """Print the effective settings and where each one came from."""
        print_header("Current Configuration")
        print_info(f"Global config: {self.global_config_path}")
        print_info(f"Local config:  {self.local_config_path or '(not found)'}")
        console.print()

        for key in Settings.get_config_keys():
            attr = self.settings.get_attribute_for_key(key)
            if attr is None:
                continue
            shown = mask_value(key, str(getattr(self.settings, attr))) or "(not set)"
            source = escape(self.get_source(key))
            console.print(f"    {key}: {escape(shown)} [dim]({source})[/dim]")
        console.print()


__all__ = [
    "ConfigManager",
    "read_config_file",
]
