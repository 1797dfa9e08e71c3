"""Environment variable utilities for PODSMITH.

Config values may reference environment variables as ${VAR}. Keys that
look like secrets are never echoed back in logs or in `--config` output.
"""

from __future__ import annotations

import logging
import os
import re

# Keys containing these substrings are considered sensitive and should not be logged
SENSITIVE_KEY_PATTERNS = ("TOKEN", "KEY", "SECRET", "PASSWORD", "CREDENTIAL")

_ENV_REFERENCE = re.compile(r"\$\{([^}]+)\}")

logger = logging.getLogger(__name__)


def is_sensitive_key(key: str) -> bool:
    """Check if a configuration key contains sensitive data."""
    key_upper = key.upper()
    return any(pattern in key_upper for pattern in SENSITIVE_KEY_PATTERNS)


def mask_value(key: str, value: str) -> str:
    """Return a display-safe version of a config value."""
    if value and is_sensitive_key(key):
        return "********"
    return value


def expand_env_vars(value: str, context: str = "") -> str:
    """Expand ${VAR} references in a string from the environment.

    Missing variables are left as-is (so misconfiguration is visible) and a
    warning is logged. The context is omitted from the warning when it
    names a sensitive key.

    Args:
        value: The raw string value
        context: Config key the value belongs to, for diagnostics

    Returns:
        The value with every resolvable ${VAR} replaced
    """

    def replace(match: re.Match[str]) -> str:
        var_name = match.group(1)
        env_value = os.environ.get(var_name)
        if env_value is None:
            if context and not is_sensitive_key(context):
                logger.warning(f"Environment variable '{var_name}' not set in {context}")
            else:
                logger.warning(f"Environment variable '{var_name}' not set")
            return match.group(0)
        return env_value

    return _ENV_REFERENCE.sub(replace, value)


__all__ = [
    "SENSITIVE_KEY_PATTERNS",
    "expand_env_vars",
    "is_sensitive_key",
    "mask_value",
]
