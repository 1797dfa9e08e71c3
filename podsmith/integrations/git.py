"""Git identity lookup for PODSMITH.

The author name and email of a locally created spec come from the user's
git configuration. Lookups are best-effort: any failure yields "".
"""

import subprocess
from collections.abc import Callable
from dataclasses import dataclass

from podsmith.utils.logging import log_command, log_message


@dataclass(frozen=True)
class GitIdentity:
    """Author identity from `git config`."""

    name: str = ""
    email: str = ""


# Injectable identity source; tests pass a stub instead of running git
IdentityProvider = Callable[[], GitIdentity]


def get_config_value(key: str) -> str:
    """Read a single `git config --get` value.

    Args:
        key: Config key (e.g. "user.name")

    Returns:
        The stripped value, or "" if git is missing or the key is unset
    """
    command = ["git", "config", "--get", key]
    try:
        result = subprocess.run(
            command,
            capture_output=True,
            text=True,
            stdin=subprocess.DEVNULL,
            timeout=10,
        )
    except (OSError, subprocess.SubprocessError) as e:
        log_message(f"Failed to read git config {key}: {e}")
        return ""

    log_command(" ".join(command), result.returncode)
    if result.returncode != 0:
        return ""
    return result.stdout.strip()


def read_git_identity() -> GitIdentity:
    """Read user.name and user.email from git configuration."""
    return GitIdentity(
        name=get_config_value("user.name"),
        email=get_config_value("user.email"),
    )


__all__ = [
    "GitIdentity",
    "IdentityProvider",
    "get_config_value",
    "read_git_identity",
]
