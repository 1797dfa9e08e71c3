"""Handler for `spec cat`."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from podsmith.core.search import SearchIndex, best_spec_from_set
from podsmith.utils.console import print_raw
from podsmith.utils.errors import UsageError
from podsmith.utils.logging import log_message

if TYPE_CHECKING:
    from podsmith.commands.base import CatCommand, CommandContext


def run_cat(command: CatCommand, context: CommandContext) -> Path:
    """Print the highest-version spec of the single matching pod.

    Raises:
        UsageError: If no name was given
        SpecLookupError: If zero or several pods match
    """
    if not command.name:
        raise UsageError("A pod name is required.")

    index = SearchIndex(context.settings.spec_repos_path)
    spec_set = index.find_single(command.name)
    spec_path = best_spec_from_set(spec_set)
    log_message(f"Printing {spec_path}")
    print_raw(spec_path.read_text(encoding="utf-8"))
    return spec_path


__all__ = ["run_cat"]
