"""Command handlers for the `spec` group.

This package contains:
- base: Command variants, CommandContext and dispatch()
- create: `spec create`
- lint: `spec lint`
- cat: `spec cat`
"""

from podsmith.commands.base import (
    CatCommand,
    CommandContext,
    CreateCommand,
    LintCommand,
    SpecCommand,
    dispatch,
)

__all__ = [
    "CatCommand",
    "CommandContext",
    "CreateCommand",
    "LintCommand",
    "SpecCommand",
    "dispatch",
]
