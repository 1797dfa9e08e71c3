"""Version and source-ref suggestion from a repository's tags.

Tags are ranked by version precedence, not by string order. A repository
without usable tags falls back to version 0.0.1 pinned at the tip of its
default branch.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable

from packaging.version import InvalidVersion, Version

from podsmith.core.models import FALLBACK_VERSION, Branch, RefKind, RefSuggestion, Tag
from podsmith.utils.errors import NoDefaultBranchError

logger = logging.getLogger(__name__)

DEFAULT_BRANCH_NAME = "master"

# "v1.2.0", "ver1.2.0" and "V 1.2.0" all denote 1.2.0
_VERSION_PREFIX = re.compile(r"^v(er)? ?", re.IGNORECASE)


def clean_tag_name(tag: str) -> str:
    """Strip an optional leading version marker from a tag name."""
    return _VERSION_PREFIX.sub("", tag, count=1)


def parse_tag(tag: str) -> Tag:
    """Pair a tag name with its parsed version, if it has one."""
    try:
        version = Version(clean_tag_name(tag))
    except InvalidVersion:
        version = None
    return Tag(name=tag, version=version)


class VersionResolver:
    """Suggests the version and ref a new spec should point at."""

    def resolve(
        self,
        tags: Iterable[str],
        branches: Iterable[Branch],
        default_branch_name: str | None = None,
    ) -> RefSuggestion:
        """Compute the best version and its source ref.

        Args:
            tags: Tag names of the repository
            branches: Branches of the repository with their head commits
            default_branch_name: Branch to pin when no tag is versioned;
                "master" when None or empty

        Returns:
            A tag-based suggestion for the greatest versioned tag (its version
            text is the tag name without the version marker), otherwise
            the fallback version pinned to the default branch head

        Raises:
            NoDefaultBranchError: If the fallback branch does not exist
        """
        best = self.best_tag(tags)
        if best is not None:
            return RefSuggestion(
                version=clean_tag_name(best.name),
                ref_kind=RefKind.TAG,
                ref_value=best.name,
            )

        branch_name = default_branch_name or DEFAULT_BRANCH_NAME
        for branch in branches:
            if branch.name == branch_name:
                logger.debug(f"No versioned tags, pinning {branch_name}@{branch.commit_sha}")
                return RefSuggestion(
                    version=FALLBACK_VERSION,
                    ref_kind=RefKind.COMMIT,
                    ref_value=branch.commit_sha,
                )
        raise NoDefaultBranchError(branch_name)

    @staticmethod
    def best_tag(tags: Iterable[str]) -> Tag | None:
        """Return the tag with the greatest version, first one on ties."""
        best: Tag | None = None
        for name in tags:
            tag = parse_tag(name)
            if tag.version is None:
                continue
            if best is None or tag.version > best.version:  # type: ignore[operator]
                best = tag
        return best


__all__ = [
    "DEFAULT_BRANCH_NAME",
    "VersionResolver",
    "clean_tag_name",
    "parse_tag",
]
