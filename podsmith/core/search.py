"""Local spec repositories used as the search index for `spec cat`.

Each directory under the repos root is a source. A source lays its pods
out as `<Pod>/<version>/<Pod>.podspec[.json]`, either at its top level
or below a `Specs/` directory.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from packaging.version import InvalidVersion, Version

from podsmith import SPEC_EXTENSION
from podsmith.utils.errors import SpecLookupError, SpecNotFoundError

logger = logging.getLogger(__name__)

SPEC_FILE_SUFFIXES = (SPEC_EXTENSION, f"{SPEC_EXTENSION}.json")


class SpecSource:
    """One spec repository on disk."""

    def __init__(self, root: Path) -> None:
        self.name = root.name
        specs_dir = root / "Specs"
        self.specs_root = specs_dir if specs_dir.is_dir() else root

    def __repr__(self) -> str:
        return f"SpecSource({self.name!r})"

    def pod_names(self) -> list[str]:
        return sorted(
            entry.name
            for entry in self.specs_root.iterdir()
            if entry.is_dir() and not entry.name.startswith(".")
        )

    def versions(self, name: str) -> list[Version]:
        """Parseable versions of a pod, highest first."""
        pod_dir = self.specs_root / name
        if not pod_dir.is_dir():
            return []

        versions: list[Version] = []
        for entry in pod_dir.iterdir():
            if not entry.is_dir():
                continue
            try:
                versions.append(Version(entry.name))
            except InvalidVersion:
                logger.warning(f"Skipping invalid version directory {entry} in {self.name}")
        return sorted(versions, reverse=True)

    def specification_path(self, name: str, version: Version) -> Path:
        """Path of the spec file for a pod version.

        Raises:
            SpecNotFoundError: If the version directory holds no spec file
        """
        pod_dir = self.specs_root / name
        candidates = [
            entry for entry in pod_dir.iterdir() if entry.is_dir() and _same_version(entry, version)
        ]
        for version_dir in candidates:
            for suffix in SPEC_FILE_SUFFIXES:
                spec_file = version_dir / f"{name}{suffix}"
                if spec_file.is_file():
                    return spec_file
        raise SpecNotFoundError(
            f"{name} {version}",
            f"No spec file for `{name}' {version} in source `{self.name}'.",
        )


def _same_version(entry: Path, version: Version) -> bool:
    try:
        return Version(entry.name) == version
    except InvalidVersion:
        return False


@dataclass
class SpecSet:
    """All sources that provide a pod with a given name."""

    name: str
    sources: list[SpecSource] = field(default_factory=list)


class SearchIndex:
    """Name lookup across every local spec repository."""

    def __init__(self, repos_dir: Path) -> None:
        self.repos_dir = repos_dir

    def sources(self) -> list[SpecSource]:
        if not self.repos_dir.is_dir():
            return []
        return [
            SpecSource(entry)
            for entry in sorted(self.repos_dir.iterdir())
            if entry.is_dir() and not entry.name.startswith(".")
        ]

    def search_by_name(self, query: str) -> list[SpecSet]:
        """Pods whose name contains query (case-insensitive), by name."""
        needle = query.lower()
        sets: dict[str, SpecSet] = {}
        for source in self.sources():
            for pod_name in source.pod_names():
                if needle in pod_name.lower():
                    sets.setdefault(pod_name, SpecSet(pod_name)).sources.append(source)
        return [sets[name] for name in sorted(sets)]

    def find_single(self, query: str) -> SpecSet:
        """Return the only set matching query.

        Raises:
            SpecLookupError: With no candidates, or with every candidate name
        """
        found = self.search_by_name(query)
        if len(found) != 1:
            raise SpecLookupError(query, [spec_set.name for spec_set in found])
        return found[0]


def best_spec_from_set(spec_set: SpecSet) -> Path:
    """Spec file of the highest version of a pod across all its sources.

    Raises:
        SpecNotFoundError: If no source has a parseable version
    """
    best_source: SpecSource | None = None
    best_version: Version | None = None
    for source in spec_set.sources:
        versions = source.versions(spec_set.name)
        if not versions:
            continue
        if best_version is None or versions[0] > best_version:
            best_source, best_version = source, versions[0]

    if best_source is None or best_version is None:
        raise SpecNotFoundError(
            spec_set.name, f"No versions of `{spec_set.name}' found in any source."
        )
    return best_source.specification_path(spec_set.name, best_version)


__all__ = [
    "SPEC_FILE_SUFFIXES",
    "SearchIndex",
    "SpecSet",
    "SpecSource",
    "best_spec_from_set",
]
