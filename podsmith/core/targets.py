"""Expansion of user-supplied lint arguments into concrete spec files.

Each argument is a URL, a directory or a spec file path. URLs are
downloaded into a scratch directory; directories are scanned recursively
for podspecs. The result contains every resolved path once, in input
order.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from pathlib import Path
from typing import Protocol
from urllib.parse import unquote, urlparse

from podsmith import SPEC_EXTENSION
from podsmith.core.models import LintTarget
from podsmith.utils.errors import NoSpecsInDirectoryError, SpecNotFoundError
from podsmith.utils.logging import log_message

_URL_PATTERN = re.compile(r"^https?://")


class FileDownloader(Protocol):
    def download(self, url: str, destination: Path) -> Path: ...


def is_url(value: str) -> bool:
    return bool(_URL_PATTERN.match(value))


def url_file_name(url: str) -> str:
    """Last path segment of a URL, or "" when the path ends with a slash."""
    path = urlparse(url).path
    return unquote(path.rsplit("/", 1)[-1])


class TargetSetExpander:
    """Resolves lint arguments into a stable list of LintTargets.

    Attributes:
        scratch_dir: Where remote specs are downloaded
    """

    def __init__(self, scratch_dir: Path, downloader: FileDownloader) -> None:
        self.scratch_dir = scratch_dir
        self._downloader = downloader

    def expand(self, inputs: Sequence[str]) -> list[LintTarget]:
        """Expand the inputs, defaulting to the current directory.

        Raises:
            SpecNotFoundError: A file input is missing or not a podspec,
                or a URL has no file name
            NoSpecsInDirectoryError: A directory contains no podspecs
            RemoteFetchError: A remote spec could not be downloaded
        """
        targets: list[LintTarget] = []
        seen: set[Path] = set()

        for value in inputs or ["."]:
            for target in self._expand_one(value):
                if target.path in seen:
                    log_message(f"Skipping duplicate lint target {target.path}")
                    continue
                seen.add(target.path)
                targets.append(target)

        return targets

    def _expand_one(self, value: str) -> list[LintTarget]:
        if is_url(value):
            return [self._download(value)]

        path = Path(value)
        if path.is_dir():
            specs = sorted(p for p in path.rglob(f"*{SPEC_EXTENSION}") if p.is_file())
            if not specs:
                raise NoSpecsInDirectoryError(value)
            return [LintTarget(path=spec.resolve()) for spec in specs]

        if not path.exists() or SPEC_EXTENSION not in path.name:
            raise SpecNotFoundError(value)
        return [LintTarget(path=path.resolve())]

    def _download(self, url: str) -> LintTarget:
        file_name = url_file_name(url)
        if not file_name:
            raise SpecNotFoundError(url, f"Unable to derive a spec file name from `{url}'.")
        destination = self.scratch_dir / file_name
        self._downloader.download(url, destination)
        return LintTarget(path=destination.resolve(), remote_url=url)


__all__ = [
    "FileDownloader",
    "TargetSetExpander",
    "is_url",
    "url_file_name",
]
