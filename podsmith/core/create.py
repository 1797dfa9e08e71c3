"""Decision logic behind `spec create`.

A GitHub URL (given alone, or after an explicit pod name) selects the
remote-backed path: repository metadata prefills the spec and the
version/ref come from VersionResolver. Anything else yields a local
stub with placeholder values and the author taken from git.
"""

from __future__ import annotations

import re
from typing import Protocol

from podsmith.core.models import (
    FALLBACK_VERSION,
    RefKind,
    RenderableSpecData,
    RepositoryMetadata,
)
from podsmith.core.template import escape_double_quotes, render_semver_notice
from podsmith.core.versions import VersionResolver
from podsmith.integrations.git import IdentityProvider, read_git_identity
from podsmith.utils.errors import UsageError

# github.com/OWNER/REPO, also matching scp-style github.com:OWNER/REPO
_GITHUB_REPO = re.compile(r"github\.com[/:]([^/\s]+)/([^/\s?#]+)")


class MetadataClient(Protocol):
    def fetch_metadata(self, repo_id: str) -> RepositoryMetadata: ...


def parse_github_repo_id(value: str) -> str | None:
    """Extract OWNER/REPO from a GitHub URL.

    A trailing `.git` and trailing dots or slashes are trimmed.

    Returns:
        The repository id, or None if value is not a GitHub repository URL
    """
    match = _GITHUB_REPO.search(value)
    if not match:
        return None
    owner, repo = match.groups()
    repo = repo.rstrip("./")
    if repo.endswith(".git"):
        repo = repo[: -len(".git")].rstrip(".")
    if not owner or not repo:
        return None
    return f"{owner}/{repo}"


class SpecCreateOrchestrator:
    """Builds the data for a new podspec."""

    def __init__(
        self,
        metadata_client: MetadataClient,
        identity_provider: IdentityProvider = read_git_identity,
        resolver: VersionResolver | None = None,
    ) -> None:
        self._metadata_client = metadata_client
        self._identity_provider = identity_provider
        self._resolver = resolver or VersionResolver()

    def create(self, name_or_url: str, explicit_url: str | None = None) -> RenderableSpecData:
        """Decide between remote-backed and local data and build it.

        Args:
            name_or_url: Pod name or repository URL
            explicit_url: Repository URL when name_or_url is a pod name

        Raises:
            RemoteFetchError: If repository metadata cannot be fetched
            UsageError: If a lone URL does not point at a GitHub repository
            NoDefaultBranchError: If the repository has no usable tag and
                no default branch to pin
        """
        repo_id = parse_github_repo_id(explicit_url or name_or_url)
        if repo_id is None:
            if explicit_url is None and "://" in name_or_url:
                raise UsageError(f"`{name_or_url}' is not a GitHub repository URL.")
            return self.default_data(name_or_url)

        metadata = self._metadata_client.fetch_metadata(repo_id)
        name = name_or_url if explicit_url else metadata.name
        return self.remote_data(repo_id, metadata, name)

    def remote_data(
        self, repo_id: str, metadata: RepositoryMetadata, name: str
    ) -> RenderableSpecData:
        suggestion = self._resolver.resolve(
            metadata.tags, metadata.branches, metadata.default_branch or None
        )
        notice = render_semver_notice(repo_id, name) if suggestion.is_fallback else None
        return RenderableSpecData(
            name=name,
            version=suggestion.version,
            summary=escape_double_quotes(metadata.description),
            homepage=metadata.homepage_url,
            author_name=metadata.owner_display_name,
            author_email=metadata.owner_email,
            source_url=metadata.clone_url,
            ref_kind=suggestion.ref_kind,
            ref_value=suggestion.ref_value,
            notice=notice,
        )

    def default_data(self, name: str) -> RenderableSpecData:
        identity = self._identity_provider()
        return RenderableSpecData(
            name=name,
            version=FALLBACK_VERSION,
            summary=f"A short description of {name}.",
            homepage=f"http://EXAMPLE/{name}",
            author_name=identity.name,
            author_email=identity.email,
            source_url=f"http://EXAMPLE/{name}.git",
            ref_kind=RefKind.TAG,
            ref_value=FALLBACK_VERSION,
        )


__all__ = [
    "MetadataClient",
    "SpecCreateOrchestrator",
    "parse_github_repo_id",
]
