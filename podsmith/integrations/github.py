"""GitHub REST API client for repository metadata.

Used by `spec create` to prefill a podspec from a repository:

    with GitHubClient.from_settings(settings) as github:
        metadata = github.fetch_metadata("owner/repo")
"""

from __future__ import annotations

import time
from collections.abc import Callable
from typing import Any

import httpx

from podsmith.config.settings import Settings
from podsmith.core.models import Branch, RepositoryMetadata
from podsmith.integrations.http import build_http_client, get_with_retry
from podsmith.utils.logging import log_message
from podsmith.utils.retry import RetryPolicy

DEFAULT_AUTHOR_EMAIL = "email@address.com"

# Largest page size the API accepts for list endpoints
PAGE_SIZE = 100


class GitHubClient:
    """Minimal synchronous client for the endpoints `spec create` needs.

    Attributes:
        api_url: Base URL of the REST API
    """

    def __init__(
        self,
        http_client: httpx.Client,
        api_url: str = "https://api.github.com",
        policy: RetryPolicy | None = None,
        *,
        sleeper: Callable[[float], None] = time.sleep,
    ) -> None:
        self._http = http_client
        self.api_url = api_url.rstrip("/")
        self._policy = policy or RetryPolicy()
        self._sleeper = sleeper

    @classmethod
    def from_settings(cls, settings: Settings) -> GitHubClient:
        """Create a client with timeout, retries and token from settings."""
        headers = {"Accept": "application/vnd.github+json"}
        if settings.github_token:
            headers["Authorization"] = f"Bearer {settings.github_token}"
        http_client = build_http_client(settings.http_timeout_seconds, headers=headers)
        return cls(http_client, settings.github_api_url, settings.retry_policy())

    def __enter__(self) -> GitHubClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        self._http.close()

    def _get(
        self,
        path_or_url: str,
        what: str,
        params: dict[str, str | int] | None = None,
    ) -> httpx.Response:
        url = path_or_url if path_or_url.startswith("http") else f"{self.api_url}{path_or_url}"
        return get_with_retry(
            self._http, url, what, self._policy, params=params, sleeper=self._sleeper
        )

    def _get_paginated(self, path: str, what: str) -> list[dict[str, Any]]:
        """Collect every item of a list endpoint by following Link headers."""
        items: list[dict[str, Any]] = []
        response = self._get(path, what, params={"per_page": PAGE_SIZE})
        while True:
            items.extend(response.json())
            next_url = response.links.get("next", {}).get("url")
            if not next_url:
                return items
            response = self._get(next_url, what)

    def repo(self, repo_id: str) -> dict[str, Any]:
        result: dict[str, Any] = self._get(f"/repos/{repo_id}", f"Repository `{repo_id}'").json()
        return result

    def user(self, login: str) -> dict[str, Any]:
        result: dict[str, Any] = self._get(f"/users/{login}", f"User `{login}'").json()
        return result

    def tags(self, repo_id: str) -> list[str]:
        tags = self._get_paginated(f"/repos/{repo_id}/tags", f"Tags of `{repo_id}'")
        return [tag["name"] for tag in tags]

    def branches(self, repo_id: str) -> list[Branch]:
        branches = self._get_paginated(f"/repos/{repo_id}/branches", f"Branches of `{repo_id}'")
        return [Branch(name=b["name"], commit_sha=b["commit"]["sha"]) for b in branches]

    def fetch_metadata(self, repo_id: str) -> RepositoryMetadata:
        """Fetch everything needed to prefill a spec for OWNER/REPO.

        Raises:
            RemoteFetchError: If any request fails
            RemoteTimeoutError: If any request times out
        """
        log_message(f"Fetching GitHub metadata for {repo_id}")
        repo = self.repo(repo_id)
        owner_login = repo["owner"]["login"]
        owner = self.user(owner_login)

        return RepositoryMetadata(
            name=repo["name"],
            description=repo.get("description") or "",
            homepage_url=repo.get("homepage") or repo["html_url"],
            clone_url=repo["clone_url"],
            default_branch=repo.get("default_branch") or "",
            owner_display_name=owner.get("name") or owner_login,
            owner_email=owner.get("email") or DEFAULT_AUTHOR_EMAIL,
            tags=tuple(self.tags(repo_id)),
            branches=tuple(self.branches(repo_id)),
        )


__all__ = [
    "DEFAULT_AUTHOR_EMAIL",
    "GitHubClient",
]
