"""Shared HTTP plumbing built on httpx.

Every network operation goes through a client created here, so all of
them share the configured timeout. httpx failures are translated into
RemoteFetchError / RemoteTimeoutError at this boundary.
"""

from __future__ import annotations

import time
from collections.abc import Callable
from datetime import UTC, datetime
from pathlib import Path

import httpx

from podsmith import __version__
from podsmith.utils.errors import RemoteFetchError, RemoteTimeoutError
from podsmith.utils.logging import log_message
from podsmith.utils.retry import RetryPolicy, call_with_retry

HTTP_TOO_MANY_REQUESTS = 429

# Maximum length for error response body in exception messages
MAX_ERROR_BODY_LENGTH = 200

USER_AGENT = f"podsmith/{__version__}"


class TransientHTTPError(Exception):
    """A response status worth retrying (5xx or 429)."""

    def __init__(self, response: httpx.Response) -> None:
        super().__init__(f"HTTP {response.status_code}")
        self.response = response


def build_http_client(
    timeout_seconds: float,
    headers: dict[str, str] | None = None,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """Create a configured synchronous HTTP client.

    Args:
        timeout_seconds: Timeout for connect, read, write and pool
        headers: Extra default headers
        transport: Optional transport override (used by tests)
    """
    default_headers = {"User-Agent": USER_AGENT}
    if headers:
        default_headers.update(headers)
    return httpx.Client(
        timeout=httpx.Timeout(timeout_seconds),
        headers=default_headers,
        follow_redirects=True,
        transport=transport,
    )


def is_retryable(error: Exception) -> bool:
    """Transport failures and transient statuses are retried."""
    return isinstance(error, (httpx.TransportError, TransientHTTPError))


def _is_rate_limited(response: httpx.Response) -> bool:
    if response.status_code == HTTP_TOO_MANY_REQUESTS:
        return True
    return response.status_code == 403 and response.headers.get("X-RateLimit-Remaining") == "0"


def _rate_limit_reset(response: httpx.Response) -> str:
    reset = response.headers.get("X-RateLimit-Reset")
    if not reset:
        return ""
    try:
        moment = datetime.fromtimestamp(int(reset), tz=UTC)
    except (ValueError, OverflowError):
        return ""
    return f" (resets at {moment:%Y-%m-%d %H:%M:%S} UTC)"


def error_for_response(response: httpx.Response, what: str) -> RemoteFetchError:
    """Build the RemoteFetchError describing a failed response.

    Args:
        response: The non-successful response
        what: Short description of the requested resource
    """
    status = response.status_code
    if status == 404:
        return RemoteFetchError(f"{what} not found.", status_code=status)
    if _is_rate_limited(response):
        return RemoteFetchError(
            f"Rate limit exceeded while fetching {what}{_rate_limit_reset(response)}. "
            "Set GITHUB_TOKEN to raise the limit.",
            status_code=status,
        )
    body = response.text[:MAX_ERROR_BODY_LENGTH].strip()
    detail = f": {body}" if body else ""
    return RemoteFetchError(f"Failed to fetch {what} (HTTP {status}){detail}", status_code=status)


def get_with_retry(
    client: httpx.Client,
    url: str,
    what: str,
    policy: RetryPolicy,
    *,
    params: dict[str, str | int] | None = None,
    sleeper: Callable[[float], None] = time.sleep,
) -> httpx.Response:
    """GET a URL, retrying transient failures, and return a 2xx response.

    Raises:
        RemoteTimeoutError: If the request timed out on the last attempt
        RemoteFetchError: For any other failure
    """

    def attempt() -> httpx.Response:
        response = client.get(url, params=params)
        if response.status_code >= 500 or response.status_code == HTTP_TOO_MANY_REQUESTS:
            raise TransientHTTPError(response)
        return response

    def on_retry(attempt_number: int, delay: float, error: Exception) -> None:
        log_message(f"Retrying {url} in {delay:.1f}s (attempt {attempt_number}): {error}")

    try:
        response = call_with_retry(attempt, policy, is_retryable, on_retry=on_retry, sleeper=sleeper)
    except TransientHTTPError as e:
        raise error_for_response(e.response, what) from e
    except httpx.TimeoutException as e:
        raise RemoteTimeoutError(f"Timed out while fetching {what}.") from e
    except httpx.TransportError as e:
        raise RemoteFetchError(f"Failed to fetch {what}: {e}") from e

    if response.is_error:
        raise error_for_response(response, what)
    return response


class Downloader:
    """Downloads remote files to local paths."""

    def __init__(self, client: httpx.Client, policy: RetryPolicy | None = None) -> None:
        self._client = client
        self._policy = policy or RetryPolicy()

    def download(self, url: str, destination: Path) -> Path:
        """Write the content at url to destination, replacing any old copy.

        Returns:
            The destination path
        """
        response = get_with_retry(self._client, url, f"`{url}'", self._policy)
        destination.parent.mkdir(parents=True, exist_ok=True)
        destination.write_bytes(response.content)
        log_message(f"Downloaded {url} to {destination}")
        return destination


__all__ = [
    "USER_AGENT",
    "Downloader",
    "TransientHTTPError",
    "build_http_client",
    "error_for_response",
    "get_with_retry",
    "is_retryable",
]
