"""Tests for podsmith.integrations.http module."""

import httpx
import pytest

from podsmith.integrations.http import (
    USER_AGENT,
    Downloader,
    TransientHTTPError,
    build_http_client,
    error_for_response,
    get_with_retry,
    is_retryable,
)
from podsmith.utils.errors import ExitCode, RemoteFetchError, RemoteTimeoutError
from podsmith.utils.retry import RetryPolicy

NO_RETRY = RetryPolicy(max_retries=0)


def _client(handler) -> httpx.Client:
    return build_http_client(5, transport=httpx.MockTransport(handler))


class TestBuildHttpClient:
    """Tests for build_http_client."""

    def test_sets_timeout_and_headers(self):
        """Timeout, user agent and extra headers are applied."""
        client = build_http_client(12, headers={"Accept": "application/json"})

        assert client.timeout.read == 12
        assert client.timeout.connect == 12
        assert client.headers["User-Agent"] == USER_AGENT
        assert client.headers["Accept"] == "application/json"
        assert client.follow_redirects is True
        client.close()


class TestIsRetryable:
    """Tests for is_retryable."""

    def test_transport_errors_are_retryable(self):
        """Connection problems are transient."""
        assert is_retryable(httpx.ConnectError("refused")) is True

    def test_transient_status_is_retryable(self):
        """5xx and 429 responses are transient."""
        response = httpx.Response(503, request=httpx.Request("GET", "https://x"))
        assert is_retryable(TransientHTTPError(response)) is True

    def test_other_errors_are_not(self):
        """Programming errors are never retried."""
        assert is_retryable(ValueError("bad")) is False


class TestErrorForResponse:
    """Tests for error_for_response."""

    def _response(self, status, headers=None, text=""):
        return httpx.Response(
            status, headers=headers, text=text, request=httpx.Request("GET", "https://x")
        )

    def test_not_found(self):
        """404 is reported as not found."""
        error = error_for_response(self._response(404), "Repository `a/b'")

        assert str(error) == "Repository `a/b' not found."
        assert error.status_code == 404
        assert error.exit_code == ExitCode.REMOTE_ERROR

    def test_rate_limited_403(self):
        """An exhausted quota mentions the reset time and the token."""
        error = error_for_response(
            self._response(
                403, headers={"X-RateLimit-Remaining": "0", "X-RateLimit-Reset": "0"}
            ),
            "Repository `a/b'",
        )

        assert "Rate limit exceeded" in str(error)
        assert "1970-01-01 00:00:00 UTC" in str(error)
        assert "GITHUB_TOKEN" in str(error)

    def test_plain_403_is_not_rate_limit(self):
        """A 403 with remaining quota is a normal failure."""
        error = error_for_response(self._response(403, text="forbidden"), "thing")

        assert str(error) == "Failed to fetch thing (HTTP 403): forbidden"

    def test_body_is_truncated(self):
        """Long bodies are shortened."""
        error = error_for_response(self._response(500, text="x" * 1000), "thing")

        assert len(str(error)) < 300


class TestGetWithRetry:
    """Tests for get_with_retry."""

    def test_returns_successful_response(self):
        """A 2xx response is returned as is."""
        client = _client(lambda request: httpx.Response(200, json={"ok": True}))

        response = get_with_retry(client, "https://api.test/x", "thing", NO_RETRY)

        assert response.json() == {"ok": True}

    def test_retries_server_errors(self):
        """5xx responses are retried until one succeeds."""
        statuses = iter([502, 503, 200])
        sleeps = []
        client = _client(lambda request: httpx.Response(next(statuses), text="body"))

        response = get_with_retry(
            client,
            "https://api.test/x",
            "thing",
            RetryPolicy(max_retries=2, base_delay_seconds=0.1, jitter_factor=0),
            sleeper=sleeps.append,
        )

        assert response.status_code == 200
        assert sleeps == [0.1, 0.2]

    def test_exhausted_retries_map_last_response(self):
        """The final transient status becomes a RemoteFetchError."""
        client = _client(lambda request: httpx.Response(500, text="down"))

        with pytest.raises(RemoteFetchError, match=r"HTTP 500"):
            get_with_retry(
                client,
                "https://api.test/x",
                "thing",
                RetryPolicy(max_retries=1, base_delay_seconds=0),
                sleeper=lambda _: None,
            )

    def test_client_errors_are_not_retried(self):
        """4xx responses fail immediately."""
        calls = []

        def handler(request):
            calls.append(request)
            return httpx.Response(404)

        with pytest.raises(RemoteFetchError, match="thing not found."):
            get_with_retry(_client(handler), "https://api.test/x", "thing", RetryPolicy())

        assert len(calls) == 1

    def test_timeout_raises_remote_timeout(self):
        """Timeouts surface as RemoteTimeoutError."""

        def handler(request):
            raise httpx.ReadTimeout("timed out", request=request)

        with pytest.raises(RemoteTimeoutError, match="Timed out while fetching thing."):
            get_with_retry(_client(handler), "https://api.test/x", "thing", NO_RETRY)

    def test_transport_error_raises_remote_fetch_error(self):
        """Connection failures surface as RemoteFetchError."""

        def handler(request):
            raise httpx.ConnectError("refused", request=request)

        with pytest.raises(RemoteFetchError) as exc_info:
            get_with_retry(_client(handler), "https://api.test/x", "thing", NO_RETRY)

        assert not isinstance(exc_info.value, RemoteTimeoutError)
        assert exc_info.value.status_code is None

    def test_passes_query_params(self):
        """Query parameters reach the server."""
        seen = {}

        def handler(request):
            seen.update(request.url.params)
            return httpx.Response(200, json=[])

        get_with_retry(
            _client(handler), "https://api.test/x", "thing", NO_RETRY, params={"per_page": 100}
        )

        assert seen == {"per_page": "100"}


class TestDownloader:
    """Tests for Downloader."""

    def test_writes_content(self, tmp_path):
        """The body is written to the destination, creating parents."""
        client = _client(lambda request: httpx.Response(200, content=b"Pod::Spec.new"))
        destination = tmp_path / "scratch" / "Kiwi.podspec"

        result = Downloader(client, NO_RETRY).download("https://host/Kiwi.podspec", destination)

        assert result == destination
        assert destination.read_bytes() == b"Pod::Spec.new"

    def test_overwrites_existing_file(self, tmp_path):
        """A stale copy is replaced."""
        destination = tmp_path / "Kiwi.podspec"
        destination.write_text("old")
        client = _client(lambda request: httpx.Response(200, content=b"new"))

        Downloader(client, NO_RETRY).download("https://host/Kiwi.podspec", destination)

        assert destination.read_text() == "new"

    def test_missing_remote_file(self, tmp_path):
        """A 404 names the URL and writes nothing."""
        client = _client(lambda request: httpx.Response(404))
        destination = tmp_path / "Kiwi.podspec"

        with pytest.raises(RemoteFetchError, match="https://host/Kiwi.podspec"):
            Downloader(client, NO_RETRY).download("https://host/Kiwi.podspec", destination)

        assert not destination.exists()
