"""Tests for podsmith.utils.retry module."""

import pytest

from podsmith.utils.retry import RetryPolicy, calculate_backoff_delay, call_with_retry


class Transient(Exception):
    pass


def _is_transient(error: Exception) -> bool:
    return isinstance(error, Transient)


class TestCalculateBackoffDelay:
    """Tests for calculate_backoff_delay."""

    def test_exponential_growth(self):
        """Delays double with each attempt."""
        policy = RetryPolicy(base_delay_seconds=1.0, jitter_factor=0)

        delays = [calculate_backoff_delay(n, policy, lambda _: 0) for n in range(4)]

        assert delays == [1.0, 2.0, 4.0, 8.0]

    def test_capped_at_max_delay(self):
        """No delay exceeds the maximum."""
        policy = RetryPolicy(base_delay_seconds=10.0, max_delay_seconds=15.0)

        assert calculate_backoff_delay(5, policy, lambda m: m) == 15.0

    def test_jitter_is_bounded(self):
        """The jitter generator gets the maximum jitter."""
        policy = RetryPolicy(base_delay_seconds=2.0, jitter_factor=0.25)
        seen = []

        delay = calculate_backoff_delay(0, policy, lambda m: seen.append(m) or m)

        assert seen == [0.5]
        assert delay == 2.5


class TestCallWithRetry:
    """Tests for call_with_retry."""

    def test_returns_first_success(self):
        """No retry happens when the first call succeeds."""
        sleeps = []

        assert call_with_retry(lambda: 42, RetryPolicy(), _is_transient, sleeper=sleeps.append) == 42
        assert sleeps == []

    def test_retries_transient_errors(self):
        """Transient errors are retried until success."""
        outcomes = iter([Transient("1"), Transient("2"), "ok"])
        retries = []

        def func():
            outcome = next(outcomes)
            if isinstance(outcome, Exception):
                raise outcome
            return outcome

        result = call_with_retry(
            func,
            RetryPolicy(max_retries=2, base_delay_seconds=0),
            _is_transient,
            on_retry=lambda attempt, delay, error: retries.append((attempt, str(error))),
            sleeper=lambda _: None,
        )

        assert result == "ok"
        assert retries == [(1, "1"), (2, "2")]

    def test_gives_up_after_max_retries(self):
        """The last error propagates unchanged."""
        calls = []

        def func():
            calls.append(1)
            raise Transient(f"attempt {len(calls)}")

        with pytest.raises(Transient, match="attempt 3"):
            call_with_retry(func, RetryPolicy(max_retries=2), _is_transient, sleeper=lambda _: None)

        assert len(calls) == 3

    def test_non_retryable_errors_propagate_immediately(self):
        """Other errors are not retried."""
        calls = []

        def func():
            calls.append(1)
            raise ValueError("bad")

        with pytest.raises(ValueError):
            call_with_retry(func, RetryPolicy(max_retries=5), _is_transient, sleeper=lambda _: None)

        assert len(calls) == 1

    def test_zero_retries(self):
        """max_retries=0 disables retrying."""
        calls = []

        def func():
            calls.append(1)
            raise Transient("x")

        with pytest.raises(Transient):
            call_with_retry(func, RetryPolicy(max_retries=0), _is_transient, sleeper=lambda _: None)

        assert len(calls) == 1
