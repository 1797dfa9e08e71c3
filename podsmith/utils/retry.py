"""Retry utilities for transient network failures.

This module provides exponential backoff with jitter for calls to the
GitHub API and for remote spec downloads:
- calculate_backoff_delay: Exponential backoff with jitter calculation
- call_with_retry: Invoke a callable, retrying while errors are transient
"""

import random
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class RetryPolicy:
    """Backoff parameters for transient failures.

    Attributes:
        max_retries: Retries after the first attempt (0 disables retrying)
        base_delay_seconds: Delay before the first retry
        max_delay_seconds: Upper bound for any single delay
        jitter_factor: Fraction of the delay added as random jitter
    """

    max_retries: int = 2
    base_delay_seconds: float = 1.0
    max_delay_seconds: float = 30.0
    jitter_factor: float = 0.25


def calculate_backoff_delay(
    attempt: int,
    policy: RetryPolicy,
    jitter_generator: Callable[[float], float] | None = None,
) -> float:
    """Calculate delay with exponential backoff and jitter.

    Formula: min(base * 2^attempt + jitter, max_delay)

    Args:
        attempt: Current attempt number (0-indexed)
        policy: Retry policy
        jitter_generator: Returns a jitter value in [0, max_jitter]

    Returns:
        Delay in seconds
    """
    exponential_delay = policy.base_delay_seconds * (2**attempt)
    max_jitter = policy.jitter_factor * exponential_delay
    if jitter_generator is None:
        jitter = random.uniform(0, max_jitter)
    else:
        jitter = jitter_generator(max_jitter)

    delay: float = min(exponential_delay + jitter, policy.max_delay_seconds)
    return delay


def call_with_retry(
    func: Callable[[], T],
    policy: RetryPolicy,
    is_retryable: Callable[[Exception], bool],
    *,
    on_retry: Callable[[int, float, Exception], None] | None = None,
    sleeper: Callable[[float], None] = time.sleep,
    jitter_generator: Callable[[float], float] | None = None,
) -> T:
    """Call func, retrying with backoff while it raises retryable errors.

    Non-retryable errors propagate immediately. When retries are exhausted
    the last error propagates unchanged so callers keep its type.

    Args:
        func: Zero-argument callable to invoke
        policy: Retry policy
        is_retryable: Predicate deciding whether an error is transient
        on_retry: Called before each retry with (attempt, delay, error)
        sleeper: Sleep function (injectable for tests)
        jitter_generator: Jitter function (injectable for tests)

    Returns:
        Whatever func returns
    """
    attempt = 0
    while True:
        try:
            return func()
        except Exception as e:
            if not is_retryable(e) or attempt >= policy.max_retries:
                raise

            delay = calculate_backoff_delay(attempt, policy, jitter_generator)
            attempt += 1
            if on_retry:
                on_retry(attempt, delay, e)
            sleeper(delay)


__all__ = [
    "RetryPolicy",
    "calculate_backoff_delay",
    "call_with_retry",
]
