"""Utility modules for PODSMITH.

This package contains:
- console: Rich-based terminal output utilities
- env_utils: Environment variable expansion utilities
- errors: Custom exceptions and exit codes
- logging: Logging configuration
- retry: Backoff handling for transient network errors
"""

from podsmith.utils.console import (
    console,
    print_error,
    print_header,
    print_info,
    print_raw,
    print_step,
    print_success,
    print_warning,
)
from podsmith.utils.env_utils import (
    SENSITIVE_KEY_PATTERNS,
    expand_env_vars,
    is_sensitive_key,
    mask_value,
)
from podsmith.utils.errors import (
    ExitCode,
    LintFailuresError,
    NoDefaultBranchError,
    NoSpecsInDirectoryError,
    PodsmithError,
    RemoteFetchError,
    RemoteTimeoutError,
    SpecLookupError,
    SpecNotFoundError,
    UsageError,
    UserCancelledError,
    ValidatorNotInstalledError,
)
from podsmith.utils.logging import log_command, log_message, setup_logging
from podsmith.utils.retry import RetryPolicy, calculate_backoff_delay, call_with_retry

__all__ = [
    # Console
    "console",
    "print_error",
    "print_success",
    "print_warning",
    "print_info",
    "print_header",
    "print_step",
    "print_raw",
    # Env Utils
    "SENSITIVE_KEY_PATTERNS",
    "expand_env_vars",
    "is_sensitive_key",
    "mask_value",
    # Errors
    "ExitCode",
    "PodsmithError",
    "UsageError",
    "SpecNotFoundError",
    "NoSpecsInDirectoryError",
    "SpecLookupError",
    "NoDefaultBranchError",
    "LintFailuresError",
    "RemoteFetchError",
    "RemoteTimeoutError",
    "ValidatorNotInstalledError",
    "UserCancelledError",
    # Logging
    "setup_logging",
    "log_message",
    "log_command",
    # Retry
    "RetryPolicy",
    "calculate_backoff_delay",
    "call_with_retry",
]
