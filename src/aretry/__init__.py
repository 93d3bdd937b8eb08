r"""aretry - Retry-with-backoff execution engine.

This package re-invokes a fallible operation, synchronous or
asynchronous, according to a configurable policy: attempt budget,
delay between attempts, delay growth and cap, and a custom continuation
predicate. It gives higher-level code (network calls, I/O, flaky
external dependencies) a uniform backoff behavior without re-implementing
the loop each time.

Key Features:
    - One code path for plain functions and coroutine functions
    - Configurable attempt budget, or unbounded retrying
    - Constant or growing delays, capped by a hard ceiling
    - Custom retry condition and total time budget
    - Lifecycle hooks (on_error, on_success, on_exhausted) whose own
      failures never break the retry loop
    - Optional diagnostics through the standard logging module
    - httpx helpers retrying transport errors and retryable status codes

Example:
    ```pycon
    >>> import asyncio
    >>> from aretry import retry_operation
    >>> async def fetch():
    ...     return "payload"
    ...
    >>> outcome = asyncio.run(
    ...     retry_operation(fetch, max_attempts=3, base_delay=0.5, delay_growth_factor=2.0)
    ... )
    >>> outcome.succeeded, outcome.value
    (True, 'payload')

    ```
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_BASE_DELAY",
    "DEFAULT_DELAY_GROWTH_FACTOR",
    "DEFAULT_MAX_ATTEMPTS",
    "DEFAULT_MAX_DELAY",
    "UNBOUNDED",
    "AsyncRetryExecutor",
    "CallbackConfig",
    "ConfigurationError",
    "RetryConfig",
    "RetryError",
    "RetryExecutor",
    "RetryExhaustedError",
    "RetryOutcome",
    "__version__",
    "request_with_retry",
    "request_with_retry_async",
    "retry_operation",
    "retry_operation_sync",
]

from importlib.metadata import PackageNotFoundError, version

from aretry.config import (
    DEFAULT_BASE_DELAY,
    DEFAULT_DELAY_GROWTH_FACTOR,
    DEFAULT_MAX_ATTEMPTS,
    DEFAULT_MAX_DELAY,
    UNBOUNDED,
)
from aretry.exceptions import ConfigurationError, RetryError, RetryExhaustedError
from aretry.http import request_with_retry, request_with_retry_async
from aretry.operation import retry_operation_sync
from aretry.operation_async import retry_operation
from aretry.retry import (
    AsyncRetryExecutor,
    CallbackConfig,
    RetryConfig,
    RetryExecutor,
    RetryOutcome,
)

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"
