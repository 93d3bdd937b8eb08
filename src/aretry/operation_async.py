r"""Contains the function to run a sync or async operation with
automatic retry logic."""

from __future__ import annotations

__all__ = ["retry_operation"]

from typing import TYPE_CHECKING, Any

from aretry.core.config import (
    DEFAULT_BASE_DELAY,
    DEFAULT_DELAY_GROWTH_FACTOR,
    DEFAULT_MAX_ATTEMPTS,
    DEFAULT_MAX_DELAY,
)
from aretry.retry import AsyncRetryExecutor, CallbackConfig, RetryConfig

if TYPE_CHECKING:
    import logging
    from collections.abc import Callable

    from aretry.retry import RetryOutcome


async def retry_operation(
    operation: Callable[..., Any],
    *args: Any,
    max_attempts: int | str = DEFAULT_MAX_ATTEMPTS,
    base_delay: float = DEFAULT_BASE_DELAY,
    delay_growth_factor: float = DEFAULT_DELAY_GROWTH_FACTOR,
    max_delay: float = DEFAULT_MAX_DELAY,
    retry_condition: Callable[[int, Exception], Any] | None = None,
    max_total_time: float | None = None,
    on_error: Callable[[Exception, int], Any] | None = None,
    on_success: Callable[[Any], Any] | None = None,
    on_exhausted: Callable[[Exception], Any] | None = None,
    logger: logging.Logger | None = None,
    logging_enabled: bool = False,
    **kwargs: Any,
) -> RetryOutcome:
    """Run an operation with automatic retry logic.

    The operation is invoked until it succeeds or no further attempt is
    permitted. A plain function and a coroutine function are handled
    the same way: the result is awaited when it is awaitable.

    Attempt budget:
    - ``max_attempts=N`` allows the initial attempt plus ``N`` retries,
      i.e. at most ``N + 1`` invocations (the loop runs while the
      0-indexed attempt is ``<= N``)
    - ``max_attempts="unbounded"`` disables the budget; retrying then
      stops only on success, ``retry_condition`` or ``max_total_time``

    Delays:
    - No wait before the initial attempt
    - Wait before attempt ``i`` (``i >= 1``):
      ``min(base_delay * delay_growth_factor ** (i - 1), max_delay)``

    The failure of the operation is never raised. It is delivered via
    ``on_error`` after each failed attempt and via ``on_exhausted`` when
    retrying stops. Exceptions raised by any hook are contained: they
    are logged when logging is enabled, and discarded.

    Args:
        operation: The sync or async function to run.
        *args: Positional arguments passed to the operation.
        max_attempts: Number of retries after the initial attempt, or
            ``"unbounded"``. Must be >= 0.
        base_delay: Delay in seconds before the second attempt.
            Must be >= 0.
        delay_growth_factor: Multiplier applied to the delay after each
            retry. Must be >= 1.
        max_delay: Ceiling in seconds on the delay. Must be >= 0.
        retry_condition: Optional predicate called with
            ``(attempt, error)`` after each failure, ``attempt`` being
            the attempt that would run next. Retrying stops when it
            returns ``False``.
        max_total_time: Optional time budget in seconds for the whole
            execution. Must be > 0 if provided.
        on_error: Optional hook called with ``(error, attempt)`` after
            each failed attempt.
        on_success: Optional hook called once with the result.
        on_exhausted: Optional hook called once with the last failure
            when retrying stops without success.
        logger: Optional logger receiving the diagnostics.
        logging_enabled: Whether diagnostics are emitted.
        **kwargs: Keyword arguments passed to the operation.

    Returns:
        The outcome of the execution.

    Raises:
        ConfigurationError: If any of the parameters is invalid.

    Example:
        ```pycon
        >>> import asyncio
        >>> from aretry import retry_operation
        >>> async def fetch():
        ...     raise ConnectionError("unreachable")
        ...
        >>> outcome = asyncio.run(
        ...     retry_operation(
        ...         fetch,
        ...         max_attempts=2,
        ...         on_exhausted=lambda error: print(f"giving up: {error}"),
        ...     )
        ... )
        giving up: unreachable
        >>> outcome.attempts
        3

        ```
    """
    retry_config = RetryConfig(
        max_attempts=max_attempts,
        base_delay=base_delay,
        delay_growth_factor=delay_growth_factor,
        max_delay=max_delay,
        retry_condition=retry_condition,
        max_total_time=max_total_time,
    )
    callback_config = CallbackConfig(
        on_error=on_error,
        on_success=on_success,
        on_exhausted=on_exhausted,
        logger=logger,
        logging_enabled=logging_enabled,
    )
    executor = AsyncRetryExecutor(retry_config, callback_config)
    return await executor.execute(operation, *args, **kwargs)
