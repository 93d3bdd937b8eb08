r"""Contains the function to run a synchronous operation with automatic
retry logic."""

from __future__ import annotations

__all__ = ["retry_operation_sync"]

from typing import TYPE_CHECKING, Any

from aretry.core.config import (
    DEFAULT_BASE_DELAY,
    DEFAULT_DELAY_GROWTH_FACTOR,
    DEFAULT_MAX_ATTEMPTS,
    DEFAULT_MAX_DELAY,
)
from aretry.retry import CallbackConfig, RetryConfig, RetryExecutor

if TYPE_CHECKING:
    import logging
    from collections.abc import Callable

    from aretry.retry import RetryOutcome


def retry_operation_sync(
    operation: Callable[..., Any],
    *args: Any,
    max_attempts: int | str = DEFAULT_MAX_ATTEMPTS,
    base_delay: float = DEFAULT_BASE_DELAY,
    delay_growth_factor: float = DEFAULT_DELAY_GROWTH_FACTOR,
    max_delay: float = DEFAULT_MAX_DELAY,
    retry_condition: Callable[[int, Exception], bool] | None = None,
    max_total_time: float | None = None,
    on_error: Callable[[Exception, int], Any] | None = None,
    on_success: Callable[[Any], Any] | None = None,
    on_exhausted: Callable[[Exception], Any] | None = None,
    logger: logging.Logger | None = None,
    logging_enabled: bool = False,
    **kwargs: Any,
) -> RetryOutcome:
    """Run a synchronous operation with automatic retry logic.

    This is the blocking counterpart of ``retry_operation``: the waits
    use ``time.sleep`` and the operation and hooks must be synchronous.
    See ``retry_operation`` for the meaning of the parameters; in
    particular ``max_attempts=N`` allows at most ``N + 1`` invocations.

    Args:
        operation: The function to run.
        *args: Positional arguments passed to the operation.
        max_attempts: Number of retries after the initial attempt, or
            ``"unbounded"``.
        base_delay: Delay in seconds before the second attempt.
        delay_growth_factor: Multiplier applied to the delay after each
            retry.
        max_delay: Ceiling in seconds on the delay.
        retry_condition: Optional predicate called with
            ``(attempt, error)`` after each failure.
        max_total_time: Optional time budget in seconds.
        on_error: Optional hook called with ``(error, attempt)``.
        on_success: Optional hook called once with the result.
        on_exhausted: Optional hook called once with the last failure.
        logger: Optional logger receiving the diagnostics.
        logging_enabled: Whether diagnostics are emitted.
        **kwargs: Keyword arguments passed to the operation.

    Returns:
        The outcome of the execution.

    Raises:
        ConfigurationError: If any of the parameters is invalid, or if
            ``operation`` is a coroutine function.

    Example:
        ```pycon
        >>> from aretry import retry_operation_sync
        >>> outcome = retry_operation_sync(int, "42", on_success=print)
        42
        >>> outcome.succeeded
        True

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
    executor = RetryExecutor(retry_config, callback_config)
    return executor.execute(operation, *args, **kwargs)
