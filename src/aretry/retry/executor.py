r"""Synchronous retry executor.

This module provides the RetryExecutor class that runs a synchronous
operation with retries, blocking with ``time.sleep`` between attempts.
"""

from __future__ import annotations

__all__ = ["RetryExecutor"]

import inspect
import time
from typing import TYPE_CHECKING, Any

from aretry.exceptions import ConfigurationError
from aretry.retry.attempt import run_attempt
from aretry.retry.executor_core import BaseRetryExecutor

if TYPE_CHECKING:
    from collections.abc import Callable

    from aretry.retry.state import RetryOutcome


class RetryExecutor(BaseRetryExecutor):
    """Executes a synchronous operation with automatic retry logic.

    This class runs the same retry loop as ``AsyncRetryExecutor`` for
    callers that are not running inside an event loop. Coroutine
    functions are rejected; hooks must be synchronous.

    Attributes:
        config: Configuration of the retry policy.
        diagnostics: Sink for the tracing of the loop.
        delays: Controller of the waits between attempts.
        decider: Logic for deciding whether to retry.
        callbacks: Manager for invoking the hooks.

    Example:
        ```pycon
        >>> from aretry.retry import CallbackConfig, RetryConfig, RetryExecutor
        >>> errors = []
        >>> executor = RetryExecutor(
        ...     RetryConfig(max_attempts=2),
        ...     CallbackConfig(on_error=lambda error, attempt: errors.append(attempt)),
        ... )
        >>> outcome = executor.execute(int, "not a number")
        >>> outcome.succeeded, outcome.attempts, errors
        (False, 3, [0, 1, 2])

        ```
    """

    def execute(self, operation: Callable[..., Any], *args: Any, **kwargs: Any) -> RetryOutcome:
        """Execute a synchronous operation with automatic retry logic.

        Runs the operation until it succeeds or no further attempt is
        permitted. With ``max_attempts=N`` the operation runs at most
        ``N + 1`` times. The failure of the operation is never raised;
        it is reported through ``on_error`` and ``on_exhausted``.

        Args:
            operation: The function to run.
            *args: Positional arguments passed to the operation.
            **kwargs: Keyword arguments passed to the operation.

        Returns:
            The outcome of the execution.

        Raises:
            ConfigurationError: If ``operation`` is not callable or is a
                coroutine function.
        """
        self._check_operation(operation)
        if inspect.iscoroutinefunction(operation):
            msg = (
                "RetryExecutor cannot run coroutine functions, use AsyncRetryExecutor "
                f"instead (got {operation.__qualname__})"
            )
            raise ConfigurationError(msg)
        start_time = time.monotonic()
        state = self.delays.new_state()

        while True:
            wait = self.delays.wait_time(state)
            if wait > 0:
                self._log_wait(state, wait)
                time.sleep(wait)

            result = run_attempt(operation, *args, **kwargs)
            if result.succeeded:
                outcome = self._success(state, result.value, start_time)
                self.callbacks.on_success(result.value)
                return outcome

            state.last_error = result.error
            self._log_failure(state, result.error)
            self.callbacks.on_error(result.error, state.attempt)
            self.delays.record_failure(state)
            state.attempt += 1

            should_continue, reason = self.decider.should_continue(
                state.attempt, result.error, time.monotonic() - start_time
            )
            if not should_continue:
                break
            self._log_retry(state, reason)

        outcome = self._exhausted(state, reason, start_time)
        self.callbacks.on_exhausted(state.last_error)
        return outcome
