r"""Asynchronous retry executor.

This module provides the AsyncRetryExecutor class that runs a sync or
async operation with retries, waiting with ``asyncio.sleep`` between
attempts.
"""

from __future__ import annotations

__all__ = ["AsyncRetryExecutor"]

import asyncio
import time
from typing import TYPE_CHECKING, Any

from aretry.retry.attempt import run_attempt_async
from aretry.retry.executor_core import BaseRetryExecutor

if TYPE_CHECKING:
    from collections.abc import Callable

    from aretry.retry.state import RetryOutcome


class AsyncRetryExecutor(BaseRetryExecutor):
    """Executes an operation with automatic retry logic.

    The operation may be a plain function or a coroutine function: it is
    always called and its result is awaited when it is awaitable. Hooks
    may also be coroutine functions.

    The executor orchestrates the following components:
    - DelayController: Computes the waits between attempts
    - RetryDecider: Determines whether another attempt is permitted
    - CallbackManager: Invokes the hooks inside a containment guard

    Attributes:
        config: Configuration of the retry policy.
        diagnostics: Sink for the tracing of the loop.
        delays: Controller of the waits between attempts.
        decider: Logic for deciding whether to retry.
        callbacks: Manager for invoking the hooks.

    Example:
        ```pycon
        >>> import asyncio
        >>> from aretry.retry import AsyncRetryExecutor, CallbackConfig, RetryConfig
        >>> calls = []
        >>> async def flaky():
        ...     calls.append(1)
        ...     if len(calls) < 3:
        ...         raise ConnectionError("unreachable")
        ...     return "ok"
        ...
        >>> executor = AsyncRetryExecutor(
        ...     RetryConfig(max_attempts=4), CallbackConfig(on_success=print)
        ... )
        >>> outcome = asyncio.run(executor.execute(flaky))
        ok
        >>> outcome.attempts
        3

        ```
    """

    async def execute(
        self, operation: Callable[..., Any], *args: Any, **kwargs: Any
    ) -> RetryOutcome:
        """Execute an operation with automatic retry logic.

        Runs the operation until it succeeds or no further attempt is
        permitted, waiting between attempts according to the delay
        configuration. With ``max_attempts=N`` the operation runs at
        most ``N + 1`` times.

        The failure of the operation is never raised: ``on_error`` is
        called after each failed attempt, then exactly one of
        ``on_success`` or ``on_exhausted`` is called. Exceptions raised
        by the hooks are contained.

        Only ``Exception`` subclasses count as failures, so cancelling
        the task running this coroutine stops it at the current
        suspension point without calling any terminal hook.

        Args:
            operation: The sync or async function to run.
            *args: Positional arguments passed to the operation.
            **kwargs: Keyword arguments passed to the operation.

        Returns:
            The outcome of the execution.

        Raises:
            ConfigurationError: If ``operation`` is not callable.
        """
        self._check_operation(operation)
        start_time = time.monotonic()
        state = self.delays.new_state()

        while True:
            wait = self.delays.wait_time(state)
            if wait > 0:
                self._log_wait(state, wait)
                await asyncio.sleep(wait)

            result = await run_attempt_async(operation, *args, **kwargs)
            if result.succeeded:
                outcome = self._success(state, result.value, start_time)
                await self.callbacks.on_success_async(result.value)
                return outcome

            state.last_error = result.error
            self._log_failure(state, result.error)
            await self.callbacks.on_error_async(result.error, state.attempt)
            self.delays.record_failure(state)
            state.attempt += 1

            should_continue, reason = await self.decider.should_continue_async(
                state.attempt, result.error, time.monotonic() - start_time
            )
            if not should_continue:
                break
            self._log_retry(state, reason)

        outcome = self._exhausted(state, reason, start_time)
        await self.callbacks.on_exhausted_async(state.last_error)
        return outcome
