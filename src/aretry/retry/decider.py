r"""Continuation logic of the retry loop.

This module provides the RetryDecider class that decides, after a
failed attempt, whether another attempt is permitted. Retrying
continues only while the attempt budget remains (or is unbounded), the
time budget is not exceeded, and the optional retry condition holds.
"""

from __future__ import annotations

__all__ = ["RetryDecider"]

import inspect
from typing import TYPE_CHECKING

from aretry.core.config import UNBOUNDED
from aretry.utils.diagnostics import DiagnosticLogger

if TYPE_CHECKING:
    from collections.abc import Callable


class RetryDecider:
    """Decides whether a failed operation should be retried.

    A ``retry_condition`` that raises is treated as returning ``False``:
    the failure is reported to the diagnostics and retrying stops.

    Args:
        max_attempts: Number of retries after the initial attempt, or
            ``UNBOUNDED``.
        retry_condition: Optional predicate called with ``(attempt, error)``.
        max_total_time: Optional time budget in seconds.
        diagnostics: Sink receiving the failures of ``retry_condition``.

    Example:
        ```pycon
        >>> from aretry.retry import RetryDecider
        >>> decider = RetryDecider(max_attempts=2)
        >>> decider.should_continue(attempt=2, error=ValueError(), elapsed=0.0)
        (True, 'ValueError')
        >>> decider.should_continue(attempt=3, error=ValueError(), elapsed=0.0)
        (False, 'max attempts exhausted')

        ```
    """

    def __init__(
        self,
        max_attempts: int | str,
        retry_condition: Callable[[int, Exception], bool] | None = None,
        max_total_time: float | None = None,
        diagnostics: DiagnosticLogger | None = None,
    ) -> None:
        self.max_attempts = max_attempts
        self.retry_condition = retry_condition
        self.max_total_time = max_total_time
        self.diagnostics = diagnostics if diagnostics is not None else DiagnosticLogger()

    def has_budget(self, attempt: int) -> bool:
        """Whether the attempt ``attempt`` fits in the attempt budget.

        Args:
            attempt: The 0-indexed attempt about to run.

        Returns:
            ``True`` if the budget is unbounded or
                ``attempt <= max_attempts``.
        """
        return self.max_attempts == UNBOUNDED or attempt <= self.max_attempts

    def should_continue(
        self, attempt: int, error: Exception, elapsed: float
    ) -> tuple[bool, str]:
        """Determine if the attempt ``attempt`` should run.

        Args:
            attempt: The 0-indexed attempt that would run next.
            error: The failure of the previous attempt.
            elapsed: Seconds spent since the execution started.

        Returns:
            Tuple of (should_continue, reason).
        """
        stop_reason = self._check_budgets(attempt, elapsed)
        if stop_reason is not None:
            return (False, stop_reason)
        if self.retry_condition is None:
            return (True, type(error).__name__)
        try:
            result = self.retry_condition(attempt, error)
            if inspect.isawaitable(result):
                if inspect.iscoroutine(result):
                    result.close()
                self.diagnostics.error(
                    "retry_condition returned an awaitable, which cannot be awaited by a "
                    "synchronous executor"
                )
                return (False, "retry_condition returned an awaitable")
            retry = bool(result)
        except Exception as exc:  # noqa: BLE001
            return self._condition_failed(exc)
        return self._condition_result(retry, error)

    async def should_continue_async(
        self, attempt: int, error: Exception, elapsed: float
    ) -> tuple[bool, str]:
        """Determine if the attempt ``attempt`` should run.

        Same as ``should_continue`` but ``retry_condition`` may be a
        coroutine function.

        Args:
            attempt: The 0-indexed attempt that would run next.
            error: The failure of the previous attempt.
            elapsed: Seconds spent since the execution started.

        Returns:
            Tuple of (should_continue, reason).
        """
        stop_reason = self._check_budgets(attempt, elapsed)
        if stop_reason is not None:
            return (False, stop_reason)
        if self.retry_condition is None:
            return (True, type(error).__name__)
        try:
            result = self.retry_condition(attempt, error)
            if inspect.isawaitable(result):
                result = await result
            retry = bool(result)
        except Exception as exc:  # noqa: BLE001
            return self._condition_failed(exc)
        return self._condition_result(retry, error)

    def _check_budgets(self, attempt: int, elapsed: float) -> str | None:
        if not self.has_budget(attempt):
            return "max attempts exhausted"
        if self.max_total_time is not None and elapsed >= self.max_total_time:
            return "max_total_time exceeded"
        return None

    def _condition_failed(self, exc: Exception) -> tuple[bool, str]:
        self.diagnostics.error(
            f"retry_condition raised {type(exc).__name__}: {exc}", exc=exc
        )
        return (False, "retry_condition raised")

    @staticmethod
    def _condition_result(retry: bool, error: Exception) -> tuple[bool, str]:
        if not retry:
            return (False, "retry_condition returned False")
        return (True, type(error).__name__)
