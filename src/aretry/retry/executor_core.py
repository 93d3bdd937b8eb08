r"""Shared core logic for retry executors.

This module provides the base class of the synchronous and asynchronous
retry executors. It wires the strategy objects from the configuration
and holds the diagnostics shared by both retry loops.
"""

from __future__ import annotations

__all__ = ["BaseRetryExecutor"]

import time
from typing import TYPE_CHECKING, Any

from aretry.core.validation import validate_callable
from aretry.exceptions import ConfigurationError
from aretry.retry.config import CallbackConfig, RetryConfig
from aretry.retry.decider import RetryDecider
from aretry.retry.manager import CallbackManager
from aretry.retry.state import AttemptState, RetryOutcome
from aretry.retry.strategy import DelayController
from aretry.utils.diagnostics import DiagnosticLogger

if TYPE_CHECKING:
    from collections.abc import Callable


class BaseRetryExecutor:
    """Base class of the retry executors.

    An executor holds no per-execution state: each call to ``execute``
    creates its own ``AttemptState``, so one executor can run several
    executions, concurrently or re-entrantly.

    Args:
        retry_config: Configuration of the retry policy. Defaults to
            ``RetryConfig()``.
        callback_config: Configuration of the hooks and diagnostics.
            Defaults to ``CallbackConfig()``.

    Attributes:
        config: Configuration of the retry policy.
        diagnostics: Sink for the tracing of the loop.
        delays: Controller of the waits between attempts.
        decider: Logic for deciding whether to retry.
        callbacks: Manager for invoking the hooks.
    """

    def __init__(
        self,
        retry_config: RetryConfig | None = None,
        callback_config: CallbackConfig | None = None,
    ) -> None:
        self.config = retry_config if retry_config is not None else RetryConfig()
        callback_config = callback_config if callback_config is not None else CallbackConfig()
        self.diagnostics: DiagnosticLogger = DiagnosticLogger(
            logger=callback_config.logger, enabled=callback_config.logging_enabled
        )
        self.delays: DelayController = DelayController(
            self.config.base_delay,
            self.config.delay_growth_factor,
            self.config.max_delay,
        )
        self.decider: RetryDecider = RetryDecider(
            self.config.max_attempts,
            self.config.retry_condition,
            self.config.max_total_time,
            diagnostics=self.diagnostics,
        )
        self.callbacks: CallbackManager = CallbackManager(
            callback_config, diagnostics=self.diagnostics
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(config={self.config!r})"

    def _check_operation(self, operation: Callable[..., Any]) -> None:
        if operation is None:
            msg = "operation must be callable, got None"
            raise ConfigurationError(msg)
        validate_callable("operation", operation)

    def _log_wait(self, state: AttemptState, wait: float) -> None:
        self.diagnostics.debug(
            f"Waiting {wait:.2f}s before attempt {state.attempt + 1}",
            attempt=state.attempt,
            delay=wait,
        )

    def _log_failure(self, state: AttemptState, error: Exception) -> None:
        self.diagnostics.debug(
            f"Attempt {state.attempt + 1} failed with {type(error).__name__}: {error}",
            attempt=state.attempt,
            error_type=type(error).__name__,
        )

    def _log_retry(self, state: AttemptState, reason: str) -> None:
        self.diagnostics.debug(
            f"Will retry ({reason}), next attempt {state.attempt + 1}",
            attempt=state.attempt,
        )

    def _success(self, state: AttemptState, value: Any, start_time: float) -> RetryOutcome:
        self.diagnostics.debug(
            f"Operation succeeded on attempt {state.attempt + 1}", attempt=state.attempt
        )
        return RetryOutcome(
            succeeded=True,
            attempts=state.attempt + 1,
            value=value,
            elapsed=time.monotonic() - start_time,
        )

    def _exhausted(self, state: AttemptState, reason: str, start_time: float) -> RetryOutcome:
        error = state.last_error
        self.diagnostics.warning(
            f"Operation failed after {state.attempt} attempts ({reason}): {error!r}",
            attempt=state.attempt,
            error_type=type(error).__name__,
        )
        return RetryOutcome(
            succeeded=False,
            attempts=state.attempt,
            error=error,
            elapsed=time.monotonic() - start_time,
        )
