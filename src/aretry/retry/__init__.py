r"""Retry package implementing class-based composition pattern.

This package provides a modular retry execution system using composition
and strategy patterns for improved maintainability and testability.

Public API:
    - RetryConfig: Configuration for retry behavior
    - CallbackConfig: Configuration for hooks and diagnostics
    - DelayController: Computation of the waits between attempts
    - RetryDecider: Logic for deciding whether to retry
    - CallbackManager: Manager for contained hook invocations
    - AttemptState: Per-execution state of the retry loop
    - RetryOutcome: Result of an execution
    - RetryExecutor: Synchronous retry executor
    - AsyncRetryExecutor: Asynchronous retry executor
"""

from __future__ import annotations

__all__ = [
    "AsyncRetryExecutor",
    "AttemptState",
    "CallbackConfig",
    "CallbackManager",
    "DelayController",
    "RetryConfig",
    "RetryDecider",
    "RetryExecutor",
    "RetryOutcome",
]

from aretry.retry.config import CallbackConfig, RetryConfig
from aretry.retry.decider import RetryDecider
from aretry.retry.executor import RetryExecutor
from aretry.retry.executor_async import AsyncRetryExecutor
from aretry.retry.manager import CallbackManager
from aretry.retry.state import AttemptState, RetryOutcome
from aretry.retry.strategy import DelayController
