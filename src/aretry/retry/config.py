r"""Configuration dataclasses for retry behavior.

This module provides configuration objects for the retry policy and for
the hooks and diagnostics of an execution. Both are validated eagerly
so an invalid configuration is rejected before the first attempt.
"""

from __future__ import annotations

__all__ = ["CallbackConfig", "RetryConfig"]

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any

from aretry.core.config import (
    DEFAULT_BASE_DELAY,
    DEFAULT_DELAY_GROWTH_FACTOR,
    DEFAULT_MAX_ATTEMPTS,
    DEFAULT_MAX_DELAY,
    UNBOUNDED,
)
from aretry.core.validation import (
    validate_callable,
    validate_logger,
    validate_retry_params,
)

if TYPE_CHECKING:
    import logging
    from collections.abc import Callable


@dataclass(frozen=True)
class RetryConfig:
    """Configuration for retry behavior.

    ``max_attempts`` counts the retries that follow the initial attempt:
    the loop keeps running while the attempt index is ``<= max_attempts``,
    so ``max_attempts=N`` allows up to ``N + 1`` invocations of the
    operation and ``max_attempts=0`` allows exactly one.

    The wait before attempt ``i`` (``i >= 1``) is
    ``min(base_delay * delay_growth_factor ** (i - 1), max_delay)``.
    No wait precedes the initial attempt.

    Attributes:
        max_attempts: Number of retries after the initial attempt, or
            ``UNBOUNDED`` to disable the attempt budget.
        base_delay: Delay in seconds before the second attempt.
        delay_growth_factor: Multiplier (>= 1) applied to the delay
            after each retry. 1 means constant delay.
        max_delay: Ceiling in seconds on the computed delay.
        retry_condition: Optional predicate called with
            ``(attempt, error)`` after each failure. Retrying stops when
            it returns ``False``, even if the attempt budget remains.
        max_total_time: Optional time budget in seconds. Retrying stops
            when it is exceeded. An attempt in progress is never
            interrupted.

    Raises:
        ConfigurationError: If any of the values is invalid.

    Example:
        ```pycon
        >>> from aretry.retry import RetryConfig
        >>> config = RetryConfig(max_attempts=4, base_delay=0.1, delay_growth_factor=2.0)
        >>> config.max_delay
        30.0
        >>> config.merge(max_attempts="unbounded").is_unbounded
        True

        ```
    """

    max_attempts: int | str = DEFAULT_MAX_ATTEMPTS
    base_delay: float = DEFAULT_BASE_DELAY
    delay_growth_factor: float = DEFAULT_DELAY_GROWTH_FACTOR
    max_delay: float = DEFAULT_MAX_DELAY
    retry_condition: Callable[[int, Exception], bool] | None = None
    max_total_time: float | None = None

    def __post_init__(self) -> None:
        validate_retry_params(
            max_attempts=self.max_attempts,
            base_delay=self.base_delay,
            delay_growth_factor=self.delay_growth_factor,
            max_delay=self.max_delay,
            max_total_time=self.max_total_time,
        )
        validate_callable("retry_condition", self.retry_condition)

    @property
    def is_unbounded(self) -> bool:
        """Whether the attempt budget is disabled."""
        return self.max_attempts == UNBOUNDED

    def merge(self, **overrides: Any) -> RetryConfig:
        """Create a new configuration with some values overridden.

        Args:
            **overrides: The fields to override.

        Returns:
            A new validated configuration. The original is unchanged.
        """
        return replace(self, **overrides)


@dataclass(frozen=True)
class CallbackConfig:
    """Configuration for hooks and diagnostics.

    Every hook is invoked inside a containment guard: an exception
    raised by a hook is logged (if logging is enabled) and discarded.

    Attributes:
        on_error: Optional hook called with ``(error, attempt)`` after
            each failed attempt. ``attempt`` is 0-indexed.
        on_success: Optional hook called once with the result of the
            operation.
        on_exhausted: Optional hook called at most once with the last
            failure when no further attempt is permitted.
        logger: Optional logger receiving the diagnostics.
        logging_enabled: Whether diagnostics are emitted at all.

    Raises:
        ConfigurationError: If a hook is not callable or the logger is
            not a ``logging.Logger``.
    """

    on_error: Callable[[Exception, int], Any] | None = None
    on_success: Callable[[Any], Any] | None = None
    on_exhausted: Callable[[Exception], Any] | None = None
    logger: logging.Logger | None = None
    logging_enabled: bool = False

    def __post_init__(self) -> None:
        validate_callable("on_error", self.on_error)
        validate_callable("on_success", self.on_success)
        validate_callable("on_exhausted", self.on_exhausted)
        validate_logger(self.logger)
