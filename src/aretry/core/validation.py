r"""Parameter validation utilities for the retry configuration.

This module provides validation functions for retry parameters to ensure
they meet the required constraints before the retry loop starts.
"""

from __future__ import annotations

__all__ = [
    "validate_callable",
    "validate_logger",
    "validate_max_attempts",
    "validate_retry_params",
    "validate_timeout",
]

import logging
import math
from typing import TYPE_CHECKING, Any

from aretry.core.config import (
    DEFAULT_BASE_DELAY,
    DEFAULT_DELAY_GROWTH_FACTOR,
    DEFAULT_MAX_DELAY,
    UNBOUNDED,
)
from aretry.exceptions import ConfigurationError

if TYPE_CHECKING:
    import httpx


def validate_max_attempts(max_attempts: Any) -> None:
    """Validate the attempt budget.

    Args:
        max_attempts: Number of retries after the initial attempt, or
            ``UNBOUNDED``. Must be an integer >= 0 if not ``UNBOUNDED``.

    Raises:
        ConfigurationError: If ``max_attempts`` is not ``UNBOUNDED``
            and not a non-negative integer.

    Example:
        ```pycon
        >>> from aretry.core.validation import validate_max_attempts
        >>> validate_max_attempts(3)
        >>> validate_max_attempts("unbounded")
        >>> validate_max_attempts(-1)  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        aretry.exceptions.ConfigurationError: max_attempts must be >= 0, got -1

        ```
    """
    if max_attempts == UNBOUNDED:
        return
    if isinstance(max_attempts, bool) or not isinstance(max_attempts, int):
        msg = f"max_attempts must be an int or {UNBOUNDED!r}, got {max_attempts!r}"
        raise ConfigurationError(msg)
    if max_attempts < 0:
        msg = f"max_attempts must be >= 0, got {max_attempts}"
        raise ConfigurationError(msg)


def validate_callable(name: str, value: Any) -> None:
    """Validate that an optional hook is callable.

    Args:
        name: The parameter name, used in the error message.
        value: The value to check. ``None`` is accepted.

    Raises:
        ConfigurationError: If ``value`` is neither ``None`` nor callable.
    """
    if value is not None and not callable(value):
        msg = f"{name} must be callable or None, got {type(value).__name__}"
        raise ConfigurationError(msg)


def _validate_number(name: str, value: Any, allow_inf: bool = False) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        msg = f"{name} must be a number, got {type(value).__name__}"
        raise ConfigurationError(msg)
    if math.isnan(value) or (math.isinf(value) and not allow_inf):
        msg = f"{name} must be finite, got {value}"
        raise ConfigurationError(msg)


def validate_retry_params(
    max_attempts: int | str,
    base_delay: float = DEFAULT_BASE_DELAY,
    delay_growth_factor: float = DEFAULT_DELAY_GROWTH_FACTOR,
    max_delay: float = DEFAULT_MAX_DELAY,
    max_total_time: float | None = None,
) -> None:
    """Validate retry parameters.

    Args:
        max_attempts: Number of retries after the initial attempt, or
            ``UNBOUNDED``. A value of 0 means no retries (only the
            initial attempt).
        base_delay: Delay in seconds before the second attempt. Must be >= 0.
        delay_growth_factor: Multiplier applied to the delay after each
            failure. Must be >= 1.
        max_delay: Ceiling in seconds on the computed delay. Must be >= 0.
        max_total_time: Optional time budget in seconds for the whole
            execution. Must be > 0 if provided.

    Raises:
        ConfigurationError: If any of the parameters is out of range.

    Example:
        ```pycon
        >>> from aretry.core import validate_retry_params
        >>> validate_retry_params(max_attempts=3)
        >>> validate_retry_params(max_attempts=3, base_delay=0.1, delay_growth_factor=2.0)
        >>> validate_retry_params(max_attempts="unbounded", max_total_time=60.0)
        >>> validate_retry_params(max_attempts=3, delay_growth_factor=0.5)  # doctest: +SKIP

        ```
    """
    validate_max_attempts(max_attempts)
    _validate_number("base_delay", base_delay)
    _validate_number("delay_growth_factor", delay_growth_factor)
    _validate_number("max_delay", max_delay, allow_inf=True)
    if max_total_time is not None:
        _validate_number("max_total_time", max_total_time, allow_inf=True)
    if base_delay < 0:
        msg = f"base_delay must be >= 0, got {base_delay}"
        raise ConfigurationError(msg)
    if delay_growth_factor < 1:
        msg = f"delay_growth_factor must be >= 1, got {delay_growth_factor}"
        raise ConfigurationError(msg)
    if max_delay < 0:
        msg = f"max_delay must be >= 0, got {max_delay}"
        raise ConfigurationError(msg)
    if max_total_time is not None and max_total_time <= 0:
        msg = f"max_total_time must be > 0, got {max_total_time}"
        raise ConfigurationError(msg)


def validate_logger(logger: Any) -> None:
    """Validate the optional diagnostic logger.

    Args:
        logger: The logger to check. ``None`` is accepted.

    Raises:
        ConfigurationError: If ``logger`` is not a ``logging.Logger``.
    """
    if logger is not None and not isinstance(logger, logging.Logger):
        msg = f"logger must be a logging.Logger or None, got {type(logger).__name__}"
        raise ConfigurationError(msg)


def validate_timeout(timeout: float | httpx.Timeout) -> None:
    """Validate timeout parameter.

    Args:
        timeout: Maximum seconds to wait for server responses.
            Must be > 0 if provided as a numeric value.

    Raises:
        ConfigurationError: If timeout is a numeric value <= 0.

    Example:
        ```pycon
        >>> from aretry.core.validation import validate_timeout
        >>> validate_timeout(10.0)
        >>> validate_timeout(0)  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        aretry.exceptions.ConfigurationError: timeout must be > 0, got 0

        ```
    """
    if isinstance(timeout, (int, float)) and timeout <= 0:
        msg = f"timeout must be > 0, got {timeout}"
        raise ConfigurationError(msg)
