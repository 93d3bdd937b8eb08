r"""Core shared logic for the sync and async retry executors.

This module contains the configuration defaults and the validation
helpers used by both executors and by the functional entry points.
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_BASE_DELAY",
    "DEFAULT_DELAY_GROWTH_FACTOR",
    "DEFAULT_MAX_ATTEMPTS",
    "DEFAULT_MAX_DELAY",
    "DEFAULT_TIMEOUT",
    "RETRY_STATUS_CODES",
    "UNBOUNDED",
    "validate_callable",
    "validate_logger",
    "validate_max_attempts",
    "validate_retry_params",
    "validate_timeout",
]


from aretry.core.config import (
    DEFAULT_BASE_DELAY,
    DEFAULT_DELAY_GROWTH_FACTOR,
    DEFAULT_MAX_ATTEMPTS,
    DEFAULT_MAX_DELAY,
    DEFAULT_TIMEOUT,
    RETRY_STATUS_CODES,
    UNBOUNDED,
)
from aretry.core.validation import (
    validate_callable,
    validate_logger,
    validate_max_attempts,
    validate_retry_params,
    validate_timeout,
)
