r"""Default configurations for the retry engine.

This module re-exports default configuration constants from
aretry.core.config for convenience.
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
