r"""Default values for the retry configuration.

This module provides the configuration constants shared by the retry
executors, the functional entry points and the HTTP helpers.
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

from typing import Final

# Sentinel accepted by max_attempts to disable the attempt budget
UNBOUNDED: Final = "unbounded"

# Default number of retries after the initial attempt
# Total attempts = max_attempts + 1 (initial attempt)
DEFAULT_MAX_ATTEMPTS = 3

# Default delay in seconds before the second attempt
# 0 means the retries run immediately
DEFAULT_BASE_DELAY = 0.0

# Default multiplier applied to the delay after each failure
# 1 means constant delay
DEFAULT_DELAY_GROWTH_FACTOR = 1.0

# Hard ceiling in seconds on the computed delay
DEFAULT_MAX_DELAY = 30.0

# HTTP status codes that aretry.http treats as a failed attempt
# 429: Too Many Requests - Rate limiting
# 500: Internal Server Error - Temporary server issue
# 502: Bad Gateway - Upstream server error
# 503: Service Unavailable - Server overloaded or down
# 504: Gateway Timeout - Upstream server timeout
RETRY_STATUS_CODES = (429, 500, 502, 503, 504)

# Default timeout in seconds for the clients created by aretry.http
DEFAULT_TIMEOUT = 10.0
