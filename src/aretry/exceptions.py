r"""Exception classes raised by the retry engine.

The engine never raises the failure of the retried operation. The only
exception raised by an executor is ``ConfigurationError``, and it is raised
before the first attempt. ``RetryExhaustedError`` is reserved for the
caller-facing wrappers that convert a failed outcome into an exception.
"""

from __future__ import annotations

__all__ = ["ConfigurationError", "RetryError", "RetryExhaustedError"]


class RetryError(Exception):
    """Base class of all the exceptions raised by ``aretry``."""


class ConfigurationError(RetryError, ValueError):
    """Raised when a retry configuration is invalid.

    It also derives from ``ValueError`` so code catching invalid
    argument values keeps working.

    Example:
        ```pycon
        >>> from aretry.exceptions import ConfigurationError
        >>> try:
        ...     raise ConfigurationError("base_delay must be >= 0, got -1")
        ... except ValueError as exc:
        ...     print(exc)
        ...
        base_delay must be >= 0, got -1

        ```
    """


class RetryExhaustedError(RetryError):
    """Raised by the wrappers when all the attempts failed.

    Args:
        message: Descriptive error message.
        last_error: The failure of the last attempt.
        attempts: The number of attempts that were performed.

    Attributes:
        last_error: The failure of the last attempt.
        attempts: The number of attempts that were performed.

    Example:
        ```pycon
        >>> from aretry.exceptions import RetryExhaustedError
        >>> error = RetryExhaustedError(
        ...     "operation failed after 3 attempts",
        ...     last_error=TimeoutError("timed out"),
        ...     attempts=3,
        ... )
        >>> error.attempts
        3
        >>> error.last_error
        TimeoutError('timed out')

        ```
    """

    def __init__(
        self,
        message: str,
        last_error: BaseException | None = None,
        attempts: int = 0,
    ) -> None:
        super().__init__(message)
        self.last_error = last_error
        self.attempts = attempts
