r"""Diagnostic sink used by the retry executors.

This module provides the ``DiagnosticLogger`` class that routes the
internal tracing of the retry loop and the failures of contained
callbacks to an optional ``logging.Logger``. Logging is all-or-nothing:
when it is disabled nothing is emitted, and a failure inside the logger
call itself is swallowed so it can never break the retry loop.

Example:
    Send the diagnostics of an execution to a dedicated logger:

    ```python
    import logging

    from aretry import retry_operation

    logger = logging.getLogger("myapp.retry")
    outcome = await retry_operation(
        fetch, max_attempts=3, logger=logger, logging_enabled=True
    )
    ```
"""

from __future__ import annotations

__all__ = ["DiagnosticLogger"]

import logging
from contextlib import suppress
from typing import Any

_default_logger: logging.Logger = logging.getLogger("aretry")


class DiagnosticLogger:
    """Optional diagnostic sink with contained failures.

    Args:
        logger: Logger receiving the records. Defaults to the ``aretry``
            logger when logging is enabled and no logger is given.
        enabled: Whether diagnostics are emitted at all.

    Attributes:
        logger: The logger receiving the records.
        enabled: Whether diagnostics are emitted at all.

    Example:
        ```pycon
        >>> import logging
        >>> from aretry.utils.diagnostics import DiagnosticLogger
        >>> diagnostics = DiagnosticLogger(enabled=False)
        >>> diagnostics.debug("not emitted")
        >>> diagnostics.logger.name
        'aretry'

        ```
    """

    def __init__(self, logger: logging.Logger | None = None, enabled: bool = False) -> None:
        self.logger = logger if logger is not None else _default_logger
        self.enabled = enabled

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(logger={self.logger.name!r}, enabled={self.enabled})"

    def debug(self, message: str, **extra: Any) -> None:
        """Log a tracing message at DEBUG level.

        Args:
            message: Log message.
            **extra: Additional structured fields attached to the record.
        """
        self.log(logging.DEBUG, message, **extra)

    def warning(self, message: str, **extra: Any) -> None:
        """Log a message at WARNING level.

        Args:
            message: Log message.
            **extra: Additional structured fields attached to the record.
        """
        self.log(logging.WARNING, message, **extra)

    def error(self, message: str, exc: BaseException | None = None, **extra: Any) -> None:
        """Log a message at ERROR level, with the traceback of ``exc``.

        Args:
            message: Log message.
            exc: Optional exception whose traceback is attached.
            **extra: Additional structured fields attached to the record.
        """
        self.log(logging.ERROR, message, exc_info=exc, **extra)

    def log(
        self,
        level: int,
        message: str,
        exc_info: BaseException | None = None,
        **extra: Any,
    ) -> None:
        """Log a message if diagnostics are enabled.

        Any exception raised by the logger (a broken handler, a failing
        filter, ...) is discarded.

        Args:
            level: Log level (e.g., logging.INFO).
            message: Log message.
            exc_info: Optional exception whose traceback is attached.
            **extra: Additional structured fields attached to the record.
        """
        if not self.enabled:
            return
        with suppress(Exception):
            self.logger.log(level, message, exc_info=exc_info, extra=extra or None)
