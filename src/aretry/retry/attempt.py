r"""Single invocation of the retried operation.

The functions of this module run the operation once and capture its
failure. They neither retry, log, nor touch the attempt state.
"""

from __future__ import annotations

__all__ = ["AttemptResult", "run_attempt", "run_attempt_async"]

import inspect
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable


@dataclass(frozen=True)
class AttemptResult:
    """Outcome of one attempt.

    Attributes:
        value: The result of the operation if it succeeded.
        error: The exception raised by the operation, or ``None``.
    """

    value: Any = None
    error: Exception | None = None

    @property
    def succeeded(self) -> bool:
        """Whether the attempt completed without raising."""
        return self.error is None


def run_attempt(operation: Callable[..., Any], *args: Any, **kwargs: Any) -> AttemptResult:
    """Run a synchronous operation once.

    An operation returning an awaitable cannot be resolved without an
    event loop, so the awaitable is closed and the attempt fails with a
    ``TypeError``.

    Args:
        operation: The operation to run.
        *args: Positional arguments passed to the operation.
        **kwargs: Keyword arguments passed to the operation.

    Returns:
        The outcome of the attempt.

    Example:
        ```pycon
        >>> from aretry.retry.attempt import run_attempt
        >>> run_attempt(int, "42")
        AttemptResult(value=42, error=None)
        >>> run_attempt(int, "forty-two").succeeded
        False

        ```
    """
    try:
        value = operation(*args, **kwargs)
    except Exception as exc:  # noqa: BLE001
        return AttemptResult(error=exc)
    if inspect.isawaitable(value):
        if inspect.iscoroutine(value):
            value.close()
        msg = (
            f"{getattr(operation, '__qualname__', operation)!s} returned an awaitable; "
            "use AsyncRetryExecutor to retry asynchronous operations"
        )
        return AttemptResult(error=TypeError(msg))
    return AttemptResult(value=value)


async def run_attempt_async(
    operation: Callable[..., Any], *args: Any, **kwargs: Any
) -> AttemptResult:
    """Run a sync or async operation once.

    The operation is called and its result is awaited when it is
    awaitable, so plain functions and coroutine functions share one
    code path.

    Args:
        operation: The operation to run.
        *args: Positional arguments passed to the operation.
        **kwargs: Keyword arguments passed to the operation.

    Returns:
        The outcome of the attempt.
    """
    try:
        value = operation(*args, **kwargs)
        if inspect.isawaitable(value):
            value = await value
    except Exception as exc:  # noqa: BLE001
        return AttemptResult(error=exc)
    return AttemptResult(value=value)
