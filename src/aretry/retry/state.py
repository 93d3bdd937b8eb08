r"""Per-execution state and result of the retry loop."""

from __future__ import annotations

__all__ = ["AttemptState", "RetryOutcome"]

from dataclasses import dataclass
from typing import Any

from aretry.exceptions import RetryExhaustedError


@dataclass
class AttemptState:
    """Mutable state of one execution.

    It is created when an execution starts and discarded when it returns,
    so executions never share state.

    Attributes:
        attempt: The 0-indexed attempt about to run. It is incremented
            only after a failed attempt.
        current_delay: The wait in seconds before the next retry.
        last_error: The most recent failure, or ``None`` before any
            failure.
    """

    attempt: int = 0
    current_delay: float = 0.0
    last_error: Exception | None = None


@dataclass(frozen=True)
class RetryOutcome:
    """Result of an execution.

    The failure of the operation is never raised by the executors; this
    object tells the caller which terminal path was taken.

    Attributes:
        succeeded: Whether the operation eventually succeeded.
        attempts: Number of invocations of the operation.
        value: The result of the operation if it succeeded.
        error: The last failure if it did not succeed.
        elapsed: Duration of the execution in seconds, including waits.

    Example:
        ```pycon
        >>> from aretry.retry import RetryOutcome
        >>> outcome = RetryOutcome(succeeded=True, attempts=2, value="ok")
        >>> outcome.unwrap()
        'ok'

        ```
    """

    succeeded: bool
    attempts: int
    value: Any = None
    error: Exception | None = None
    elapsed: float = 0.0

    def unwrap(self) -> Any:
        """Return the value, or raise if the operation never succeeded.

        Returns:
            The result of the operation.

        Raises:
            RetryExhaustedError: If the execution ended without success.
                The last failure is chained as the cause.
        """
        if self.succeeded:
            return self.value
        msg = f"operation failed after {self.attempts} attempts: {self.error!r}"
        raise RetryExhaustedError(msg, last_error=self.error, attempts=self.attempts) from self.error
