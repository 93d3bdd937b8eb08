r"""Delay controller for the waits between attempts.

This module provides the DelayController class that decides whether to
wait before an attempt, and for how long.
"""

from __future__ import annotations

__all__ = ["DelayController"]

from aretry.core.config import DEFAULT_DELAY_GROWTH_FACTOR, DEFAULT_MAX_DELAY
from aretry.retry.state import AttemptState


class DelayController:
    """Compute capped, growing waits between attempts.

    No wait precedes the initial attempt. The wait before attempt ``i``
    (``i >= 1``) is ``min(base_delay * delay_growth_factor ** (i - 1),
    max_delay)``. The delay is grown by multiplication after each failed
    retry and clamped at every step, so it never exceeds ``max_delay``
    however many attempts run.

    Args:
        base_delay: Delay in seconds before the second attempt.
        delay_growth_factor: Multiplier applied to the delay after each
            failed retry.
        max_delay: Ceiling in seconds on the delay.

    Example:
        ```pycon
        >>> from aretry.retry import DelayController
        >>> controller = DelayController(base_delay=0.1, delay_growth_factor=2.0, max_delay=0.5)
        >>> state = controller.new_state()
        >>> waits = []
        >>> for _ in range(5):
        ...     waits.append(controller.wait_time(state))
        ...     controller.record_failure(state)
        ...     state.attempt += 1
        ...
        >>> waits
        [0.0, 0.1, 0.2, 0.4, 0.5]

        ```
    """

    def __init__(
        self,
        base_delay: float,
        delay_growth_factor: float = DEFAULT_DELAY_GROWTH_FACTOR,
        max_delay: float = DEFAULT_MAX_DELAY,
    ) -> None:
        self.base_delay = base_delay
        self.delay_growth_factor = delay_growth_factor
        self.max_delay = max_delay

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(base_delay={self.base_delay}, "
            f"delay_growth_factor={self.delay_growth_factor}, max_delay={self.max_delay})"
        )

    def new_state(self) -> AttemptState:
        """Create the state of a new execution.

        Returns:
            A state positioned before the initial attempt.
        """
        return AttemptState(current_delay=min(self.base_delay, self.max_delay))

    def wait_time(self, state: AttemptState) -> float:
        """Return the wait in seconds before the attempt ``state.attempt``.

        Args:
            state: The state of the execution.

        Returns:
            0 for the initial attempt, otherwise the current delay.
        """
        if state.attempt == 0:
            return 0.0
        return state.current_delay

    def record_failure(self, state: AttemptState) -> None:
        """Update the delay after the attempt ``state.attempt`` failed.

        The first failure keeps ``base_delay`` for the first retry; each
        later failure multiplies the delay by ``delay_growth_factor``.

        Args:
            state: The state of the execution, updated in place.
        """
        if state.attempt > 0:
            state.current_delay = min(
                state.current_delay * self.delay_growth_factor, self.max_delay
            )
