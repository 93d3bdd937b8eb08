r"""Callback manager for orchestrating retry lifecycle events.

This module provides the CallbackManager class that handles the
contained invocation of the user-defined hooks at the points of the
retry lifecycle.
"""

from __future__ import annotations

__all__ = ["CallbackManager"]

from typing import TYPE_CHECKING, Any

from aretry.callbacks import invoke_callback, invoke_callback_async
from aretry.utils.diagnostics import DiagnosticLogger

if TYPE_CHECKING:
    from aretry.retry.config import CallbackConfig


class CallbackManager:
    """Manages hook invocations during the retry lifecycle.

    Every invocation goes through the containment guard, so a failing
    hook never reaches the retry loop.

    Attributes:
        callbacks: Configuration containing the hooks.
        diagnostics: Sink receiving the failures of the hooks.
    """

    def __init__(
        self, callbacks: CallbackConfig, diagnostics: DiagnosticLogger | None = None
    ) -> None:
        """Initialize callback manager.

        Args:
            callbacks: Callback configuration.
            diagnostics: Sink receiving the failures of the hooks. It is
                built from ``callbacks`` if not provided.
        """
        self.callbacks = callbacks
        self.diagnostics = (
            diagnostics
            if diagnostics is not None
            else DiagnosticLogger(logger=callbacks.logger, enabled=callbacks.logging_enabled)
        )

    def on_error(self, error: Exception, attempt: int) -> None:
        """Invoke on_error callback.

        Args:
            error: The failure of the attempt.
            attempt: The 0-indexed attempt that failed.
        """
        invoke_callback(
            "on_error", self.callbacks.on_error, error, attempt, diagnostics=self.diagnostics
        )

    def on_success(self, result: Any) -> None:
        """Invoke on_success callback.

        Args:
            result: The result of the operation.
        """
        invoke_callback(
            "on_success", self.callbacks.on_success, result, diagnostics=self.diagnostics
        )

    def on_exhausted(self, error: Exception | None) -> None:
        """Invoke on_exhausted callback.

        Args:
            error: The failure of the last attempt.
        """
        invoke_callback(
            "on_exhausted", self.callbacks.on_exhausted, error, diagnostics=self.diagnostics
        )

    async def on_error_async(self, error: Exception, attempt: int) -> None:
        """Invoke on_error callback, awaiting its result if needed.

        Args:
            error: The failure of the attempt.
            attempt: The 0-indexed attempt that failed.
        """
        await invoke_callback_async(
            "on_error", self.callbacks.on_error, error, attempt, diagnostics=self.diagnostics
        )

    async def on_success_async(self, result: Any) -> None:
        """Invoke on_success callback, awaiting its result if needed.

        Args:
            result: The result of the operation.
        """
        await invoke_callback_async(
            "on_success", self.callbacks.on_success, result, diagnostics=self.diagnostics
        )

    async def on_exhausted_async(self, error: Exception | None) -> None:
        """Invoke on_exhausted callback, awaiting its result if needed.

        Args:
            error: The failure of the last attempt.
        """
        await invoke_callback_async(
            "on_exhausted", self.callbacks.on_exhausted, error, diagnostics=self.diagnostics
        )
