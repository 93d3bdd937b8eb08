r"""Contained invocation of user-defined hooks.

This module provides the wrapper used to invoke every caller-supplied
hook (``on_error``, ``on_success``, ``on_exhausted``). A hook that raises,
or whose awaitable result fails, never aborts the retry loop: the failure
is reported to the diagnostic logger and discarded.

The hooks have the following signatures:
- on_error(error, attempt): called after each failed attempt, with the
  0-indexed attempt that failed
- on_success(result): called once with the result of the operation
- on_exhausted(error): called at most once with the last failure

Example:
    ```pycon
    >>> from aretry.callbacks import invoke_callback
    >>> from aretry.utils import DiagnosticLogger
    >>> def broken_hook(result):
    ...     raise RuntimeError("boom")
    ...
    >>> invoke_callback("on_success", broken_hook, 42, diagnostics=DiagnosticLogger())
    False

    ```
"""

from __future__ import annotations

__all__ = ["invoke_callback", "invoke_callback_async"]

import inspect
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable

    from aretry.utils.diagnostics import DiagnosticLogger


def invoke_callback(
    name: str,
    callback: Callable[..., Any] | None,
    *args: Any,
    diagnostics: DiagnosticLogger,
) -> bool:
    """Invoke a hook synchronously inside a containment guard.

    An awaitable returned by the hook cannot be awaited here, so it is
    closed and reported as a failed invocation.

    Args:
        name: The hook name, used in diagnostics.
        callback: The hook to invoke. Nothing happens if it is ``None``.
        *args: Positional arguments passed to the hook.
        diagnostics: Sink receiving the contained failures.

    Returns:
        ``True`` if the hook is absent or completed normally,
            otherwise ``False``.
    """
    if callback is None:
        return True
    try:
        result = callback(*args)
    except Exception as exc:  # noqa: BLE001
        diagnostics.error(f"{name} callback raised {type(exc).__name__}: {exc}", exc=exc)
        return False
    if inspect.isawaitable(result):
        if inspect.iscoroutine(result):
            result.close()
        diagnostics.error(
            f"{name} callback returned an awaitable, which cannot be awaited by a "
            "synchronous executor"
        )
        return False
    return True


async def invoke_callback_async(
    name: str,
    callback: Callable[..., Any] | None,
    *args: Any,
    diagnostics: DiagnosticLogger,
) -> bool:
    """Invoke a sync or async hook inside a containment guard.

    If the hook returns an awaitable, it is awaited inside the same guard.

    Args:
        name: The hook name, used in diagnostics.
        callback: The hook to invoke. Nothing happens if it is ``None``.
        *args: Positional arguments passed to the hook.
        diagnostics: Sink receiving the contained failures.

    Returns:
        ``True`` if the hook is absent or completed normally,
            otherwise ``False``.
    """
    if callback is None:
        return True
    try:
        result = callback(*args)
        if inspect.isawaitable(result):
            await result
    except Exception as exc:  # noqa: BLE001
        diagnostics.error(f"{name} callback raised {type(exc).__name__}: {exc}", exc=exc)
        return False
    return True
