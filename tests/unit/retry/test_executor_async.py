r"""Unit tests for asynchronous retry executor."""

from __future__ import annotations

import asyncio
import logging
from unittest.mock import AsyncMock, Mock, call

import pytest

from aretry.exceptions import ConfigurationError
from aretry.retry import AsyncRetryExecutor, CallbackConfig, RetryConfig


def make_executor(
    on_error: Mock | None = None,
    on_success: Mock | None = None,
    on_exhausted: Mock | None = None,
    **kwargs,
) -> AsyncRetryExecutor:
    return AsyncRetryExecutor(
        RetryConfig(**kwargs),
        CallbackConfig(on_error=on_error, on_success=on_success, on_exhausted=on_exhausted),
    )


def test_async_retry_executor_creation() -> None:
    retry_config = RetryConfig(max_attempts=3)
    executor = AsyncRetryExecutor(retry_config, CallbackConfig())

    assert executor.config is retry_config
    assert executor.delays is not None
    assert executor.decider is not None
    assert executor.callbacks is not None
    assert not executor.diagnostics.enabled


def test_async_retry_executor_default_configs() -> None:
    executor = AsyncRetryExecutor()
    assert executor.config == RetryConfig()


@pytest.mark.asyncio
async def test_async_retry_executor_successful_operation(mock_asleep: Mock) -> None:
    on_error, on_success, on_exhausted = Mock(), Mock(), Mock()
    executor = make_executor(on_error, on_success, on_exhausted, base_delay=1.0)
    operation = AsyncMock(return_value="payload")

    outcome = await executor.execute(operation)

    assert outcome.succeeded
    assert outcome.attempts == 1
    assert outcome.value == "payload"
    assert outcome.error is None
    operation.assert_awaited_once_with()
    on_success.assert_called_once_with("payload")
    on_error.assert_not_called()
    on_exhausted.assert_not_called()
    mock_asleep.assert_not_called()


@pytest.mark.asyncio
async def test_async_retry_executor_passes_arguments() -> None:
    operation = AsyncMock(return_value=None)
    await make_executor().execute(operation, 1, 2, key="value")
    operation.assert_awaited_once_with(1, 2, key="value")


@pytest.mark.asyncio
async def test_async_retry_executor_sync_operation() -> None:
    """Test that a plain function shares the async code path."""
    on_success = Mock()
    outcome = await make_executor(on_success=on_success).execute(lambda: 7)

    assert outcome.value == 7
    on_success.assert_called_once_with(7)


@pytest.mark.asyncio
@pytest.mark.parametrize("max_attempts", [0, 1, 2, 5])
async def test_async_retry_executor_always_failing(mock_asleep: Mock, max_attempts: int) -> None:
    """Test that max_attempts=N yields N + 1 attempts then exhaustion."""
    error = ConnectionError("unreachable")
    on_error, on_success, on_exhausted = Mock(), Mock(), Mock()
    executor = make_executor(
        on_error, on_success, on_exhausted, max_attempts=max_attempts, base_delay=0.01
    )
    operation = AsyncMock(side_effect=error)

    outcome = await executor.execute(operation)

    assert not outcome.succeeded
    assert outcome.attempts == max_attempts + 1
    assert outcome.error is error
    assert operation.await_count == max_attempts + 1
    assert on_error.call_args_list == [call(error, i) for i in range(max_attempts + 1)]
    on_exhausted.assert_called_once_with(error)
    on_success.assert_not_called()
    assert mock_asleep.call_count == max_attempts


@pytest.mark.asyncio
@pytest.mark.parametrize("k", [1, 2, 4])
async def test_async_retry_executor_succeeds_on_kth_attempt(mock_asleep: Mock, k: int) -> None:
    on_error, on_success, on_exhausted = Mock(), Mock(), Mock()
    executor = make_executor(on_error, on_success, on_exhausted, max_attempts=3)
    operation = AsyncMock(side_effect=[ValueError(f"fail {i}") for i in range(k - 1)] + ["done"])

    outcome = await executor.execute(operation)

    assert outcome.succeeded
    assert outcome.attempts == k
    assert on_error.call_count == k - 1
    on_success.assert_called_once_with("done")
    on_exhausted.assert_not_called()


@pytest.mark.asyncio
async def test_async_retry_executor_delay_sequence(mock_asleep: Mock) -> None:
    """Test waits of 100, 200, 400, 500 ms before attempts 1..4."""
    on_error, on_exhausted = Mock(), Mock()
    executor = make_executor(
        on_error,
        on_exhausted=on_exhausted,
        max_attempts=4,
        base_delay=0.1,
        delay_growth_factor=2.0,
        max_delay=0.5,
    )

    await executor.execute(AsyncMock(side_effect=RuntimeError("always")))

    assert mock_asleep.call_args_list == [call(0.1), call(0.2), call(0.4), call(0.5)]
    assert on_error.call_count == 5
    on_exhausted.assert_called_once()


@pytest.mark.asyncio
async def test_async_retry_executor_constant_delay(mock_asleep: Mock) -> None:
    executor = make_executor(max_attempts=3, base_delay=0.25)
    await executor.execute(AsyncMock(side_effect=RuntimeError()))
    assert mock_asleep.call_args_list == [call(0.25)] * 3


@pytest.mark.asyncio
async def test_async_retry_executor_zero_delay_never_sleeps(mock_asleep: Mock) -> None:
    executor = make_executor(max_attempts=3, base_delay=0.0, delay_growth_factor=2.0)
    await executor.execute(AsyncMock(side_effect=RuntimeError()))
    mock_asleep.assert_not_called()


@pytest.mark.asyncio
async def test_async_retry_executor_retry_condition_false(mock_asleep: Mock) -> None:
    """Test that retry_condition stops retrying despite the remaining budget."""
    error = PermissionError("denied")
    condition = Mock(return_value=False)
    on_error, on_exhausted = Mock(), Mock()
    executor = make_executor(
        on_error, on_exhausted=on_exhausted, max_attempts=10, retry_condition=condition
    )
    operation = AsyncMock(side_effect=error)

    outcome = await executor.execute(operation)

    assert outcome.attempts == 1
    operation.assert_awaited_once()
    condition.assert_called_once_with(1, error)
    on_error.assert_called_once_with(error, 0)
    on_exhausted.assert_called_once_with(error)
    mock_asleep.assert_not_called()


@pytest.mark.asyncio
async def test_async_retry_executor_async_retry_condition(mock_asleep: Mock) -> None:
    async def condition(attempt: int, error: Exception) -> bool:
        return isinstance(error, ConnectionError)

    operation = AsyncMock(side_effect=[ConnectionError(), KeyError("missing"), "never"])
    outcome = await make_executor(max_attempts=5, retry_condition=condition).execute(operation)

    assert not outcome.succeeded
    assert isinstance(outcome.error, KeyError)
    assert operation.await_count == 2


@pytest.mark.asyncio
async def test_async_retry_executor_failing_on_success_hook() -> None:
    """Test that a throwing on_success neither fails nor re-runs the operation."""
    on_success = Mock(side_effect=RuntimeError("hook failure"))
    on_exhausted = Mock()
    operation = AsyncMock(return_value="ok")

    outcome = await make_executor(on_success=on_success, on_exhausted=on_exhausted).execute(
        operation
    )

    assert outcome.succeeded
    operation.assert_awaited_once()
    on_success.assert_called_once_with("ok")
    on_exhausted.assert_not_called()


@pytest.mark.asyncio
async def test_async_retry_executor_rejecting_async_hooks(mock_asleep: Mock) -> None:
    on_error = AsyncMock(side_effect=RuntimeError("on_error failure"))
    on_exhausted = AsyncMock(side_effect=RuntimeError("on_exhausted failure"))
    operation = AsyncMock(side_effect=ValueError())
    executor = make_executor(on_error, on_exhausted=on_exhausted, max_attempts=2, base_delay=0.5)

    outcome = await executor.execute(operation)

    assert outcome.attempts == 3
    assert on_error.await_count == 3
    on_exhausted.assert_awaited_once()
    assert mock_asleep.call_args_list == [call(0.5), call(0.5)]


@pytest.mark.asyncio
async def test_async_retry_executor_unbounded(mock_asleep: Mock) -> None:
    """Test that an unbounded budget stops at the first success."""
    on_error, on_success = Mock(), Mock()
    operation = AsyncMock(side_effect=[OSError()] * 5 + ["finally"])

    outcome = await make_executor(
        on_error, on_success, max_attempts="unbounded", base_delay=0.1, delay_growth_factor=2.0
    ).execute(operation)

    assert outcome.attempts == 6
    assert on_error.call_count == 5
    on_success.assert_called_once_with("finally")


@pytest.mark.asyncio
async def test_async_retry_executor_max_total_time() -> None:
    """Test that the time budget stops retrying after a slow attempt."""

    async def slow_failure() -> None:
        await asyncio.sleep(0.05)
        raise TimeoutError("slow")

    on_exhausted = Mock()
    executor = make_executor(
        on_exhausted=on_exhausted, max_attempts="unbounded", max_total_time=0.01
    )

    outcome = await executor.execute(slow_failure)

    assert outcome.attempts == 1
    assert outcome.elapsed > 0.01
    on_exhausted.assert_called_once()


@pytest.mark.asyncio
async def test_async_retry_executor_cancellation_propagates(mock_asleep: Mock) -> None:
    on_exhausted = Mock()
    operation = AsyncMock(side_effect=asyncio.CancelledError())

    with pytest.raises(asyncio.CancelledError):
        await make_executor(on_exhausted=on_exhausted).execute(operation)

    on_exhausted.assert_not_called()


@pytest.mark.asyncio
async def test_async_retry_executor_is_reentrant(mock_asleep: Mock) -> None:
    """Test that concurrent executions do not share state."""
    executor = make_executor(max_attempts=2)
    failing = AsyncMock(side_effect=ValueError())
    succeeding = AsyncMock(return_value=1)

    outcomes = await asyncio.gather(executor.execute(failing), executor.execute(succeeding))

    assert [outcome.succeeded for outcome in outcomes] == [False, True]
    assert [outcome.attempts for outcome in outcomes] == [3, 1]


@pytest.mark.asyncio
async def test_async_retry_executor_invalid_operation() -> None:
    with pytest.raises(ConfigurationError, match=r"operation must be callable"):
        await make_executor().execute(None)


@pytest.mark.asyncio
async def test_async_retry_executor_logs_contained_failures(
    caplog: pytest.LogCaptureFixture,
) -> None:
    logger = logging.getLogger("tests.executor_async")
    executor = AsyncRetryExecutor(
        RetryConfig(max_attempts=1),
        CallbackConfig(
            on_error=Mock(side_effect=RuntimeError("broken on_error")),
            logger=logger,
            logging_enabled=True,
        ),
    )

    with caplog.at_level(logging.DEBUG, logger="tests.executor_async"):
        await executor.execute(AsyncMock(side_effect=ValueError("bad value")))

    messages = [record.getMessage() for record in caplog.records]
    assert any("broken on_error" in message for message in messages)
    assert any("Attempt 1 failed with ValueError" in message for message in messages)
    assert any("Operation failed after 2 attempts" in message for message in messages)


@pytest.mark.asyncio
async def test_async_retry_executor_logging_disabled(caplog: pytest.LogCaptureFixture) -> None:
    executor = make_executor(on_error=Mock(side_effect=RuntimeError("broken")), max_attempts=1)

    with caplog.at_level(logging.DEBUG):
        await executor.execute(AsyncMock(side_effect=ValueError()))

    assert not [record for record in caplog.records if record.name.startswith("aretry")]
