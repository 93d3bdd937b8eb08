r"""HTTP requests retried through the retry engine.

This module provides helpers that retry an ``httpx`` request with the
retry executors. An attempt fails when the transport raises
``httpx.TransportError`` (timeouts, connection errors, ...) or when the
response status code is retryable (429, 500, 502, 503, 504 by default).
Any other response, including a non-retryable error status, is returned
to the caller as is.

Unlike the executors, these helpers raise ``RetryExhaustedError`` when
no attempt succeeded, so they can be used where a response is expected.

Example:
    ```pycon
    >>> import httpx
    >>> from aretry.http import request_with_retry
    >>> from aretry.retry import RetryConfig
    >>> with httpx.Client() as client:  # doctest: +SKIP
    ...     response = request_with_retry(
    ...         "GET",
    ...         "https://api.example.com/data",
    ...         client=client,
    ...         retry_config=RetryConfig(max_attempts=3, base_delay=0.5, delay_growth_factor=2.0),
    ...     )
    ...

    ```
"""

from __future__ import annotations

__all__ = [
    "check_response",
    "is_retryable_error",
    "request_with_retry",
    "request_with_retry_async",
]

from typing import TYPE_CHECKING, Any

import httpx

from aretry.core.config import DEFAULT_TIMEOUT, RETRY_STATUS_CODES
from aretry.core.validation import validate_timeout
from aretry.retry import AsyncRetryExecutor, RetryConfig, RetryExecutor

if TYPE_CHECKING:
    from collections.abc import Callable

    from aretry.retry import CallbackConfig


def check_response(
    response: httpx.Response, status_forcelist: tuple[int, ...] = RETRY_STATUS_CODES
) -> httpx.Response:
    """Raise if the response has a retryable status code.

    Args:
        response: The HTTP response to check.
        status_forcelist: Status codes that fail the attempt.

    Returns:
        The response, if its status code is not retryable.

    Raises:
        httpx.HTTPStatusError: If the status code is in ``status_forcelist``.

    Example:
        ```pycon
        >>> import httpx
        >>> from aretry.http import check_response
        >>> request = httpx.Request("GET", "https://example.com")
        >>> check_response(httpx.Response(404, request=request)).status_code
        404
        >>> check_response(httpx.Response(503, request=request))  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        httpx.HTTPStatusError: GET request to https://example.com failed with status 503

        ```
    """
    if response.status_code in status_forcelist:
        request = response.request
        msg = f"{request.method} request to {request.url} failed with status {response.status_code}"
        raise httpx.HTTPStatusError(msg, request=request, response=response)
    return response


def is_retryable_error(
    error: Exception, status_forcelist: tuple[int, ...] = RETRY_STATUS_CODES
) -> bool:
    """Whether an exception raised by an HTTP attempt is worth retrying.

    Args:
        error: The exception raised by the attempt.
        status_forcelist: Status codes that are retryable.

    Returns:
        ``True`` for transport errors and for status errors whose
            status code is in ``status_forcelist``.
    """
    if isinstance(error, httpx.HTTPStatusError):
        return error.response.status_code in status_forcelist
    return isinstance(error, httpx.TransportError)


def _http_retry_config(
    retry_config: RetryConfig | None, status_forcelist: tuple[int, ...]
) -> RetryConfig:
    config = retry_config if retry_config is not None else RetryConfig()
    user_condition = config.retry_condition

    def retry_condition(attempt: int, error: Exception) -> Any:
        if not is_retryable_error(error, status_forcelist):
            return False
        if user_condition is None:
            return True
        return user_condition(attempt, error)

    return config.merge(retry_condition=retry_condition)


def request_with_retry(
    method: str,
    url: str,
    *,
    client: httpx.Client | None = None,
    timeout: float | httpx.Timeout = DEFAULT_TIMEOUT,
    status_forcelist: tuple[int, ...] = RETRY_STATUS_CODES,
    retry_config: RetryConfig | None = None,
    callback_config: CallbackConfig | None = None,
    **kwargs: Any,
) -> httpx.Response:
    """Send an HTTP request with automatic retry logic (synchronous).

    Args:
        method: The HTTP method (GET, POST, PUT, DELETE, PATCH, HEAD, OPTIONS).
        url: The URL to send the request to.
        client: An optional httpx.Client object to use for making requests.
            If None, a new client will be created and closed after use.
        timeout: Maximum seconds to wait for the server response.
            Only used if client is None. Must be > 0.
        status_forcelist: Tuple of HTTP status codes that should trigger a retry.
        retry_config: Optional retry policy. Its ``retry_condition``, if
            any, is only consulted for retryable errors.
        callback_config: Optional hooks and diagnostics. ``on_success``
            receives the ``httpx.Response``.
        **kwargs: Additional keyword arguments passed to ``client.request``.

    Returns:
        The first response whose status code is not retryable.

    Raises:
        ConfigurationError: If the parameters are invalid.
        RetryExhaustedError: If no attempt succeeded. The last failure is
            chained as the cause.
    """
    validate_timeout(timeout)
    executor = RetryExecutor(_http_retry_config(retry_config, status_forcelist), callback_config)

    owns_client = client is None
    client = client or httpx.Client(timeout=timeout)
    try:

        def send() -> httpx.Response:
            return check_response(client.request(method, url, **kwargs), status_forcelist)

        return executor.execute(send).unwrap()
    finally:
        if owns_client:
            client.close()


async def request_with_retry_async(
    method: str,
    url: str,
    *,
    client: httpx.AsyncClient | None = None,
    timeout: float | httpx.Timeout = DEFAULT_TIMEOUT,
    status_forcelist: tuple[int, ...] = RETRY_STATUS_CODES,
    retry_config: RetryConfig | None = None,
    callback_config: CallbackConfig | None = None,
    **kwargs: Any,
) -> httpx.Response:
    """Send an HTTP request with automatic retry logic (asynchronous).

    Args:
        method: The HTTP method (GET, POST, PUT, DELETE, PATCH, HEAD, OPTIONS).
        url: The URL to send the request to.
        client: An optional httpx.AsyncClient object to use for making requests.
            If None, a new client will be created and closed after use.
        timeout: Maximum seconds to wait for the server response.
            Only used if client is None. Must be > 0.
        status_forcelist: Tuple of HTTP status codes that should trigger a retry.
        retry_config: Optional retry policy. Its ``retry_condition``, if
            any, is only consulted for retryable errors and may be a
            coroutine function.
        callback_config: Optional hooks and diagnostics. Hooks may be
            coroutine functions.
        **kwargs: Additional keyword arguments passed to ``client.request``.

    Returns:
        The first response whose status code is not retryable.

    Raises:
        ConfigurationError: If the parameters are invalid.
        RetryExhaustedError: If no attempt succeeded. The last failure is
            chained as the cause.
    """
    validate_timeout(timeout)
    executor = AsyncRetryExecutor(
        _http_retry_config(retry_config, status_forcelist), callback_config
    )

    owns_client = client is None
    client = client or httpx.AsyncClient(timeout=timeout)
    try:

        async def send() -> httpx.Response:
            response = await client.request(method, url, **kwargs)
            return check_response(response, status_forcelist)

        outcome = await executor.execute(send)
        return outcome.unwrap()
    finally:
        if owns_client:
            await client.aclose()
