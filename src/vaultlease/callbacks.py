r"""Callback types and data structures for observability.

This module lets callers hook into the retry lifecycle of a lease
operation for logging, metrics, or alerting.

The callback system provides four lifecycle hooks:
- on_request: Called before each attempt
- on_retry: Called before each retry pause
- on_success: Called when a call returns the expected status
- on_failure: Called when the call fails for good

Example:
    ```pycon
    >>> from vaultlease.callbacks import CallbackConfig, RetryInfo
    >>> def log_retry(retry_info: RetryInfo):
    ...     print(f"Retry {retry_info.attempt}/{retry_info.max_retries + 1}")
    ...
    >>> callbacks = CallbackConfig(on_retry=log_retry)

    ```
"""

from __future__ import annotations

__all__ = [
    "CallbackConfig",
    "CallbackManager",
    "FailureInfo",
    "RequestInfo",
    "ResponseInfo",
    "RetryInfo",
    "invoke_on_failure",
    "invoke_on_request",
    "invoke_on_retry",
    "invoke_on_success",
]

import time
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

    import httpx


@dataclass
class RequestInfo:
    """Information passed to on_request callback.

    Attributes:
        url: The URL being requested.
        method: The HTTP method.
        attempt: The current attempt number (1-indexed). First attempt is 1.
        max_retries: Maximum number of retry attempts configured.
    """

    url: str
    method: str
    attempt: int
    max_retries: int


@dataclass
class RetryInfo:
    """Information passed to on_retry callback.

    Attributes:
        url: The URL being requested.
        method: The HTTP method.
        attempt: The upcoming attempt number (1-indexed). First retry is attempt 2.
        max_retries: Maximum number of retry attempts configured.
        wait_time: The pause in seconds before this retry.
        error: The exception that triggered the retry.
        status_code: The HTTP status code that triggered the retry (if any).
    """

    url: str
    method: str
    attempt: int
    max_retries: int
    wait_time: float
    error: Exception
    status_code: int | None


@dataclass
class ResponseInfo:
    """Information passed to on_success callback.

    Attributes:
        url: The URL that was requested.
        method: The HTTP method.
        attempt: The attempt number that succeeded (1-indexed).
        max_retries: Maximum number of retry attempts configured.
        response: The successful HTTP response object.
        total_time: Total time spent on all attempts including pauses (seconds).
    """

    url: str
    method: str
    attempt: int
    max_retries: int
    response: httpx.Response
    total_time: float


@dataclass
class FailureInfo:
    """Information passed to on_failure callback.

    Attributes:
        url: The URL that was requested.
        method: The HTTP method.
        attempt: The final attempt number (1-indexed).
        max_retries: Maximum number of retry attempts configured.
        error: The terminal error raised to the caller.
        status_code: The final HTTP status code (if any).
        total_time: Total time spent on all attempts including pauses (seconds).
    """

    url: str
    method: str
    attempt: int
    max_retries: int
    error: Exception
    status_code: int | None
    total_time: float


@dataclass
class CallbackConfig:
    """Configuration for callbacks.

    Attributes:
        on_request: Optional callback invoked before each attempt.
        on_retry: Optional callback invoked before each retry pause.
        on_success: Optional callback invoked when the call succeeds.
        on_failure: Optional callback invoked when the call fails for good.
    """

    on_request: Callable[[RequestInfo], None] | None = None
    on_retry: Callable[[RetryInfo], None] | None = None
    on_success: Callable[[ResponseInfo], None] | None = None
    on_failure: Callable[[FailureInfo], None] | None = None


def invoke_on_request(
    on_request: Callable[[RequestInfo], None] | None,
    *,
    url: str,
    method: str,
    attempt: int,
    max_retries: int,
) -> None:
    """Invoke on_request callback if provided.

    Args:
        on_request: Optional callback to invoke before each attempt.
        url: The URL being requested.
        method: The HTTP method.
        attempt: The current attempt number (0-indexed internally). The
            callback receives this as a 1-indexed value (attempt + 1).
        max_retries: Maximum number of retry attempts.
    """
    if on_request is not None:
        on_request(RequestInfo(url=url, method=method, attempt=attempt + 1, max_retries=max_retries))


def invoke_on_retry(
    on_retry: Callable[[RetryInfo], None] | None,
    *,
    url: str,
    method: str,
    attempt: int,
    max_retries: int,
    sleep_time: float,
    error: Exception,
    status_code: int | None,
) -> None:
    """Invoke on_retry callback if provided.

    Args:
        on_retry: Optional callback to invoke before each retry.
        url: The URL being requested.
        method: The HTTP method.
        attempt: The attempt that just failed (0-indexed internally). The
            callback receives the next attempt number as a 1-indexed value.
        max_retries: Maximum number of retry attempts.
        sleep_time: The pause in seconds before this retry.
        error: The exception that triggered the retry.
        status_code: The HTTP status code that triggered the retry (if any).
    """
    if on_retry is not None:
        on_retry(
            RetryInfo(
                url=url,
                method=method,
                attempt=attempt + 2,  # Next attempt number
                max_retries=max_retries,
                wait_time=sleep_time,
                error=error,
                status_code=status_code,
            )
        )


def invoke_on_success(
    on_success: Callable[[ResponseInfo], None] | None,
    *,
    url: str,
    method: str,
    attempt: int,
    max_retries: int,
    response: httpx.Response,
    start_time: float,
) -> None:
    """Invoke on_success callback if provided.

    Args:
        on_success: Optional callback to invoke when the call succeeds.
        url: The URL that was requested.
        method: The HTTP method.
        attempt: The attempt number that succeeded (0-indexed internally).
        max_retries: Maximum number of retry attempts.
        response: The successful HTTP response object.
        start_time: The timestamp when the call started.
    """
    if on_success is not None:
        on_success(
            ResponseInfo(
                url=url,
                method=method,
                attempt=attempt + 1,
                max_retries=max_retries,
                response=response,
                total_time=time.time() - start_time,
            )
        )


def invoke_on_failure(
    on_failure: Callable[[FailureInfo], None] | None,
    *,
    url: str,
    method: str,
    attempt: int,
    max_retries: int,
    error: Exception,
    status_code: int | None,
    start_time: float,
) -> None:
    """Invoke on_failure callback if provided.

    Args:
        on_failure: Optional callback to invoke when the call fails for good.
        url: The URL that was requested.
        method: The HTTP method.
        attempt: The final attempt number (0-indexed internally).
        max_retries: Maximum number of retry attempts.
        error: The terminal error.
        status_code: The final HTTP status code (if any).
        start_time: The timestamp when the call started.
    """
    if on_failure is not None:
        on_failure(
            FailureInfo(
                url=url,
                method=method,
                attempt=attempt + 1,
                max_retries=max_retries,
                error=error,
                status_code=status_code,
                total_time=time.time() - start_time,
            )
        )


class CallbackManager:
    """Dispatches retry lifecycle events to the callbacks of a
    ``CallbackConfig``.

    Attempt numbers are passed 0-indexed, as counted by the executors.
    """

    def __init__(self, callbacks: CallbackConfig | None = None) -> None:
        self.callbacks = callbacks or CallbackConfig()

    def on_request(self, url: str, method: str, attempt: int, max_retries: int) -> None:
        invoke_on_request(
            self.callbacks.on_request,
            url=url,
            method=method,
            attempt=attempt,
            max_retries=max_retries,
        )

    def on_retry(
        self,
        url: str,
        method: str,
        attempt: int,
        max_retries: int,
        sleep_time: float,
        error: Exception,
        status_code: int | None,
    ) -> None:
        invoke_on_retry(
            self.callbacks.on_retry,
            url=url,
            method=method,
            attempt=attempt,
            max_retries=max_retries,
            sleep_time=sleep_time,
            error=error,
            status_code=status_code,
        )

    def on_success(
        self,
        url: str,
        method: str,
        attempt: int,
        max_retries: int,
        response: httpx.Response,
        start_time: float,
    ) -> None:
        invoke_on_success(
            self.callbacks.on_success,
            url=url,
            method=method,
            attempt=attempt,
            max_retries=max_retries,
            response=response,
            start_time=start_time,
        )

    def on_failure(
        self,
        url: str,
        method: str,
        attempt: int,
        max_retries: int,
        error: Exception,
        status_code: int | None,
        start_time: float,
    ) -> None:
        invoke_on_failure(
            self.callbacks.on_failure,
            url=url,
            method=method,
            attempt=attempt,
            max_retries=max_retries,
            error=error,
            status_code=status_code,
            start_time=start_time,
        )
