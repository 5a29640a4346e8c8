r"""Shared core logic for retry executors.

This module provides helper functions used by both the synchronous and
asynchronous retry executors: status validation, terminal error
construction, and the decision to retry.
"""

from __future__ import annotations

__all__ = [
    "can_retry",
    "create_terminal_error",
    "validate_status",
]

import logging
import time
from typing import TYPE_CHECKING

import httpx

from vaultlease.exceptions import UnexpectedStatusError, VaultError

if TYPE_CHECKING:
    from vaultlease.request import OperationRequest
    from vaultlease.retry.policy import RetryPolicy

logger: logging.Logger = logging.getLogger(__name__)


def validate_status(
    response: httpx.Response,
    request: OperationRequest,
    expected_status: int,
    retry_count: int,
) -> None:
    """Check that the response carries the expected status code.

    Args:
        response: The HTTP response.
        request: The request that produced the response.
        expected_status: The status code that denotes success.
        retry_count: The number of retries consumed so far.

    Raises:
        UnexpectedStatusError: If the status code differs.
    """
    if response.status_code != expected_status:
        logger.debug(
            f"{request.method} request to {request.url} returned status "
            f"{response.status_code} (expected {expected_status})"
        )
        raise UnexpectedStatusError(
            method=request.method,
            url=request.url,
            status_code=response.status_code,
            expected_status=expected_status,
            response=response,
            retry_count=retry_count,
        )


def create_terminal_error(
    exc: Exception,
    request: OperationRequest,
    retry_count: int,
) -> VaultError:
    """Create the error surfaced to the caller once retrying stops.

    A ``VaultError`` (the status validation case) is returned unchanged so
    the observed status code is preserved. Any other exception is wrapped
    in a generic ``VaultError``.

    Args:
        exc: The failure of the last attempt.
        request: The request being executed.
        retry_count: The number of retries consumed.

    Returns:
        The terminal error.
    """
    if isinstance(exc, VaultError):
        return exc
    if isinstance(exc, httpx.TimeoutException):
        message = f"{request.method} request to {request.url} timed out ({retry_count + 1} attempts)"
    else:
        message = (
            f"{request.method} request to {request.url} failed after "
            f"{retry_count + 1} attempts: {exc}"
        )
    return VaultError(
        method=request.method,
        url=request.url,
        message=message,
        cause=exc,
        retry_count=retry_count,
    )


def can_retry(
    policy: RetryPolicy,
    retry_count: int,
    start_time: float,
    request: OperationRequest,
) -> bool:
    """Decide whether another attempt is allowed.

    Args:
        policy: The retry policy.
        retry_count: The number of retries consumed so far.
        start_time: When the call started.
        request: The request being executed.

    Returns:
        ``True`` if the retry budget and the optional time budget both
        allow another attempt.
    """
    if retry_count >= policy.max_retries:
        return False
    if policy.max_total_time is not None:
        elapsed_time = time.time() - start_time
        if elapsed_time >= policy.max_total_time:
            logger.debug(
                f"{request.method} request to {request.url} exceeded max_total_time "
                f"({elapsed_time:.2f}s >= {policy.max_total_time:.2f}s) "
                f"after {retry_count + 1} attempts"
            )
            return False
    return True
