r"""Synchronous retry executor for idempotent Vault calls.

This module provides the RetryExecutor class that executes a call with
a fixed-interval, fixed-count retry policy and strict status
validation.
"""

from __future__ import annotations

__all__ = ["RetryExecutor"]

import logging
import time
from typing import TYPE_CHECKING

from vaultlease.callbacks import CallbackManager
from vaultlease.request import ExecutionResult
from vaultlease.retry.executor_core import can_retry, create_terminal_error, validate_status

if TYPE_CHECKING:
    from vaultlease.callbacks import CallbackConfig
    from vaultlease.request import OperationRequest
    from vaultlease.retry.policy import RetryPolicy
    from vaultlease.transport.base import Transport

logger: logging.Logger = logging.getLogger(__name__)


class RetryExecutor:
    """Executes idempotent HTTP calls with automatic retry logic.

    Transport failures and unexpected status codes share one retry
    counter: the executor only tells them apart when deciding which error
    to surface once the retries are exhausted.

    Attributes:
        transport: The transport issuing each attempt.
        callbacks: Manager for invoking callbacks.

    Example:
        ```pycon
        >>> from vaultlease.request import OperationRequest
        >>> from vaultlease.retry import RetryExecutor, RetryPolicy
        >>> from vaultlease.transport import HttpxTransport
        >>> executor = RetryExecutor(HttpxTransport())
        >>> result = executor.execute(
        ...     OperationRequest(url="http://127.0.0.1:8200/v1/sys/revoke/abc", token="s.x"),
        ...     expected_status=204,
        ...     policy=RetryPolicy(max_retries=2, retry_interval=0.5),
        ... )  # doctest: +SKIP

        ```
    """

    def __init__(self, transport: Transport, callback_config: CallbackConfig | None = None) -> None:
        self.transport = transport
        self.callbacks: CallbackManager = CallbackManager(callback_config)

    def execute(
        self,
        request: OperationRequest,
        expected_status: int,
        policy: RetryPolicy,
    ) -> ExecutionResult:
        """Execute the call, retrying on any failure.

        Each attempt is issued through the transport. A response whose
        status equals ``expected_status`` ends the loop with a result.
        Any exception raised by the attempt, or any other status, triggers
        a retry after a pause of ``policy.retry_interval`` seconds, as
        long as the policy allows it.

        The pause is best-effort: if it is interrupted (``InterruptedError``),
        the interruption is logged and the next attempt starts right away.
        ``KeyboardInterrupt`` is not caught.

        Args:
            request: The call to execute.
            expected_status: The status code that denotes success.
            policy: The retry policy.

        Returns:
            The validated result with the number of retries consumed.

        Raises:
            UnexpectedStatusError: If the last attempt returned an
                unexpected status code.
            VaultError: If the last attempt could not be completed. The
                transport exception is chained as the cause.
        """
        start_time = time.time()
        retry_count = 0
        while True:
            self.callbacks.on_request(request.url, request.method, retry_count, policy.max_retries)
            try:
                response = self.transport.send(request)
                validate_status(response, request, expected_status, retry_count)
            except Exception as exc:
                status_code = getattr(exc, "status_code", None)
                if not can_retry(policy, retry_count, start_time, request):
                    error = create_terminal_error(exc, request, retry_count)
                    self.callbacks.on_failure(
                        request.url,
                        request.method,
                        retry_count,
                        policy.max_retries,
                        error,
                        status_code,
                        start_time,
                    )
                    if error is exc:
                        raise
                    raise error from exc

                logger.debug(
                    f"{request.method} request to {request.url} failed on attempt "
                    f"{retry_count + 1}/{policy.max_attempts} ({type(exc).__name__}), "
                    f"retrying in {policy.retry_interval:.2f}s"
                )
                self.callbacks.on_retry(
                    request.url,
                    request.method,
                    retry_count,
                    policy.max_retries,
                    policy.retry_interval,
                    exc,
                    status_code,
                )
                retry_count += 1
                self._pause(policy.retry_interval, request)
                continue

            if retry_count > 0:
                logger.debug(
                    f"{request.method} request to {request.url} succeeded on attempt {retry_count + 1}"
                )
            self.callbacks.on_success(
                request.url,
                request.method,
                retry_count,
                policy.max_retries,
                response,
                start_time,
            )
            return ExecutionResult(response=response, retry_count=retry_count)

    def _pause(self, seconds: float, request: OperationRequest) -> None:
        try:
            time.sleep(seconds)
        except InterruptedError:
            logger.warning(
                f"Pause before retrying {request.method} request to {request.url} "
                "was interrupted, retrying now"
            )
