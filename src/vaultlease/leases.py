r"""Operations on the "Leases" section of the Vault HTTP API.

Every operation is an idempotent ``PUT`` expecting ``204 No Content``.
They only differ by their target path, and all delegate to the retry
executors.
"""

from __future__ import annotations

__all__ = [
    "REVOKE_FORCE_PATH",
    "REVOKE_PATH",
    "REVOKE_PREFIX_PATH",
    "REVOKE_STATUS",
    "AsyncLeases",
    "Leases",
]

from typing import TYPE_CHECKING

from vaultlease.request import OperationRequest
from vaultlease.retry import AsyncRetryExecutor, RetryExecutor, RetryPolicy
from vaultlease.transport import AsyncHttpxTransport, HttpxTransport

if TYPE_CHECKING:
    from vaultlease.callbacks import CallbackConfig
    from vaultlease.config import VaultConfig
    from vaultlease.request import ExecutionResult
    from vaultlease.transport import AsyncTransport, Transport

REVOKE_PATH = "/v1/sys/revoke/"
REVOKE_PREFIX_PATH = "/v1/sys/revoke-prefix/"
REVOKE_FORCE_PATH = "/v1/sys/revoke-force/"

# Vault answers a successful revocation with 204 No Content
REVOKE_STATUS = 204


class Leases:
    r"""Synchronous lease operations.

    Args:
        config: The Vault configuration. Its retry settings apply to
            every operation.
        transport: Optional transport. Defaults to ``HttpxTransport()``.
        callback_config: Optional lifecycle callbacks.
        max_total_time: Optional time budget in seconds for each
            operation, retries included.

    Example:
        ```pycon
        >>> from vaultlease import Leases, VaultConfig
        >>> leases = Leases(VaultConfig(address="http://127.0.0.1:8200", token="s.x"))
        >>> result = leases.revoke_prefix("aws")  # doctest: +SKIP
        >>> result.status_code  # doctest: +SKIP
        204

        ```
    """

    def __init__(
        self,
        config: VaultConfig,
        transport: Transport | None = None,
        callback_config: CallbackConfig | None = None,
        max_total_time: float | None = None,
    ) -> None:
        self._config = config
        self._policy = RetryPolicy.from_config(config, max_total_time=max_total_time)
        self._executor = RetryExecutor(transport or HttpxTransport(), callback_config)

    def revoke(self, lease_id: str) -> ExecutionResult:
        r"""Immediately revoke the secret associated with a lease.

        Args:
            lease_id: The lease ID of the secret to revoke.

        Returns:
            The validated response and the number of retries consumed.

        Raises:
            VaultError: If the call fails, or if Vault does not answer
                with status 204 after exhausting every retry.
        """
        return self._put(REVOKE_PATH + lease_id)

    def revoke_prefix(self, prefix: str) -> ExecutionResult:
        r"""Revoke every secret or token generated under a path prefix.

        This requires sudo capability on the Vault side.

        Args:
            prefix: The path prefix whose leases are revoked.

        Returns:
            The validated response and the number of retries consumed.

        Raises:
            VaultError: If the call fails, or if Vault does not answer
                with status 204 after exhausting every retry.
        """
        return self._put(REVOKE_PREFIX_PATH + prefix)

    def revoke_force(self, prefix: str) -> ExecutionResult:
        r"""Revoke every secret or token generated under a path prefix,
        ignoring backend errors.

        Vault then gives up ensuring the credentials are cleaned up on
        the backend side. Only meant for emergencies where the backend
        prevents normal revocation.

        Args:
            prefix: The path prefix whose leases are revoked.

        Returns:
            The validated response and the number of retries consumed.

        Raises:
            VaultError: If the call fails, or if Vault does not answer
                with status 204 after exhausting every retry.
        """
        return self._put(REVOKE_FORCE_PATH + prefix)

    def _put(self, path: str) -> ExecutionResult:
        request = OperationRequest.from_config(self._config, path, method="PUT")
        return self._executor.execute(request, expected_status=REVOKE_STATUS, policy=self._policy)


class AsyncLeases:
    r"""Asynchronous lease operations.

    Args:
        config: The Vault configuration. Its retry settings apply to
            every operation.
        transport: Optional async transport. Defaults to
            ``AsyncHttpxTransport()``.
        callback_config: Optional lifecycle callbacks.
        max_total_time: Optional time budget in seconds for each
            operation, retries included.
    """

    def __init__(
        self,
        config: VaultConfig,
        transport: AsyncTransport | None = None,
        callback_config: CallbackConfig | None = None,
        max_total_time: float | None = None,
    ) -> None:
        self._config = config
        self._policy = RetryPolicy.from_config(config, max_total_time=max_total_time)
        self._executor = AsyncRetryExecutor(transport or AsyncHttpxTransport(), callback_config)

    async def revoke(self, lease_id: str) -> ExecutionResult:
        r"""Immediately revoke the secret associated with a lease.

        See ``Leases.revoke``.
        """
        return await self._put(REVOKE_PATH + lease_id)

    async def revoke_prefix(self, prefix: str) -> ExecutionResult:
        r"""Revoke every secret or token generated under a path prefix.

        See ``Leases.revoke_prefix``.
        """
        return await self._put(REVOKE_PREFIX_PATH + prefix)

    async def revoke_force(self, prefix: str) -> ExecutionResult:
        r"""Revoke every secret or token generated under a path prefix,
        ignoring backend errors.

        See ``Leases.revoke_force``.
        """
        return await self._put(REVOKE_FORCE_PATH + prefix)

    async def _put(self, path: str) -> ExecutionResult:
        request = OperationRequest.from_config(self._config, path, method="PUT")
        return await self._executor.execute(
            request, expected_status=REVOKE_STATUS, policy=self._policy
        )
