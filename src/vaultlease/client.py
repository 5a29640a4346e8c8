r"""Entry point grouping the Vault API sections behind one
configuration."""

from __future__ import annotations

__all__ = ["Vault"]

from typing import TYPE_CHECKING

from vaultlease.leases import AsyncLeases, Leases

if TYPE_CHECKING:
    from vaultlease.callbacks import CallbackConfig
    from vaultlease.config import VaultConfig
    from vaultlease.transport import AsyncTransport, Transport


class Vault:
    r"""Entry point to the Vault API sections.

    Args:
        config: The Vault configuration shared by every section.
        transport: Optional transport for synchronous operations.
        async_transport: Optional transport for asynchronous operations.
        callback_config: Optional lifecycle callbacks.

    Example:
        ```pycon
        >>> from vaultlease import Vault, VaultConfig
        >>> vault = Vault(VaultConfig(address="http://127.0.0.1:8200", token="s.x"))
        >>> response = vault.leases().revoke("aws/creds/readonly/abc")  # doctest: +SKIP

        ```
    """

    def __init__(
        self,
        config: VaultConfig,
        transport: Transport | None = None,
        async_transport: AsyncTransport | None = None,
        callback_config: CallbackConfig | None = None,
    ) -> None:
        self.config = config
        self._transport = transport
        self._async_transport = async_transport
        self._callback_config = callback_config

    def leases(self) -> Leases:
        r"""Return the synchronous lease operations."""
        return Leases(self.config, transport=self._transport, callback_config=self._callback_config)

    def async_leases(self) -> AsyncLeases:
        r"""Return the asynchronous lease operations."""
        return AsyncLeases(
            self.config, transport=self._async_transport, callback_config=self._callback_config
        )
