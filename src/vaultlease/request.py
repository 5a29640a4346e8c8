r"""Value objects describing one call to the Vault server and its
successful outcome."""

from __future__ import annotations

__all__ = ["VAULT_TOKEN_HEADER", "ExecutionResult", "OperationRequest"]

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from vaultlease.config import SslVerification

if TYPE_CHECKING:
    import httpx

    from vaultlease.config import VaultConfig

VAULT_TOKEN_HEADER = "X-Vault-Token"


@dataclass(frozen=True)
class OperationRequest:
    """Description of a single idempotent HTTP call.

    Attributes:
        url: The target URL.
        token: The Vault token sent in the ``X-Vault-Token`` header.
        method: The HTTP method.
        ssl_pem_utf8: Optional PEM bundle of trusted certificates.
        ssl_verify: TLS verification mode.
        open_timeout: Connect timeout in seconds, ``None`` for no limit.
        read_timeout: Read timeout in seconds, ``None`` for no limit.

    Example:
        ```pycon
        >>> from vaultlease.request import OperationRequest
        >>> request = OperationRequest(url="http://127.0.0.1:8200/v1/sys/revoke/abc", token="s.x")
        >>> request.method
        'PUT'
        >>> request.headers
        {'X-Vault-Token': 's.x'}

        ```
    """

    url: str
    token: str = field(repr=False)
    method: str = "PUT"
    ssl_pem_utf8: str | None = field(default=None, repr=False)
    ssl_verify: SslVerification = SslVerification.DEFAULT
    open_timeout: float | None = None
    read_timeout: float | None = None

    @classmethod
    def from_config(cls, config: VaultConfig, path: str, method: str = "PUT") -> OperationRequest:
        """Build a request for ``path`` using the address, token, TLS and
        timeout settings of ``config``.

        Args:
            config: The Vault configuration.
            path: The path appended to ``config.address``.
            method: The HTTP method.

        Returns:
            The request.
        """
        return cls(
            url=f"{config.address}{path}",
            token=config.token,
            method=method,
            ssl_pem_utf8=config.ssl_pem_utf8,
            ssl_verify=config.ssl_verify,
            open_timeout=config.open_timeout,
            read_timeout=config.read_timeout,
        )

    @property
    def headers(self) -> dict[str, str]:
        r"""The HTTP headers attached to the call."""
        return {VAULT_TOKEN_HEADER: self.token}


@dataclass(frozen=True)
class ExecutionResult:
    """Validated outcome of a successful call.

    Attributes:
        response: The raw HTTP response.
        retry_count: The number of retries consumed, 0 if the first
            attempt succeeded.
    """

    response: httpx.Response
    retry_count: int = 0

    @property
    def status_code(self) -> int:
        return self.response.status_code

    @property
    def content(self) -> bytes:
        return self.response.content

    @property
    def headers(self) -> httpx.Headers:
        return self.response.headers
