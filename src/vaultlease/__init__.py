r"""vaultlease - Resilient lease operations for HashiCorp Vault.

This package revokes Vault leases through idempotent ``PUT`` calls with
a fixed-interval, fixed-count retry policy and strict status validation.
Built on top of httpx, it provides both synchronous and asyncio APIs.

Key Features:
    - revoke, revoke-prefix and revoke-force lease operations
    - Fixed-count, fixed-interval retries on transport failures and
      unexpected status codes
    - Tri-state TLS verification and custom PEM trust bundles
    - Configuration from code or ``VAULT_*`` environment variables
    - Callback hooks for observability (logging, metrics, alerting)

Example:
    ```pycon
    >>> from vaultlease import Vault, VaultConfig
    >>> config = VaultConfig(
    ...     address="https://vault.example.com:8200",
    ...     token="s.token",
    ...     max_retries=3,
    ...     retry_interval_milliseconds=500,
    ... )
    >>> result = Vault(config).leases().revoke_prefix("aws")  # doctest: +SKIP
    >>> result.retry_count  # doctest: +SKIP
    0

    ```
"""

from __future__ import annotations

__all__ = [
    "AsyncLeases",
    "ExecutionResult",
    "Leases",
    "OperationRequest",
    "SslVerification",
    "UnexpectedStatusError",
    "Vault",
    "VaultConfig",
    "VaultError",
    "__version__",
]

from importlib.metadata import PackageNotFoundError, version

from vaultlease.client import Vault
from vaultlease.config import SslVerification, VaultConfig
from vaultlease.exceptions import UnexpectedStatusError, VaultError
from vaultlease.leases import AsyncLeases, Leases
from vaultlease.request import ExecutionResult, OperationRequest

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"
