r"""Configuration dataclass and defaults for Vault lease operations.

This module provides configuration constants, the tri-state TLS
verification setting, and a dataclass-based configuration object shared
by every lease operation.
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_MAX_RETRIES",
    "DEFAULT_RETRY_INTERVAL_MILLISECONDS",
    "ENV_ADDRESS",
    "ENV_OPEN_TIMEOUT",
    "ENV_READ_TIMEOUT",
    "ENV_SSL_CERT",
    "ENV_SSL_VERIFY",
    "ENV_TOKEN",
    "SslVerification",
    "VaultConfig",
]

import enum
import logging
import os
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import TYPE_CHECKING, Any

from vaultlease.core.validation import validate_retry_params, validate_timeout

if TYPE_CHECKING:
    from collections.abc import Mapping

logger: logging.Logger = logging.getLogger(__name__)

# Default maximum number of retry attempts
# Total attempts = max_retries + 1 (initial attempt)
DEFAULT_MAX_RETRIES = 0

# Default fixed pause between two attempts, in milliseconds
DEFAULT_RETRY_INTERVAL_MILLISECONDS = 1000

# Environment variables read by VaultConfig.from_env()
ENV_ADDRESS = "VAULT_ADDR"
ENV_TOKEN = "VAULT_TOKEN"
ENV_OPEN_TIMEOUT = "VAULT_OPEN_TIMEOUT"
ENV_READ_TIMEOUT = "VAULT_READ_TIMEOUT"
ENV_SSL_VERIFY = "VAULT_SSL_VERIFY"
ENV_SSL_CERT = "VAULT_SSL_CERT"

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


class SslVerification(enum.Enum):
    """TLS certificate verification mode.

    ``DEFAULT`` leaves the decision to the transport (httpx verifies
    certificates against the system trust store). ``VERIFY`` forces
    verification and ``SKIP`` disables it.

    Example:
        ```pycon
        >>> from vaultlease.config import SslVerification
        >>> SslVerification.from_value(None)
        <SslVerification.DEFAULT: 'default'>
        >>> SslVerification.from_value(False)
        <SslVerification.SKIP: 'skip'>
        >>> SslVerification.from_value("true")
        <SslVerification.VERIFY: 'verify'>

        ```
    """

    VERIFY = "verify"
    SKIP = "skip"
    DEFAULT = "default"

    @classmethod
    def from_value(cls, value: SslVerification | bool | str | None) -> SslVerification:
        """Convert a nullable boolean or a string to a verification mode.

        Args:
            value: ``None``, a boolean, a member name or value
                (``"verify"``, ``"skip"``, ``"default"``), or a boolean-like
                string such as ``"true"`` or ``"false"``.

        Returns:
            The matching verification mode.

        Raises:
            ValueError: If the value cannot be interpreted.
        """
        if value is None:
            return cls.DEFAULT
        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            return cls.VERIFY if value else cls.SKIP
        normalized = value.strip().lower()
        if normalized in _TRUE_VALUES:
            return cls.VERIFY
        if normalized in _FALSE_VALUES:
            return cls.SKIP
        try:
            return cls(normalized)
        except ValueError:
            msg = f"invalid ssl verification value: {value!r}"
            raise ValueError(msg) from None


@dataclass(frozen=True)
class VaultConfig:
    """Read-only configuration shared by every lease operation.

    Args:
        address: Base address of the Vault server, e.g.
            ``"https://vault.example.com:8200"``. Operation paths are
            appended to it verbatim.
        token: Token sent in the ``X-Vault-Token`` header.
        open_timeout: Connect timeout in seconds. ``None`` means no limit.
        read_timeout: Read timeout in seconds. ``None`` means no limit.
        ssl_pem_utf8: Optional PEM bundle of trusted certificates.
        ssl_verify: TLS verification mode. Booleans and ``None`` are
            accepted and converted to ``SslVerification``.
        max_retries: Maximum number of retry attempts. Must be >= 0.
        retry_interval_milliseconds: Fixed pause between attempts.
            Must be >= 0.

    Example:
        ```pycon
        >>> from vaultlease.config import VaultConfig
        >>> config = VaultConfig(address="http://127.0.0.1:8200", token="s.abc")
        >>> config.max_retries
        0
        >>> config.merge(max_retries=5).max_retries
        5

        ```
    """

    address: str
    token: str = field(default="", repr=False)
    open_timeout: float | None = None
    read_timeout: float | None = None
    ssl_pem_utf8: str | None = field(default=None, repr=False)
    ssl_verify: SslVerification = SslVerification.DEFAULT
    max_retries: int = DEFAULT_MAX_RETRIES
    retry_interval_milliseconds: int = DEFAULT_RETRY_INTERVAL_MILLISECONDS

    def __post_init__(self) -> None:
        """Validate configuration parameters after initialization.

        Raises:
            ValueError: If any parameter fails validation.
        """
        if not self.address:
            msg = "address must be a non-empty string"
            raise ValueError(msg)
        # frozen dataclass, so bypass __setattr__ to normalize the flag
        object.__setattr__(self, "ssl_verify", SslVerification.from_value(self.ssl_verify))
        validate_timeout(self.open_timeout, name="open_timeout")
        validate_timeout(self.read_timeout, name="read_timeout")
        validate_retry_params(
            max_retries=self.max_retries,
            retry_interval=self.retry_interval_milliseconds / 1000,
        )

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None, **overrides: Any) -> VaultConfig:
        """Build a configuration from ``VAULT_*`` environment variables.

        Explicit keyword overrides take precedence over the environment.
        ``VAULT_SSL_CERT`` is the path of a PEM file whose content becomes
        ``ssl_pem_utf8``.

        Args:
            environ: The environment mapping to read. Defaults to
                ``os.environ``.
            **overrides: Keyword arguments for ``VaultConfig`` fields.
                ``None`` values are ignored.

        Returns:
            The configuration.

        Raises:
            ValueError: If no address is available, or if a value
                cannot be parsed.

        Example:
            ```pycon
            >>> from vaultlease.config import VaultConfig
            >>> config = VaultConfig.from_env(
            ...     {"VAULT_ADDR": "http://127.0.0.1:8200", "VAULT_TOKEN": "s.abc"},
            ...     max_retries=3,
            ... )
            >>> config.address
            'http://127.0.0.1:8200'
            >>> config.max_retries
            3

            ```
        """
        if environ is None:
            environ = os.environ
        values: dict[str, Any] = {}
        if ENV_ADDRESS in environ:
            values["address"] = environ[ENV_ADDRESS]
        if ENV_TOKEN in environ:
            values["token"] = environ[ENV_TOKEN]
        if ENV_OPEN_TIMEOUT in environ:
            values["open_timeout"] = _parse_seconds(ENV_OPEN_TIMEOUT, environ[ENV_OPEN_TIMEOUT])
        if ENV_READ_TIMEOUT in environ:
            values["read_timeout"] = _parse_seconds(ENV_READ_TIMEOUT, environ[ENV_READ_TIMEOUT])
        if ENV_SSL_VERIFY in environ:
            values["ssl_verify"] = SslVerification.from_value(environ[ENV_SSL_VERIFY])
        if ENV_SSL_CERT in environ:
            logger.debug(f"Loading trusted certificates from {environ[ENV_SSL_CERT]}")
            values["ssl_pem_utf8"] = Path(environ[ENV_SSL_CERT]).read_text(encoding="utf-8")
        values.update({k: v for k, v in overrides.items() if v is not None})
        if not values.get("address"):
            msg = f"Vault address is missing: pass address= or set {ENV_ADDRESS}"
            raise ValueError(msg)
        return cls(**values)

    @property
    def retry_interval(self) -> float:
        r"""The fixed pause between attempts, in seconds."""
        return self.retry_interval_milliseconds / 1000

    def merge(self, **overrides: Any) -> VaultConfig:
        """Create a new config with specified parameters overridden.

        Only non-None override values are applied.

        Args:
            **overrides: Keyword arguments for parameters to override.

        Returns:
            A new VaultConfig instance with overrides applied.
        """
        filtered_overrides = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **filtered_overrides)


def _parse_seconds(name: str, raw: str) -> float:
    try:
        return float(raw)
    except ValueError:
        msg = f"{name} must be a number of seconds, got {raw!r}"
        raise ValueError(msg) from None
