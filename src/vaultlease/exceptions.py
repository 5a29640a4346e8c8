r"""Exception classes raised by Vault lease operations."""

from __future__ import annotations

__all__ = ["UnexpectedStatusError", "VaultError"]

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import httpx


class VaultError(Exception):
    """Terminal failure of a call to the Vault server.

    Raised directly when the call could not be completed at all (network
    error, TLS failure, timeout, malformed URL) after exhausting every retry. The
    underlying transport exception is available as ``cause`` and is also
    chained as ``__cause__``.

    Args:
        method: The HTTP method of the failed call.
        url: The URL of the failed call.
        message: A human-readable description of the failure.
        status_code: The HTTP status code, if the server answered.
        response: The last HTTP response, if the server answered.
        cause: The underlying transport exception, if any.
        retry_count: The number of retries consumed before giving up.

    Example:
        ```pycon
        >>> from vaultlease.exceptions import VaultError
        >>> err = VaultError(method="PUT", url="http://vault/v1/sys/revoke/x", message="boom")
        >>> err.status_code is None
        True

        ```
    """

    def __init__(
        self,
        method: str,
        url: str,
        message: str,
        status_code: int | None = None,
        response: httpx.Response | None = None,
        cause: Exception | None = None,
        retry_count: int = 0,
    ) -> None:
        super().__init__(message)
        self.method = method
        self.url = url
        self.message = message
        self.status_code = status_code
        self.response = response
        self.cause = cause
        self.retry_count = retry_count

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(method={self.method!r}, url={self.url!r}, "
            f"status_code={self.status_code}, retry_count={self.retry_count})"
        )


class UnexpectedStatusError(VaultError):
    """The Vault server answered with a status code other than the
    expected one.

    Args:
        method: The HTTP method of the call.
        url: The URL of the call.
        status_code: The observed HTTP status code.
        expected_status: The status code that denotes success.
        response: The HTTP response.
        retry_count: The number of retries consumed when the response
            was received.
    """

    def __init__(
        self,
        method: str,
        url: str,
        status_code: int,
        expected_status: int,
        response: httpx.Response | None = None,
        retry_count: int = 0,
    ) -> None:
        super().__init__(
            method=method,
            url=url,
            message=(
                f"Expecting HTTP status {expected_status}, but instead receiving {status_code}"
            ),
            status_code=status_code,
            response=response,
            retry_count=retry_count,
        )
        self.expected_status = expected_status
