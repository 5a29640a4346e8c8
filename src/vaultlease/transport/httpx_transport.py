r"""Transports backed by httpx.

Each call opens a fresh ``httpx.Client`` (or ``httpx.AsyncClient``)
configured with the TLS and timeout settings of the request, and closes
it before returning. No connection is shared between attempts.
"""

from __future__ import annotations

__all__ = ["AsyncHttpxTransport", "HttpxTransport", "build_timeout", "build_verify"]

import logging
import ssl
from typing import TYPE_CHECKING, Any

import httpx

from vaultlease.config import SslVerification

if TYPE_CHECKING:
    from vaultlease.request import OperationRequest

logger: logging.Logger = logging.getLogger(__name__)


def build_verify(request: OperationRequest) -> ssl.SSLContext | bool:
    """Compute the httpx ``verify`` argument for a request.

    ``SKIP`` disables verification. Otherwise, a PEM bundle on the
    request replaces the default trust store. Without a bundle, httpx
    verifies against its default trust store.

    Args:
        request: The request.

    Returns:
        ``False``, ``True``, or an SSL context trusting the PEM bundle.

    Raises:
        ssl.SSLError: If the PEM bundle cannot be loaded.

    Example:
        ```pycon
        >>> from vaultlease.config import SslVerification
        >>> from vaultlease.request import OperationRequest
        >>> from vaultlease.transport import build_verify
        >>> build_verify(OperationRequest(url="https://vault", token="t"))
        True
        >>> build_verify(
        ...     OperationRequest(url="https://vault", token="t", ssl_verify=SslVerification.SKIP)
        ... )
        False

        ```
    """
    if request.ssl_verify is SslVerification.SKIP:
        return False
    if request.ssl_pem_utf8:
        return ssl.create_default_context(cadata=request.ssl_pem_utf8)
    return True


def build_timeout(request: OperationRequest) -> httpx.Timeout:
    """Compute the httpx timeout for a request.

    Only the connect and read phases are bounded; ``None`` on the request
    means no limit.

    Args:
        request: The request.

    Returns:
        The httpx timeout.
    """
    return httpx.Timeout(None, connect=request.open_timeout, read=request.read_timeout)


class HttpxTransport:
    """Synchronous transport opening one ``httpx.Client`` per call.

    Args:
        **client_kwargs: Extra keyword arguments passed to
            ``httpx.Client`` (e.g. ``proxy`` or ``transport``).

    Example:
        ```pycon
        >>> from vaultlease.request import OperationRequest
        >>> from vaultlease.transport import HttpxTransport
        >>> transport = HttpxTransport()
        >>> response = transport.send(
        ...     OperationRequest(url="http://127.0.0.1:8200/v1/sys/revoke/abc", token="s.x")
        ... )  # doctest: +SKIP

        ```
    """

    def __init__(self, **client_kwargs: Any) -> None:
        self._client_kwargs = client_kwargs

    def send(self, request: OperationRequest) -> httpx.Response:
        logger.debug(f"Sending {request.method} request to {request.url}")
        with httpx.Client(
            verify=build_verify(request), timeout=build_timeout(request), **self._client_kwargs
        ) as client:
            return client.request(request.method, request.url, headers=request.headers)


class AsyncHttpxTransport:
    """Asynchronous transport opening one ``httpx.AsyncClient`` per call.

    Args:
        **client_kwargs: Extra keyword arguments passed to
            ``httpx.AsyncClient``.
    """

    def __init__(self, **client_kwargs: Any) -> None:
        self._client_kwargs = client_kwargs

    async def send(self, request: OperationRequest) -> httpx.Response:
        logger.debug(f"Sending {request.method} request to {request.url}")
        async with httpx.AsyncClient(
            verify=build_verify(request), timeout=build_timeout(request), **self._client_kwargs
        ) as client:
            return await client.request(request.method, request.url, headers=request.headers)
