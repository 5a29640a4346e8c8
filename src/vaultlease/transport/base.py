r"""Transport protocols consumed by the retry executors."""

from __future__ import annotations

__all__ = ["AsyncTransport", "Transport"]

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    import httpx

    from vaultlease.request import OperationRequest


@runtime_checkable
class Transport(Protocol):
    """Issues one HTTP call.

    Implementations acquire and release any network resource within a
    single ``send`` call, and raise an exception (usually an
    ``httpx.HTTPError``) when the call cannot be completed.
    """

    def send(self, request: OperationRequest) -> httpx.Response:
        """Perform the call described by ``request``."""


@runtime_checkable
class AsyncTransport(Protocol):
    r"""Asynchronous counterpart of ``Transport``."""

    async def send(self, request: OperationRequest) -> httpx.Response:
        """Perform the call described by ``request``."""
