r"""Transports performing the HTTP calls issued by the retry
executors."""

from __future__ import annotations

__all__ = [
    "AsyncHttpxTransport",
    "AsyncTransport",
    "HttpxTransport",
    "Transport",
    "build_timeout",
    "build_verify",
]

from vaultlease.transport.base import AsyncTransport, Transport
from vaultlease.transport.httpx_transport import (
    AsyncHttpxTransport,
    HttpxTransport,
    build_timeout,
    build_verify,
)
