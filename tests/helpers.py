r"""Shared test helpers for the retry executor and lease operation
tests."""

from __future__ import annotations

__all__ = [
    "LEASE_OPERATIONS",
    "VAULT_ADDRESS",
    "VAULT_TOKEN",
    "LeaseOperationTestCase",
    "create_mock_async_transport_with_side_effect",
    "create_mock_transport_with_side_effect",
    "make_response",
]

from dataclasses import dataclass
from unittest.mock import AsyncMock, Mock

import httpx
import pytest

from vaultlease.transport import AsyncHttpxTransport, HttpxTransport

VAULT_ADDRESS = "https://vault.example.com:8200"
VAULT_TOKEN = "s.test-token"


@dataclass
class LeaseOperationTestCase:
    """Test case definition for lease operation testing.

    Attributes:
        method_name: The ``Leases`` method name (e.g., "revoke").
        argument: The path segment passed to the method.
        path: The expected URL path.
    """

    method_name: str
    argument: str
    path: str


LEASE_OPERATIONS = [
    pytest.param(
        LeaseOperationTestCase(
            method_name="revoke",
            argument="aws/creds/readonly/7c63da27",
            path="/v1/sys/revoke/aws/creds/readonly/7c63da27",
        ),
        id="revoke",
    ),
    pytest.param(
        LeaseOperationTestCase(
            method_name="revoke_prefix",
            argument="aws",
            path="/v1/sys/revoke-prefix/aws",
        ),
        id="revoke_prefix",
    ),
    pytest.param(
        LeaseOperationTestCase(
            method_name="revoke_force",
            argument="aws",
            path="/v1/sys/revoke-force/aws",
        ),
        id="revoke_force",
    ),
]


def make_response(status_code: int) -> Mock:
    """Create a mock httpx.Response with the given status code."""
    return Mock(spec=httpx.Response, status_code=status_code)


def create_mock_transport_with_side_effect(
    side_effect: list[httpx.Response | Exception],
) -> Mock:
    """Create a mock synchronous transport whose ``send`` method returns
    or raises each element of ``side_effect`` in sequence.

    Example:
        >>> transport = create_mock_transport_with_side_effect(
        ...     [httpx.ConnectError("refused"), make_response(204)]
        ... )
    """
    return Mock(spec=HttpxTransport, send=Mock(side_effect=side_effect))


def create_mock_async_transport_with_side_effect(
    side_effect: list[httpx.Response | Exception],
) -> Mock:
    """Create a mock asynchronous transport whose ``send`` coroutine
    returns or raises each element of ``side_effect`` in sequence."""
    return Mock(spec=AsyncHttpxTransport, send=AsyncMock(side_effect=side_effect))
