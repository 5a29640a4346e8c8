from __future__ import annotations

from typing import TYPE_CHECKING
from unittest.mock import AsyncMock, Mock, patch

import httpx
import pytest

from tests.helpers import VAULT_ADDRESS, VAULT_TOKEN
from vaultlease.config import VaultConfig
from vaultlease.request import OperationRequest
from vaultlease.transport import AsyncHttpxTransport, HttpxTransport

if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture
def mock_sleep() -> Generator[Mock, None, None]:
    """Patch time.sleep to make tests run faster."""
    with patch("time.sleep", return_value=None) as mock:
        yield mock


@pytest.fixture
def mock_asleep() -> Generator[Mock, None, None]:
    """Patch asyncio.sleep to make tests run faster."""
    with patch("asyncio.sleep", return_value=None) as mock:
        yield mock


@pytest.fixture
def mock_response() -> httpx.Response:
    """Create a mock httpx.Response carrying 204 No Content."""
    return Mock(spec=httpx.Response, status_code=204)


@pytest.fixture
def mock_transport(mock_response: httpx.Response) -> Mock:
    """Create a mock synchronous transport returning ``mock_response``."""
    return Mock(spec=HttpxTransport, send=Mock(return_value=mock_response))


@pytest.fixture
def mock_async_transport(mock_response: httpx.Response) -> Mock:
    """Create a mock asynchronous transport returning
    ``mock_response``."""
    return Mock(spec=AsyncHttpxTransport, send=AsyncMock(return_value=mock_response))


@pytest.fixture
def vault_config() -> VaultConfig:
    """Create a configuration with two retries and a 10 ms interval."""
    return VaultConfig(
        address=VAULT_ADDRESS,
        token=VAULT_TOKEN,
        max_retries=2,
        retry_interval_milliseconds=10,
    )


@pytest.fixture
def operation_request() -> OperationRequest:
    """Create a revoke request against the test Vault address."""
    return OperationRequest(url=f"{VAULT_ADDRESS}/v1/sys/revoke/abc", token=VAULT_TOKEN)


@pytest.fixture
def mock_callback() -> Mock:
    """Create a mock callback function for testing callbacks."""
    return Mock()
