from __future__ import annotations

from unittest.mock import Mock, patch

import httpx

from vaultlease.callbacks import (
    CallbackConfig,
    CallbackManager,
    FailureInfo,
    RequestInfo,
    ResponseInfo,
    RetryInfo,
    invoke_on_failure,
    invoke_on_request,
    invoke_on_retry,
    invoke_on_success,
)

TEST_URL = "https://vault.example.com:8200/v1/sys/revoke/abc"


def test_callback_config_defaults() -> None:
    config = CallbackConfig()
    assert config.on_request is None
    assert config.on_retry is None
    assert config.on_success is None
    assert config.on_failure is None


def test_invoke_on_request(mock_callback: Mock) -> None:
    invoke_on_request(mock_callback, url=TEST_URL, method="PUT", attempt=0, max_retries=3)
    mock_callback.assert_called_once_with(
        RequestInfo(url=TEST_URL, method="PUT", attempt=1, max_retries=3)
    )


def test_invoke_on_request_none() -> None:
    invoke_on_request(None, url=TEST_URL, method="PUT", attempt=0, max_retries=3)


def test_invoke_on_retry(mock_callback: Mock) -> None:
    error = httpx.ConnectError("refused")
    invoke_on_retry(
        mock_callback,
        url=TEST_URL,
        method="PUT",
        attempt=0,
        max_retries=3,
        sleep_time=1.0,
        error=error,
        status_code=None,
    )
    mock_callback.assert_called_once_with(
        RetryInfo(
            url=TEST_URL,
            method="PUT",
            attempt=2,
            max_retries=3,
            wait_time=1.0,
            error=error,
            status_code=None,
        )
    )


def test_invoke_on_success(mock_callback: Mock) -> None:
    response = Mock(spec=httpx.Response, status_code=204)
    with patch("time.time", return_value=12.0):
        invoke_on_success(
            mock_callback,
            url=TEST_URL,
            method="PUT",
            attempt=1,
            max_retries=3,
            response=response,
            start_time=10.0,
        )
    mock_callback.assert_called_once_with(
        ResponseInfo(
            url=TEST_URL,
            method="PUT",
            attempt=2,
            max_retries=3,
            response=response,
            total_time=2.0,
        )
    )


def test_invoke_on_failure(mock_callback: Mock) -> None:
    error = RuntimeError("boom")
    with patch("time.time", return_value=15.0):
        invoke_on_failure(
            mock_callback,
            url=TEST_URL,
            method="PUT",
            attempt=3,
            max_retries=3,
            error=error,
            status_code=500,
            start_time=10.0,
        )
    mock_callback.assert_called_once_with(
        FailureInfo(
            url=TEST_URL,
            method="PUT",
            attempt=4,
            max_retries=3,
            error=error,
            status_code=500,
            total_time=5.0,
        )
    )


def test_invoke_on_failure_none() -> None:
    invoke_on_failure(
        None,
        url=TEST_URL,
        method="PUT",
        attempt=0,
        max_retries=0,
        error=RuntimeError("boom"),
        status_code=None,
        start_time=0.0,
    )


#####################################
#     Tests for CallbackManager     #
#####################################


def test_callback_manager_default_config() -> None:
    assert CallbackManager().callbacks == CallbackConfig()


def test_callback_manager_without_callbacks_is_noop() -> None:
    manager = CallbackManager(CallbackConfig())
    manager.on_request(TEST_URL, "PUT", 0, 2)
    manager.on_retry(TEST_URL, "PUT", 0, 2, 1.0, RuntimeError("boom"), None)
    manager.on_success(TEST_URL, "PUT", 0, 2, Mock(spec=httpx.Response), 0.0)
    manager.on_failure(TEST_URL, "PUT", 2, 2, RuntimeError("boom"), None, 0.0)


def test_callback_manager_on_request(mock_callback: Mock) -> None:
    CallbackManager(CallbackConfig(on_request=mock_callback)).on_request(TEST_URL, "PUT", 1, 2)
    mock_callback.assert_called_once_with(
        RequestInfo(url=TEST_URL, method="PUT", attempt=2, max_retries=2)
    )


def test_callback_manager_on_retry(mock_callback: Mock) -> None:
    error = httpx.ReadTimeout("timed out")
    CallbackManager(CallbackConfig(on_retry=mock_callback)).on_retry(
        TEST_URL, "PUT", 0, 2, 0.5, error, None
    )
    info = mock_callback.call_args[0][0]
    assert isinstance(info, RetryInfo)
    assert info.attempt == 2
    assert info.wait_time == 0.5
    assert info.error is error


def test_callback_manager_on_success(mock_callback: Mock) -> None:
    response = Mock(spec=httpx.Response, status_code=204)
    CallbackManager(CallbackConfig(on_success=mock_callback)).on_success(
        TEST_URL, "PUT", 0, 2, response, 0.0
    )
    assert mock_callback.call_args[0][0].response is response


def test_callback_manager_on_failure(mock_callback: Mock) -> None:
    error = RuntimeError("boom")
    CallbackManager(CallbackConfig(on_failure=mock_callback)).on_failure(
        TEST_URL, "PUT", 2, 2, error, 503, 0.0
    )
    info = mock_callback.call_args[0][0]
    assert isinstance(info, FailureInfo)
    assert info.attempt == 3
    assert info.status_code == 503
    assert info.error is error
