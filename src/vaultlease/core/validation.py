r"""Parameter validation utilities for the retry policy and transport
configuration.

This module provides validation functions to ensure parameters meet
the required constraints before being used by the retry executors.
"""

from __future__ import annotations

__all__ = ["validate_retry_params", "validate_timeout"]


def validate_timeout(timeout: float | None, name: str = "timeout") -> None:
    """Validate a timeout parameter.

    Args:
        timeout: Maximum seconds to wait. ``None`` means no limit.
        name: The parameter name, used in the error message.

    Raises:
        ValueError: If timeout is a numeric value <= 0.

    Example:
        ```pycon
        >>> from vaultlease.core.validation import validate_timeout
        >>> validate_timeout(10.0)
        >>> validate_timeout(None)
        >>> validate_timeout(0)  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        ValueError: timeout must be > 0, got 0

        ```
    """
    if timeout is not None and timeout <= 0:
        msg = f"{name} must be > 0, got {timeout}"
        raise ValueError(msg)


def validate_retry_params(
    max_retries: int,
    retry_interval: float,
    max_total_time: float | None = None,
) -> None:
    """Validate retry parameters.

    Args:
        max_retries: Maximum number of retry attempts for failed requests.
            Must be >= 0. A value of 0 means no retries (only the initial attempt).
        retry_interval: Fixed pause in seconds between two attempts.
            Must be >= 0.
        max_total_time: Maximum total time budget for the whole retry
            sequence. Must be > 0 if provided.

    Raises:
        ValueError: If max_retries or retry_interval are negative,
            or if max_total_time is non-positive.

    Example:
        ```pycon
        >>> from vaultlease.core import validate_retry_params
        >>> validate_retry_params(max_retries=3, retry_interval=1.0)
        >>> validate_retry_params(max_retries=0, retry_interval=0.0)
        >>> validate_retry_params(max_retries=3, retry_interval=1.0, max_total_time=30.0)
        >>> validate_retry_params(max_retries=-1, retry_interval=1.0)  # doctest: +SKIP

        ```
    """
    if max_retries < 0:
        msg = f"max_retries must be >= 0, got {max_retries}"
        raise ValueError(msg)
    if retry_interval < 0:
        msg = f"retry_interval must be >= 0, got {retry_interval}"
        raise ValueError(msg)
    if max_total_time is not None and max_total_time <= 0:
        msg = f"max_total_time must be > 0, got {max_total_time}"
        raise ValueError(msg)
