r"""Retry package for executing idempotent Vault calls.

Public API:
    - RetryPolicy: Fixed-interval, fixed-count retry configuration
    - RetryExecutor: Synchronous retry executor
    - AsyncRetryExecutor: Asynchronous retry executor
"""

from __future__ import annotations

__all__ = [
    "AsyncRetryExecutor",
    "RetryExecutor",
    "RetryPolicy",
]

from vaultlease.retry.executor import RetryExecutor
from vaultlease.retry.executor_async import AsyncRetryExecutor
from vaultlease.retry.policy import RetryPolicy
