r"""Core shared logic for sync and async lease operations."""

from __future__ import annotations

__all__ = ["validate_retry_params", "validate_timeout"]

from vaultlease.core.validation import validate_retry_params, validate_timeout
