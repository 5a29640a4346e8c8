r"""Fixed-interval, fixed-count retry policy."""

from __future__ import annotations

__all__ = ["RetryPolicy"]

from dataclasses import dataclass
from typing import TYPE_CHECKING

from vaultlease.core.validation import validate_retry_params

if TYPE_CHECKING:
    from vaultlease.config import VaultConfig


@dataclass(frozen=True)
class RetryPolicy:
    """Configuration for retry behavior.

    The pause between two attempts is constant: there is no backoff and
    no jitter.

    Attributes:
        max_retries: Maximum number of retry attempts. The total number
            of attempts is ``max_retries + 1``.
        retry_interval: Pause in seconds between two attempts.
        max_total_time: Optional time budget in seconds for the whole
            retry sequence. When the budget is spent, no further retry is
            attempted. ``None`` means the sequence always runs through its
            full attempt budget.

    Example:
        ```pycon
        >>> from vaultlease.retry import RetryPolicy
        >>> policy = RetryPolicy(max_retries=2, retry_interval=0.5)
        >>> policy.max_attempts
        3

        ```
    """

    max_retries: int = 0
    retry_interval: float = 1.0
    max_total_time: float | None = None

    def __post_init__(self) -> None:
        validate_retry_params(
            max_retries=self.max_retries,
            retry_interval=self.retry_interval,
            max_total_time=self.max_total_time,
        )

    @classmethod
    def from_config(cls, config: VaultConfig, max_total_time: float | None = None) -> RetryPolicy:
        """Build the policy configured on ``config``.

        Args:
            config: The Vault configuration.
            max_total_time: Optional time budget for the whole sequence.

        Returns:
            The retry policy.
        """
        return cls(
            max_retries=config.max_retries,
            retry_interval=config.retry_interval,
            max_total_time=max_total_time,
        )

    @property
    def max_attempts(self) -> int:
        return self.max_retries + 1
