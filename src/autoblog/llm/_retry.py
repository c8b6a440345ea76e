from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class RetryConfig:
    """Retry/backoff settings for the primary provider.

    Notes:
    - `max_retries` is the number of primary attempts, not extra retries.
    """

    max_retries: int = 2
    base_delay_s: float = 1.0
    max_delay_s: float = 30.0

    def __post_init__(self) -> None:
        # Clamp instead of raising: at least one attempt, positive delays.
        if self.max_retries < 1:
            object.__setattr__(self, "max_retries", 1)

        if self.base_delay_s <= 0:
            object.__setattr__(self, "base_delay_s", 0.1)

        if self.max_delay_s <= 0:
            object.__setattr__(self, "max_delay_s", 0.1)

        if self.max_delay_s < self.base_delay_s:
            object.__setattr__(self, "max_delay_s", float(self.base_delay_s))


def backoff_delay(attempt: int, retry: RetryConfig) -> float:
    """Delay to wait after failed `attempt` (1-based): attempt x base, capped."""

    return min(retry.max_delay_s, retry.base_delay_s * max(1, attempt))


def attempts_for(max_retries: Optional[int], retry: RetryConfig) -> int:
    if max_retries is None:
        return retry.max_retries
    return max(1, int(max_retries))
