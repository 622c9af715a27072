from collections.abc import Sequence
from dataclasses import dataclass, field


@dataclass(frozen=True)
class RetryPolicy:
    """Bounded retry with exponential backoff and per-attempt model fallback."""

    max_attempts: int = 3
    base_delay_seconds: float = 0.8
    retryable_statuses: frozenset[int] = field(default_factory=lambda: frozenset({429}))

    def is_retryable(self, status_code: int | None) -> bool:
        return status_code is not None and status_code in self.retryable_statuses

    def delay_for(self, attempt: int) -> float:
        """Seconds to wait after the zero-based attempt failed."""
        return self.base_delay_seconds * (2 ** attempt)

    def model_for(self, attempt: int, models: Sequence[str]) -> str:
        """Model for the zero-based attempt; the last one is reused once exhausted."""
        if not models:
            raise ValueError("At least one model identifier is required")
        return models[min(attempt, len(models) - 1)]
