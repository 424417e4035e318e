"""Error types raised when the circuit breaker stops work."""

from closer_arena.breaker.domain.check import TripSource
from closer_arena.core.errors import ArenaError


class BreakerTrippedError(ArenaError):
    """Raised when a unit of work is refused because the breaker is tripped."""

    def __init__(self, source: TripSource | None, reason: str | None = None) -> None:
        self.source = source
        self.reason = reason
        detail = f" ({reason})" if reason else ""
        super().__init__(
            f"Failed to start work: circuit breaker tripped by {source}{detail}"
        )
