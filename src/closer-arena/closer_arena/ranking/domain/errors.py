"""Error types raised by the ranking pass."""

from closer_arena.core.errors import ArenaError


class SweepNotCompletedError(ArenaError):
    def __init__(self, sweep_id: str, status: str) -> None:
        self.sweep_id = sweep_id
        super().__init__(
            f"Failed to rank sweep '{sweep_id}': sweep is {status}, not completed"
        )


class SelectionError(ArenaError):
    """Raised when the selector cannot be invoked or its output cannot be parsed."""

    def __init__(self, sweep_id: str, reason: str) -> None:
        self.sweep_id = sweep_id
        super().__init__(
            f"Failed to select top sessions for sweep '{sweep_id}': {reason}",
            retriable=True,
        )
