"""Error types raised by the sweep domain."""

from closer_arena.core.errors import ArenaError


class InvalidSweepTransitionError(ArenaError):
    def __init__(self, sweep_id: str, current: str, requested: str) -> None:
        self.sweep_id = sweep_id
        super().__init__(
            f"Failed to move sweep '{sweep_id}' from {current} to {requested}"
        )


class SweepProgressError(ArenaError):
    """Raised when progress would move backwards or past the target total."""

    def __init__(self, sweep_id: str, reason: str) -> None:
        self.sweep_id = sweep_id
        super().__init__(f"Failed to advance sweep '{sweep_id}': {reason}")


class SweepNotFoundError(ArenaError):
    def __init__(self, sweep_id: str) -> None:
        self.sweep_id = sweep_id
        super().__init__(f"Failed to find sweep '{sweep_id}'")


class NoProfilesError(ArenaError):
    def __init__(self) -> None:
        super().__init__("Failed to create sweep: no counter-agent profiles given")
