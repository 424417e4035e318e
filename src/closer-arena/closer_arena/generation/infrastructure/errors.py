"""Error types raised by generation infrastructure."""

from closer_arena.core.errors import ArenaError


class GenerationError(ArenaError):
    """Raised when the model cannot be invoked or returns no usable reply."""

    def __init__(self, role: str, reason: str) -> None:
        self.role = role
        self.reason = reason
        super().__init__(f"Failed to generate {role} turn: {reason}", retriable=True)
