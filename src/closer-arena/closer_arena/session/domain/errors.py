"""Error types raised by the session domain and orchestrator."""

from closer_arena.core.errors import ArenaError


class SessionStateError(ArenaError):
    """Raised when a session is mutated in a way its lifecycle forbids."""

    def __init__(self, session_id: str, reason: str) -> None:
        self.session_id = session_id
        super().__init__(f"Failed to update session '{session_id}': {reason}")


class SessionAlreadyFinalizedError(SessionStateError):
    def __init__(self, session_id: str, status: str) -> None:
        super().__init__(session_id=session_id, reason=f"already finalized as {status}")


class SessionTurnError(ArenaError):
    """Raised when a turn cannot be produced. The session ends aborted_error."""

    def __init__(self, session_id: str, turn_index: int, reason: str) -> None:
        self.session_id = session_id
        self.turn_index = turn_index
        super().__init__(
            f"Failed to complete turn {turn_index} of session '{session_id}': {reason}"
        )


class SessionKillThresholdError(ArenaError):
    """Raised when a session's own spend reaches the per-session kill threshold."""

    def __init__(
        self,
        session_id: str,
        turn_index: int,
        cost_usd: float,
        threshold_usd: float,
    ) -> None:
        self.session_id = session_id
        self.turn_index = turn_index
        self.cost_usd = cost_usd
        self.threshold_usd = threshold_usd
        super().__init__(
            f"Failed to continue session '{session_id}': cost ${cost_usd:.4f}"
            f" reached kill threshold ${threshold_usd:.2f} at turn {turn_index}"
        )
