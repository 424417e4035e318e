"""Observer port for the session domain — defines events in domain language."""

from typing import Protocol


class SessionObserver(Protocol):
    """Observer port emitting structured events while a session runs.

    Implementations may log to structlog, record for tests, or emit metrics.
    """

    def session_started(
        self, session_id: str, profile_id: str, sweep_id: str | None
    ) -> None: ...

    def turn_completed(
        self,
        session_id: str,
        turn_index: int,
        role: str,
        turn_cost_usd: float,
        session_cost_usd: float,
    ) -> None: ...

    def session_completed(
        self,
        session_id: str,
        composite_score: float,
        cost_usd: float,
        num_turns: int,
    ) -> None: ...

    def session_aborted(
        self,
        session_id: str,
        status: str,
        reason: str,
        cost_usd: float,
        num_turns: int,
    ) -> None: ...

    def audit_failed(self, session_id: str, reason: str) -> None: ...
