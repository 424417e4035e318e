"""StructlogSessionObserver — production observer that delegates to structlog."""

import structlog


class StructlogSessionObserver:
    """Logs session domain events to structlog.

    Does NOT inherit from SessionObserver (structural typing via Protocol).
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def session_started(
        self, session_id: str, profile_id: str, sweep_id: str | None
    ) -> None:
        self._log.info(
            "session.started",
            session_id=session_id,
            profile_id=profile_id,
            sweep_id=sweep_id,
        )

    def turn_completed(
        self,
        session_id: str,
        turn_index: int,
        role: str,
        turn_cost_usd: float,
        session_cost_usd: float,
    ) -> None:
        self._log.debug(
            "session.turn.completed",
            session_id=session_id,
            turn_index=turn_index,
            role=role,
            turn_cost_usd=round(turn_cost_usd, 6),
            session_cost_usd=round(session_cost_usd, 6),
        )

    def session_completed(
        self,
        session_id: str,
        composite_score: float,
        cost_usd: float,
        num_turns: int,
    ) -> None:
        self._log.info(
            "session.completed",
            session_id=session_id,
            composite_score=composite_score,
            cost_usd=round(cost_usd, 4),
            num_turns=num_turns,
        )

    def session_aborted(
        self,
        session_id: str,
        status: str,
        reason: str,
        cost_usd: float,
        num_turns: int,
    ) -> None:
        self._log.error(
            "session.aborted",
            session_id=session_id,
            status=status,
            reason=reason,
            cost_usd=round(cost_usd, 4),
            num_turns=num_turns,
        )

    def audit_failed(self, session_id: str, reason: str) -> None:
        self._log.warning("session.audit.failed", session_id=session_id, reason=reason)
