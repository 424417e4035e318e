"""StructlogScoringObserver — production observer that delegates to structlog."""

import structlog


class StructlogScoringObserver:
    """Logs scoring domain events to structlog.

    Does NOT inherit from ScoringObserver (structural typing via Protocol).
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def scoring_started(self, session_id: str, model: str, throttled: bool) -> None:
        self._log.info(
            "scoring.started", session_id=session_id, model=model, throttled=throttled
        )

    def scoring_completed(
        self,
        session_id: str,
        composite_score: float,
        cost_usd: float,
        duration_ms: int,
    ) -> None:
        self._log.info(
            "scoring.completed",
            session_id=session_id,
            composite_score=composite_score,
            cost_usd=round(cost_usd, 6),
            duration_ms=duration_ms,
        )

    def scoring_failed(self, session_id: str, reason: str) -> None:
        self._log.error("scoring.failed", session_id=session_id, reason=reason)
