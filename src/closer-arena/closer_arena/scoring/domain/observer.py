"""Observer port for the scoring domain — defines events in domain language."""

from typing import Protocol


class ScoringObserver(Protocol):
    def scoring_started(self, session_id: str, model: str, throttled: bool) -> None: ...

    def scoring_completed(
        self,
        session_id: str,
        composite_score: float,
        cost_usd: float,
        duration_ms: int,
    ) -> None: ...

    def scoring_failed(self, session_id: str, reason: str) -> None: ...
