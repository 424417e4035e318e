"""SweepSummary — the user-visible report of one sweep run."""

from pydantic import BaseModel, ConfigDict

from closer_arena.session.domain.session import Session
from closer_arena.sweep.domain.sweep import HaltReason, SweepStatus


class SweepSummary(BaseModel):
    """Result of BatchSweepCoordinator.run().

    ``results`` holds one entry per attempted slot in launch order: the
    completed Session, or None where that session failed.
    """

    model_config = ConfigDict(frozen=True)

    sweep_id: str
    status: SweepStatus
    attempted: int
    completed: int
    failed: int
    total_cost_usd: float
    halt_reason: HaltReason | None
    results: list[Session | None]

    @property
    def completed_sessions(self) -> list[Session]:
        return [session for session in self.results if session is not None]

    @property
    def average_score(self) -> float | None:
        scores = [
            session.score.composite_score
            for session in self.completed_sessions
            if session.score is not None
        ]
        return sum(scores) / len(scores) if scores else None
