"""BatchSweep — a bulk run of sessions executed in bounded-concurrency groups."""

from datetime import datetime
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field

from closer_arena.sweep.domain.errors import (
    InvalidSweepTransitionError,
    SweepProgressError,
)


class SweepStatus(StrEnum):
    PENDING = "pending"
    RUNNING = "running"
    COMPLETED = "completed"
    FAILED = "failed"


class HaltReason(StrEnum):
    BUDGET_EXCEEDED = "budget_exceeded"
    BREAKER_TRIPPED = "breaker_tripped"
    TOP_LEVEL_ERROR = "top_level_error"


_TRANSITIONS: dict[SweepStatus, frozenset[SweepStatus]] = {
    SweepStatus.PENDING: frozenset({SweepStatus.RUNNING, SweepStatus.FAILED}),
    SweepStatus.RUNNING: frozenset({SweepStatus.COMPLETED, SweepStatus.FAILED}),
    SweepStatus.COMPLETED: frozenset(),
    SweepStatus.FAILED: frozenset(),
}


class BatchSweep(BaseModel):
    """Persistent progress record of one sweep.

    Status only moves forward (pending -> running -> completed | failed) and
    completed_count only grows, never past target_total. Session slots are
    assigned to profiles round-robin.
    """

    sweep_id: str
    profile_ids: list[str] = Field(min_length=1)
    target_total: int = Field(ge=1)
    batch_size: int = Field(ge=1)
    completed_count: int = Field(default=0, ge=0)
    status: SweepStatus = SweepStatus.PENDING
    session_ids: list[str] = Field(default_factory=list)
    halt_reason: HaltReason | None = None
    ranking_computed: bool = False
    ranking_outcome: str | None = None
    created_at: datetime

    def transition(self, status: SweepStatus) -> None:
        if status not in _TRANSITIONS[self.status]:
            raise InvalidSweepTransitionError(
                sweep_id=self.sweep_id, current=self.status, requested=status
            )
        self.status = status

    def advance(self, count: int, session_ids: list[str]) -> None:
        if count < 0:
            raise SweepProgressError(self.sweep_id, f"negative count {count}")
        if self.completed_count + count > self.target_total:
            raise SweepProgressError(
                self.sweep_id,
                f"{self.completed_count} + {count} exceeds target {self.target_total}",
            )
        self.completed_count += count
        self.session_ids.extend(session_ids)

    def groups(self) -> list[range]:
        """Slot indices per group, in launch order."""
        return [
            range(start, min(start + self.batch_size, self.target_total))
            for start in range(0, self.target_total, self.batch_size)
        ]

    def profile_for_slot(self, slot: int) -> str:
        return self.profile_ids[slot % len(self.profile_ids)]

    def to_record(self) -> dict[str, Any]:
        return self.model_dump(mode="json")
