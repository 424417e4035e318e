"""Session — one paired-agent dialogue and its lifecycle."""

from datetime import datetime
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field

from closer_arena.generation.domain.role import Role
from closer_arena.scoring.domain.score import SessionScore
from closer_arena.session.domain.errors import (
    SessionAlreadyFinalizedError,
    SessionStateError,
)
from closer_arena.session.domain.turn import Turn

TRANSCRIPT_SEPARATOR = "\n\n"


class SessionStatus(StrEnum):
    NOT_STARTED = "not_started"
    RUNNING = "running"
    COMPLETED = "completed"
    ABORTED_BUDGET = "aborted_budget"
    ABORTED_ERROR = "aborted_error"

    @property
    def is_terminal(self) -> bool:
        return self in _TERMINAL


_TERMINAL = frozenset(
    {SessionStatus.COMPLETED, SessionStatus.ABORTED_BUDGET, SessionStatus.ABORTED_ERROR}
)


class Session(BaseModel):
    """A dialogue between the scripted agent and one counter-agent.

    The transcript and cost grow turn by turn while the session is running.
    The terminal fields (status, score, winning excerpt, abort reason, end
    time) are written exactly once by finalize(); every mutator refuses to
    run afterwards. Fields must only be changed through the methods below.
    """

    session_id: str
    profile_id: str
    sweep_id: str | None = None
    max_turns: int = Field(ge=1)
    status: SessionStatus = SessionStatus.NOT_STARTED
    turns: list[Turn] = Field(default_factory=list)
    input_tokens: int = 0
    output_tokens: int = 0
    cost_usd: float = 0.0
    score: SessionScore | None = None
    winning_excerpt: str | None = None
    abort_reason: str | None = None
    started_at: datetime | None = None
    ended_at: datetime | None = None

    def start(self, now: datetime) -> None:
        if self.status is not SessionStatus.NOT_STARTED:
            raise SessionStateError(self.session_id, f"cannot start from {self.status}")
        self.status = SessionStatus.RUNNING
        self.started_at = now

    def add_cost(self, amount_usd: float, input_tokens: int = 0, output_tokens: int = 0) -> None:
        self._require_running()
        if amount_usd < 0:
            raise SessionStateError(self.session_id, f"negative cost {amount_usd}")
        self.cost_usd += amount_usd
        self.input_tokens += input_tokens
        self.output_tokens += output_tokens

    def append_turn(self, role: Role, text: str, cost_usd: float = 0.0) -> Turn:
        self._require_running()
        if len(self.turns) >= self.max_turns:
            raise SessionStateError(
                self.session_id, f"turn limit of {self.max_turns} reached"
            )
        turn = Turn(index=len(self.turns), role=role, text=text, cost_usd=cost_usd)
        self.turns.append(turn)
        return turn

    def finalize(
        self,
        status: SessionStatus,
        now: datetime,
        score: SessionScore | None = None,
        winning_excerpt: str | None = None,
        abort_reason: str | None = None,
    ) -> None:
        if self.status.is_terminal:
            raise SessionAlreadyFinalizedError(self.session_id, self.status)
        if not status.is_terminal:
            raise SessionStateError(self.session_id, f"{status} is not a terminal status")
        self.status = status
        self.score = score
        self.winning_excerpt = winning_excerpt
        self.abort_reason = abort_reason
        self.ended_at = now

    def last_turn_of(self, role: Role) -> Turn | None:
        for turn in reversed(self.turns):
            if turn.role is role:
                return turn
        return None

    def transcript(self) -> str:
        return TRANSCRIPT_SEPARATOR.join(turn.render() for turn in self.turns)

    def to_record(self) -> dict[str, Any]:
        return self.model_dump(mode="json")

    def _require_running(self) -> None:
        if self.status is not SessionStatus.RUNNING:
            raise SessionStateError(self.session_id, f"session is {self.status}")
