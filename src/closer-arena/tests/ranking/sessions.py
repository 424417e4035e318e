"""Helpers that persist finished sweeps and sessions for ranking and promotion tests."""

from datetime import UTC, datetime

from closer_arena.generation.domain.role import Role
from closer_arena.scoring.domain.score import SessionScore
from closer_arena.session.application.orchestrator import SESSIONS_COLLECTION
from closer_arena.session.domain.session import Session, SessionStatus
from closer_arena.store.domain.store import RecordStore
from closer_arena.sweep.application.repository import SweepRepository
from closer_arena.sweep.domain.sweep import BatchSweep, SweepStatus
from tests.scoring.fake_scorer import make_score

_NOW = datetime(2026, 3, 1, 12, 0, tzinfo=UTC)


async def store_session(
    store: RecordStore,
    session_id: str,
    sweep_id: str | None = "w1",
    score: SessionScore | None = None,
    status: SessionStatus = SessionStatus.COMPLETED,
    winning_excerpt: str | None = None,
) -> Session:
    session = Session(
        session_id=session_id, profile_id="skeptic", sweep_id=sweep_id, max_turns=2
    )
    session.start(now=_NOW)
    session.append_turn(role=Role.SCRIPTED, text=f"{session_id}: the repairs run $40k.")
    session.append_turn(role=Role.COUNTER_AGENT, text="Fine, that works.")
    if status is SessionStatus.COMPLETED:
        final_score = score if score is not None else make_score()
        session.finalize(
            status=status,
            now=_NOW,
            score=final_score,
            winning_excerpt=winning_excerpt or final_score.winning_rebuttal,
        )
    else:
        session.finalize(status=status, now=_NOW, abort_reason="stopped")
    await store.create(SESSIONS_COLLECTION, session_id, session.to_record())
    return session


async def store_sweep(
    store: RecordStore,
    session_ids: list[str],
    sweep_id: str = "w1",
    status: SweepStatus = SweepStatus.COMPLETED,
) -> BatchSweep:
    sweep = BatchSweep(
        sweep_id=sweep_id,
        profile_ids=["skeptic"],
        target_total=max(1, len(session_ids)),
        batch_size=5,
        completed_count=len(session_ids),
        status=status,
        session_ids=session_ids,
        created_at=_NOW,
    )
    await SweepRepository(store=store).add(sweep)
    return sweep
