"""PromotionService — harvests winning sessions into tactics and renders them."""

from pathlib import Path

from closer_arena.config.domain.promotion import PromotionConfig
from closer_arena.content.infrastructure.instructions import load_scripted_instructions
from closer_arena.core.clock import Clock, utc_now
from closer_arena.promotion.domain.observer import PromotionObserver
from closer_arena.promotion.domain.render import render_promoted_instructions
from closer_arena.promotion.domain.tactic import Tactic, TacticSource
from closer_arena.promotion.infrastructure.instructions_file import write_instructions
from closer_arena.ranking.application.ranking import RANKED_COLLECTION
from closer_arena.ranking.domain.ranked import RankedResult
from closer_arena.session.application.orchestrator import SESSIONS_COLLECTION
from closer_arena.session.domain.excerpt import select_winning_excerpt
from closer_arena.session.domain.session import Session, SessionStatus
from closer_arena.store.domain.store import RecordStore

TACTICS_COLLECTION = "tactics"

_MAX_PRIORITY = 10


class PromotionService:
    """Turns winning sessions into tactics for the scripted agent.

    Two sources feed it: golden samples (any completed session scoring above
    the golden threshold) and a sweep's ranked results. A session is promoted
    at most once; session records are only read, never modified.
    """

    def __init__(
        self,
        config: PromotionConfig,
        store: RecordStore,
        observer: PromotionObserver,
        clock: Clock = utc_now,
    ) -> None:
        self._config = config
        self._store = store
        self._observer = observer
        self._clock = clock

    async def harvest_golden_samples(self) -> list[Tactic]:
        records = await self._store.query(
            SESSIONS_COLLECTION, status=SessionStatus.COMPLETED.value
        )
        promoted: list[Tactic] = []
        for record in records:
            session = Session.model_validate(record)
            score = session.score
            if score is None or score.composite_score <= self._config.golden_sample_threshold:
                continue
            tactic = await self._promote(
                session=session,
                source=TacticSource.GOLDEN_SAMPLE,
                priority=self._config.golden_sample_priority,
            )
            if tactic is not None:
                promoted.append(tactic)
        return promoted

    async def promote_ranked(self, sweep_id: str) -> list[Tactic]:
        records = await self._store.query(RANKED_COLLECTION, sweep_id=sweep_id)
        promoted: list[Tactic] = []
        for ranked in sorted(
            (RankedResult.model_validate(r) for r in records), key=lambda r: r.rank
        ):
            session_record = await self._store.get(SESSIONS_COLLECTION, ranked.session_id)
            if session_record is None:
                self._observer.tactic_skipped(
                    session_id=ranked.session_id, reason="session record missing"
                )
                continue
            tactic = await self._promote(
                session=Session.model_validate(session_record),
                source=TacticSource.RANKED,
                priority=max(0, _MAX_PRIORITY - ranked.rank),
            )
            if tactic is not None:
                promoted.append(tactic)
        return promoted

    async def list_tactics(self) -> list[Tactic]:
        records = await self._store.query(TACTICS_COLLECTION)
        return [Tactic.model_validate(record) for record in records]

    async def write_promoted_instructions(self, base_path: Path, output_path: Path) -> str:
        """Render every stored tactic below the base instructions and write the result.

        Raises:
            ContentLoadError: if the base instructions cannot be read.
            ContentWriteError: if the output file cannot be written.
        """
        tactics = await self.list_tactics()
        text = render_promoted_instructions(
            base_instructions=load_scripted_instructions(base_path), tactics=tactics
        )
        write_instructions(path=output_path, text=text)
        self._observer.instructions_written(
            path=str(output_path), tactic_count=len(tactics)
        )
        return text

    async def _promote(
        self, session: Session, source: TacticSource, priority: int
    ) -> Tactic | None:
        if await self._store.get(TACTICS_COLLECTION, session.session_id) is not None:
            self._observer.tactic_skipped(
                session_id=session.session_id, reason="already promoted"
            )
            return None

        text = session.winning_excerpt or select_winning_excerpt(
            session=session, score=session.score, max_chars=self._config.excerpt_chars
        )
        if not text:
            self._observer.tactic_skipped(
                session_id=session.session_id, reason="no scripted turns to promote"
            )
            return None

        tactic = Tactic(
            tactic_id=session.session_id,
            session_id=session.session_id,
            text=text,
            priority=priority,
            source=source,
            composite_score=session.score.composite_score if session.score else 0.0,
            created_at=self._clock(),
        )
        await self._store.create(
            TACTICS_COLLECTION, tactic.tactic_id, tactic.model_dump(mode="json")
        )
        self._observer.tactic_promoted(
            session_id=session.session_id, source=source, priority=priority
        )
        return tactic
