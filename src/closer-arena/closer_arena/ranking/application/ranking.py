"""RankingPass — selects the top-K winning sessions of a completed sweep."""

from closer_arena.config.domain.ranking import RankingConfig
from closer_arena.ranking.domain.candidate import (
    RankingCandidate,
    is_successful,
    to_candidate,
)
from closer_arena.ranking.domain.errors import SweepNotCompletedError
from closer_arena.ranking.domain.observer import RankingObserver
from closer_arena.ranking.domain.ranked import (
    RankedResult,
    RankingOutcome,
    RankingStatus,
)
from closer_arena.ranking.domain.selection import Selection
from closer_arena.ranking.domain.selector import Selector
from closer_arena.session.application.orchestrator import SESSIONS_COLLECTION
from closer_arena.session.domain.session import Session, SessionStatus
from closer_arena.store.domain.store import RecordStore
from closer_arena.sweep.application.repository import SweepRepository
from closer_arena.sweep.domain.sweep import BatchSweep, SweepStatus

RANKED_COLLECTION = "ranked_results"


class RankingPass:
    """Filters a completed sweep's sessions down to successes and ranks them.

    Ranking is computed at most once per sweep. Later runs return the stored
    results without calling the selector again, and every result is written
    under a (sweep_id, rank) key, so repeated runs never duplicate records.
    """

    def __init__(
        self,
        config: RankingConfig,
        sweeps: SweepRepository,
        store: RecordStore,
        selector: Selector,
        observer: RankingObserver,
    ) -> None:
        self._config = config
        self._sweeps = sweeps
        self._store = store
        self._selector = selector
        self._observer = observer

    async def run(self, sweep_id: str) -> RankingOutcome:
        """Rank the sweep's successful sessions.

        Raises:
            SweepNotFoundError: if the sweep does not exist.
            SweepNotCompletedError: if the sweep did not finish as completed.
            SelectionError: if the selector fails.
        """
        sweep = await self._sweeps.get(sweep_id)
        if sweep.status is not SweepStatus.COMPLETED:
            raise SweepNotCompletedError(sweep_id=sweep_id, status=sweep.status)

        if sweep.ranking_computed:
            return await self._stored_outcome(sweep=sweep)

        sessions = await self._load_completed_sessions(sweep=sweep)
        successful = [s for s in sessions if is_successful(s, self._config)]
        self._observer.ranking_started(
            sweep_id=sweep_id, considered=len(sessions), successful=len(successful)
        )

        if not successful:
            self._observer.ranking_no_successful_paths(
                sweep_id=sweep_id, considered=len(sessions)
            )
            await self._mark_computed(sweep=sweep, status=RankingStatus.NO_SUCCESSFUL_PATHS)
            return RankingOutcome(
                sweep_id=sweep_id,
                status=RankingStatus.NO_SUCCESSFUL_PATHS,
                candidates_considered=len(sessions),
                successful=0,
                results=[],
            )

        candidates = [
            to_candidate(index=i, session=s, excerpt_chars=self._config.excerpt_chars)
            for i, s in enumerate(successful)
        ]
        top_k = min(self._config.top_k, len(candidates))
        selections = await self._selector.select(
            sweep_id=sweep_id, candidates=candidates, top_k=top_k
        )

        results = [
            RankedResult(
                record_id=RankedResult.make_id(sweep_id, rank),
                sweep_id=sweep_id,
                session_id=candidate.session_id,
                rank=rank,
                rationale=selection.rationale,
                key_moment=selection.key_moment,
                composite_score=candidate.composite_score,
                winning_excerpt=candidate.winning_excerpt,
            )
            for rank, (selection, candidate) in enumerate(
                self._validate(
                    sweep_id=sweep_id,
                    selections=selections,
                    candidates=candidates,
                    top_k=top_k,
                ),
                start=1,
            )
        ]
        await self._clear_results(sweep_id=sweep_id)
        for result in results:
            await self._store.upsert(
                RANKED_COLLECTION, result.record_id, result.model_dump(mode="json")
            )

        await self._mark_computed(sweep=sweep, status=RankingStatus.RANKED)
        self._observer.ranking_completed(sweep_id=sweep_id, ranked_count=len(results))
        return RankingOutcome(
            sweep_id=sweep_id,
            status=RankingStatus.RANKED,
            candidates_considered=len(sessions),
            successful=len(successful),
            results=results,
        )

    def _validate(
        self,
        sweep_id: str,
        selections: list[Selection],
        candidates: list[RankingCandidate],
        top_k: int,
    ) -> list[tuple[Selection, RankingCandidate]]:
        """Keep selections with a valid index and rank, first claim wins.

        Survivors are returned in rank order; the caller renumbers them 1..n.
        """
        kept: list[tuple[Selection, RankingCandidate]] = []
        seen_ranks: set[int] = set()
        seen_indices: set[int] = set()
        for selection in sorted(selections, key=lambda s: s.rank):
            reason = None
            if not 0 <= selection.candidate_index < len(candidates):
                reason = f"candidate index {selection.candidate_index} out of range"
            elif not 1 <= selection.rank <= top_k:
                reason = f"rank {selection.rank} outside 1..{top_k}"
            elif selection.rank in seen_ranks:
                reason = f"duplicate rank {selection.rank}"
            elif selection.candidate_index in seen_indices:
                reason = f"candidate {selection.candidate_index} ranked twice"

            if reason is not None:
                self._observer.selection_discarded(sweep_id=sweep_id, reason=reason)
                continue
            seen_ranks.add(selection.rank)
            seen_indices.add(selection.candidate_index)
            kept.append((selection, candidates[selection.candidate_index]))
        return kept

    async def _load_completed_sessions(self, sweep: BatchSweep) -> list[Session]:
        records = await self._store.query(
            SESSIONS_COLLECTION,
            sweep_id=sweep.sweep_id,
            status=SessionStatus.COMPLETED.value,
        )
        sessions = [Session.model_validate(record) for record in records]
        slot_order = {session_id: i for i, session_id in enumerate(sweep.session_ids)}
        return sorted(sessions, key=lambda s: slot_order.get(s.session_id, len(slot_order)))

    async def _stored_outcome(self, sweep: BatchSweep) -> RankingOutcome:
        records = await self._store.query(RANKED_COLLECTION, sweep_id=sweep.sweep_id)
        results = sorted(
            (RankedResult.model_validate(record) for record in records),
            key=lambda r: r.rank,
        )
        self._observer.ranking_reused(sweep_id=sweep.sweep_id, ranked_count=len(results))
        return RankingOutcome(
            sweep_id=sweep.sweep_id,
            status=RankingStatus(sweep.ranking_outcome or RankingStatus.RANKED),
            candidates_considered=0,
            successful=len(results),
            results=results,
            reused=True,
        )

    async def _clear_results(self, sweep_id: str) -> None:
        """Drop ranked records left behind by an interrupted earlier run."""
        for record in await self._store.query(RANKED_COLLECTION, sweep_id=sweep_id):
            await self._store.delete(RANKED_COLLECTION, record["record_id"])

    async def _mark_computed(self, sweep: BatchSweep, status: RankingStatus) -> None:
        sweep.ranking_computed = True
        sweep.ranking_outcome = status
        await self._sweeps.save(sweep)
