"""SessionOrchestrator — runs one paired-agent session from first turn to score."""

import uuid

from closer_arena.breaker.application.breaker import CircuitBreaker
from closer_arena.breaker.domain.errors import BreakerTrippedError
from closer_arena.config.domain.session import SessionConfig
from closer_arena.core.clock import Clock, utc_now
from closer_arena.core.errors import ArenaError
from closer_arena.generation.domain.role import Role
from closer_arena.ledger.application.ledger import CostLedger
from closer_arena.ledger.domain.errors import BudgetExceededError
from closer_arena.ledger.domain.pricing import PriceTable
from closer_arena.notification.domain.notifier import Notifier
from closer_arena.scoring.domain.scorer import Scorer
from closer_arena.session.application.participants import ParticipantFactory
from closer_arena.session.domain.auditor import NullTranscriptAuditor, TranscriptAuditor
from closer_arena.session.domain.errors import (
    SessionKillThresholdError,
    SessionTurnError,
)
from closer_arena.session.domain.excerpt import select_winning_excerpt
from closer_arena.session.domain.observer import SessionObserver
from closer_arena.session.domain.participant import Participant
from closer_arena.session.domain.session import Session, SessionStatus
from closer_arena.store.domain.store import RecordStore

SESSIONS_COLLECTION = "sessions"


class SessionOrchestrator:
    """Drives a single session through its turn loop.

    The scripted role speaks first and the roles strictly alternate, each turn
    seeing only its own system instruction and the other side's latest turn.
    Every turn's spend is written to the ledger before the turn is accepted,
    and a session whose own spend reaches the kill threshold is aborted on the
    spot. Generation failures are never retried.

    Each session is persisted exactly once, when it reaches a terminal status.
    """

    def __init__(
        self,
        config: SessionConfig,
        participants: ParticipantFactory,
        prices: PriceTable,
        ledger: CostLedger,
        breaker: CircuitBreaker,
        scorer: Scorer,
        store: RecordStore,
        notifier: Notifier,
        observer: SessionObserver,
        auditor: TranscriptAuditor | None = None,
        excerpt_chars: int = 500,
        clock: Clock = utc_now,
    ) -> None:
        self._config = config
        self._participants = participants
        self._prices = prices
        self._ledger = ledger
        self._breaker = breaker
        self._scorer = scorer
        self._store = store
        self._notifier = notifier
        self._observer = observer
        self._auditor = auditor if auditor is not None else NullTranscriptAuditor()
        self._excerpt_chars = excerpt_chars
        self._clock = clock

    async def run(
        self,
        profile_id: str,
        sweep_id: str | None = None,
        session_id: str | None = None,
        temperature: float | None = None,
    ) -> Session:
        """Run one session to a terminal status and return it.

        Raises:
            BudgetExceededError: if today's budget is already spent. No session
                is created.
            ProfileNotFoundError: if the counter-agent profile does not exist.
                No session is created.
            BreakerTrippedError: if the breaker is tripped before the first turn.
                The session is persisted as aborted_budget.
            SessionKillThresholdError: if the session's own spend reaches the
                kill threshold. The session is persisted as aborted_budget.
            SessionTurnError: if a turn cannot be generated or priced. The
                session is persisted as aborted_error.
            StoreUnavailableError: if spend or the session cannot be persisted.
        """
        budget = await self._ledger.get_budget_state()
        if budget.is_exceeded:
            raise BudgetExceededError(
                today_total_usd=budget.today_total_usd,
                daily_cap_usd=budget.daily_cap_usd,
            )

        participants = self._participants.create(
            profile_id=profile_id, temperature=temperature
        )
        session = Session(
            session_id=session_id or str(uuid.uuid4()),
            profile_id=profile_id,
            sweep_id=sweep_id,
            max_turns=self._config.max_turns,
        )

        check = await self._breaker.check()
        if check.tripped:
            await self._abort(
                session=session,
                status=SessionStatus.ABORTED_BUDGET,
                reason=f"circuit breaker tripped ({check.source})",
            )
            raise BreakerTrippedError(source=check.source, reason=check.reason)

        session.start(now=self._clock())
        self._observer.session_started(
            session_id=session.session_id, profile_id=profile_id, sweep_id=sweep_id
        )

        role = Role.SCRIPTED
        for turn_index in range(self._config.max_turns):
            await self._play_turn(
                session=session,
                participant_role=role,
                participants=participants,
                turn_index=turn_index,
            )
            role = role.opposite()

        return await self._complete(session=session)

    async def _play_turn(
        self,
        session: Session,
        participant_role: Role,
        participants: dict[Role, Participant],
        turn_index: int,
    ) -> None:
        participant = participants[participant_role]
        last_opposing = session.last_turn_of(participant_role.opposite())

        try:
            result = await participant.next_turn(
                last_opposing.text if last_opposing is not None else None
            )
            cost = self._prices.cost(
                model=result.model,
                input_tokens=result.usage.input_tokens,
                output_tokens=result.usage.output_tokens,
            )
        except Exception as exc:
            await self._abort(
                session=session, status=SessionStatus.ABORTED_ERROR, reason=str(exc)
            )
            raise SessionTurnError(
                session_id=session.session_id, turn_index=turn_index, reason=str(exc)
            ) from exc

        await self._ledger.record_spend(
            amount_usd=cost,
            attribution=session.session_id,
            model=result.model,
            input_tokens=result.usage.input_tokens,
            output_tokens=result.usage.output_tokens,
        )
        session.add_cost(
            amount_usd=cost,
            input_tokens=result.usage.input_tokens,
            output_tokens=result.usage.output_tokens,
        )

        if session.cost_usd >= self._config.kill_threshold_usd:
            await self._kill(session=session, turn_index=turn_index)

        session.append_turn(role=participant_role, text=result.text, cost_usd=cost)
        self._observer.turn_completed(
            session_id=session.session_id,
            turn_index=turn_index,
            role=participant_role,
            turn_cost_usd=cost,
            session_cost_usd=session.cost_usd,
        )

    async def _kill(self, session: Session, turn_index: int) -> None:
        threshold = self._config.kill_threshold_usd
        reason = (
            f"session cost ${session.cost_usd:.4f} reached kill threshold"
            f" ${threshold:.2f} at turn {turn_index}"
        )
        if self._config.trip_breaker_on_kill:
            self._breaker.trip(reason=f"session {session.session_id}: {reason}")
        await self._abort(
            session=session, status=SessionStatus.ABORTED_BUDGET, reason=reason
        )
        await self._notifier.notify(
            f"Kill threshold hit: session {session.session_id} ({reason})"
        )
        raise SessionKillThresholdError(
            session_id=session.session_id,
            turn_index=turn_index,
            cost_usd=session.cost_usd,
            threshold_usd=threshold,
        )

    async def _complete(self, session: Session) -> Session:
        throttled = (await self._ledger.get_budget_state()).is_throttled
        score = await self._scorer.score(
            session_id=session.session_id,
            transcript=session.transcript(),
            throttled=throttled,
        )
        session.finalize(
            status=SessionStatus.COMPLETED,
            now=self._clock(),
            score=score,
            winning_excerpt=select_winning_excerpt(
                session=session, score=score, max_chars=self._excerpt_chars
            ),
        )
        await self._store.create(
            SESSIONS_COLLECTION, session.session_id, session.to_record()
        )
        self._observer.session_completed(
            session_id=session.session_id,
            composite_score=score.composite_score,
            cost_usd=session.cost_usd,
            num_turns=len(session.turns),
        )

        if (
            not throttled
            and not score.scoring_failed
            and score.composite_score > self._config.audit_score_threshold
        ):
            try:
                await self._auditor.audit(session)
            except ArenaError as exc:
                self._observer.audit_failed(session_id=session.session_id, reason=str(exc))

        return session

    async def _abort(self, session: Session, status: SessionStatus, reason: str) -> None:
        session.finalize(status=status, now=self._clock(), abort_reason=reason)
        await self._store.create(
            SESSIONS_COLLECTION, session.session_id, session.to_record()
        )
        self._observer.session_aborted(
            session_id=session.session_id,
            status=status,
            reason=reason,
            cost_usd=session.cost_usd,
            num_turns=len(session.turns),
        )
