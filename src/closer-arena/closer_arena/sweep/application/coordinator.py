"""BatchSweepCoordinator — runs many sessions in sequential, concurrent groups."""

import asyncio
import time
import uuid
from collections.abc import Awaitable, Callable

from closer_arena.breaker.application.breaker import CircuitBreaker
from closer_arena.config.domain.sweep import SweepConfig
from closer_arena.core.clock import Clock, utc_now
from closer_arena.core.errors import ArenaError
from closer_arena.ledger.application.ledger import CostLedger
from closer_arena.notification.domain.notifier import Notifier
from closer_arena.session.application.orchestrator import SessionOrchestrator
from closer_arena.session.domain.session import Session
from closer_arena.sweep.application.repository import SweepRepository
from closer_arena.sweep.domain.errors import NoProfilesError
from closer_arena.sweep.domain.observer import SweepObserver
from closer_arena.sweep.domain.summary import SweepSummary
from closer_arena.sweep.domain.sweep import BatchSweep, HaltReason, SweepStatus

type Sleep = Callable[[float], Awaitable[None]]


class BatchSweepCoordinator:
    """Executes a BatchSweep group by group.

    Groups run one after another; the sessions inside a group run concurrently,
    so batch_size bounds parallelism. Budget admission and the circuit breaker
    are checked before each group launches, never mid-group: a halt stops new
    launches but lets in-flight sessions finish. A failing session becomes a
    None slot and never affects its siblings.
    """

    def __init__(
        self,
        config: SweepConfig,
        orchestrator: SessionOrchestrator,
        ledger: CostLedger,
        breaker: CircuitBreaker,
        sweeps: SweepRepository,
        notifier: Notifier,
        observer: SweepObserver,
        sleep: Sleep = asyncio.sleep,
        clock: Clock = utc_now,
    ) -> None:
        self._config = config
        self._orchestrator = orchestrator
        self._ledger = ledger
        self._breaker = breaker
        self._sweeps = sweeps
        self._notifier = notifier
        self._observer = observer
        self._sleep = sleep
        self._clock = clock

    async def create_sweep(
        self,
        profile_ids: list[str],
        target_total: int | None = None,
        batch_size: int | None = None,
    ) -> BatchSweep:
        """Persist a new pending sweep. Defaults come from the sweep config.

        Raises:
            NoProfilesError: if profile_ids is empty.
        """
        if not profile_ids:
            raise NoProfilesError()
        sweep = BatchSweep(
            sweep_id=str(uuid.uuid4()),
            profile_ids=profile_ids,
            target_total=target_total or self._config.total_sessions,
            batch_size=batch_size or self._config.batch_size,
            created_at=self._clock(),
        )
        await self._sweeps.add(sweep)
        return sweep

    async def run(self, sweep: BatchSweep) -> SweepSummary:
        """Run every group of a pending sweep and return the summary.

        The sweep ends completed when every group ran, failed when it was
        halted by budget, breaker or a store failure. Partial results are
        returned either way.

        Raises:
            InvalidSweepTransitionError: if the sweep is not pending.
        """
        started_at = time.monotonic()
        sweep.transition(SweepStatus.RUNNING)
        results: list[Session | None] = []
        attempted_ids: list[str] = []

        groups = sweep.groups()
        self._observer.sweep_started(
            sweep_id=sweep.sweep_id,
            target_total=sweep.target_total,
            batch_size=sweep.batch_size,
            num_groups=len(groups),
        )

        try:
            await self._sweeps.save(sweep)
            for group_index, slots in enumerate(groups):
                if group_index > 0:
                    await self._sleep(self._config.inter_batch_delay_seconds)

                halt = await self._admission_halt(sweep=sweep)
                if halt is not None:
                    sweep.halt_reason = halt
                    break

                session_ids = [str(uuid.uuid4()) for _ in slots]
                attempted_ids.extend(session_ids)
                results.extend(
                    await self._run_group(
                        sweep=sweep,
                        group_index=group_index,
                        slots=slots,
                        session_ids=session_ids,
                    )
                )
                sweep.advance(count=len(slots), session_ids=session_ids)
                await self._sweeps.save(sweep)
                self._observer.group_completed(
                    sweep_id=sweep.sweep_id,
                    group_index=group_index,
                    completed_count=sweep.completed_count,
                    target_total=sweep.target_total,
                )
        except ArenaError as exc:
            sweep.halt_reason = HaltReason.TOP_LEVEL_ERROR
            self._observer.sweep_halted(
                sweep_id=sweep.sweep_id,
                halt_reason=HaltReason.TOP_LEVEL_ERROR,
                detail=str(exc),
            )

        return await self._finish(
            sweep=sweep,
            results=results,
            attempted_ids=attempted_ids,
            started_at=started_at,
        )

    async def _admission_halt(self, sweep: BatchSweep) -> HaltReason | None:
        budget = await self._ledger.get_budget_state()
        if budget.is_exceeded:
            self._observer.sweep_halted(
                sweep_id=sweep.sweep_id,
                halt_reason=HaltReason.BUDGET_EXCEEDED,
                detail=(
                    f"spent ${budget.today_total_usd:.2f}"
                    f" of ${budget.daily_cap_usd:.2f} today"
                ),
            )
            return HaltReason.BUDGET_EXCEEDED

        check = await self._breaker.check()
        if check.tripped:
            self._observer.sweep_halted(
                sweep_id=sweep.sweep_id,
                halt_reason=HaltReason.BREAKER_TRIPPED,
                detail=f"{check.source}: {check.reason}",
            )
            return HaltReason.BREAKER_TRIPPED
        return None

    async def _run_group(
        self,
        sweep: BatchSweep,
        group_index: int,
        slots: range,
        session_ids: list[str],
    ) -> list[Session | None]:
        self._observer.group_started(
            sweep_id=sweep.sweep_id, group_index=group_index, group_size=len(slots)
        )
        outcomes = await asyncio.gather(
            *(
                self._orchestrator.run(
                    profile_id=sweep.profile_for_slot(slot),
                    sweep_id=sweep.sweep_id,
                    session_id=session_id,
                    temperature=self._config.temperature,
                )
                for slot, session_id in zip(slots, session_ids, strict=True)
            ),
            return_exceptions=True,
        )

        results: list[Session | None] = []
        for slot, session_id, outcome in zip(slots, session_ids, outcomes, strict=True):
            if isinstance(outcome, Session):
                self._observer.slot_completed(
                    sweep_id=sweep.sweep_id, slot=slot, session_id=session_id
                )
                results.append(outcome)
            elif isinstance(outcome, Exception):
                self._observer.slot_failed(
                    sweep_id=sweep.sweep_id,
                    slot=slot,
                    session_id=session_id,
                    reason=str(outcome),
                )
                results.append(None)
            else:
                # CancelledError and other BaseExceptions are not session failures.
                raise outcome
        return results

    async def _finish(
        self,
        sweep: BatchSweep,
        results: list[Session | None],
        attempted_ids: list[str],
        started_at: float,
    ) -> SweepSummary:
        final = SweepStatus.COMPLETED if sweep.halt_reason is None else SweepStatus.FAILED
        sweep.transition(final)

        total_cost = 0.0
        try:
            await self._sweeps.save(sweep)
            total_cost = await self._ledger.spend_by_attribution(
                [*attempted_ids, *(f"scoring:{sid}" for sid in attempted_ids)]
            )
        except ArenaError as exc:
            self._observer.sweep_halted(
                sweep_id=sweep.sweep_id,
                halt_reason=HaltReason.TOP_LEVEL_ERROR,
                detail=f"final bookkeeping failed: {exc}",
            )

        completed = sum(1 for session in results if session is not None)
        summary = SweepSummary(
            sweep_id=sweep.sweep_id,
            status=sweep.status,
            attempted=len(results),
            completed=completed,
            failed=len(results) - completed,
            total_cost_usd=total_cost,
            halt_reason=sweep.halt_reason,
            results=results,
        )

        if sweep.halt_reason is not None:
            await self._notifier.notify(_halt_message(summary=summary))

        self._observer.sweep_finished(
            sweep_id=sweep.sweep_id,
            status=summary.status,
            attempted=summary.attempted,
            completed=summary.completed,
            failed=summary.failed,
            total_cost_usd=summary.total_cost_usd,
            elapsed_seconds=time.monotonic() - started_at,
        )
        return summary


def _halt_message(summary: SweepSummary) -> str:
    average = summary.average_score
    average_text = f"{average:.1f}" if average is not None else "n/a"
    return (
        f"Sweep {summary.sweep_id} halted ({summary.halt_reason}):"
        f" {summary.completed}/{summary.attempted} sessions completed,"
        f" total cost ${summary.total_cost_usd:.2f}, average score {average_text}"
    )
