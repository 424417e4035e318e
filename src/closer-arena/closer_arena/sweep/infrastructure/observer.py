"""StructlogSweepObserver — production observer that delegates to structlog."""

import structlog


class StructlogSweepObserver:
    """Logs sweep domain events to structlog.

    Does NOT inherit from SweepObserver (structural typing via Protocol).
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def sweep_started(
        self, sweep_id: str, target_total: int, batch_size: int, num_groups: int
    ) -> None:
        self._log.info(
            "sweep.started",
            sweep_id=sweep_id,
            target_total=target_total,
            batch_size=batch_size,
            num_groups=num_groups,
        )

    def group_started(self, sweep_id: str, group_index: int, group_size: int) -> None:
        self._log.info(
            "sweep.group.started",
            sweep_id=sweep_id,
            group_index=group_index,
            group_size=group_size,
        )

    def slot_completed(self, sweep_id: str, slot: int, session_id: str) -> None:
        self._log.debug(
            "sweep.slot.completed", sweep_id=sweep_id, slot=slot, session_id=session_id
        )

    def slot_failed(
        self, sweep_id: str, slot: int, session_id: str, reason: str
    ) -> None:
        self._log.error(
            "sweep.slot.failed",
            sweep_id=sweep_id,
            slot=slot,
            session_id=session_id,
            reason=reason,
        )

    def group_completed(
        self,
        sweep_id: str,
        group_index: int,
        completed_count: int,
        target_total: int,
    ) -> None:
        self._log.info(
            "sweep.group.completed",
            sweep_id=sweep_id,
            group_index=group_index,
            completed_count=completed_count,
            target_total=target_total,
            percent=round(100.0 * completed_count / target_total, 1)
            if target_total
            else 0.0,
        )

    def sweep_halted(self, sweep_id: str, halt_reason: str, detail: str) -> None:
        self._log.warning(
            "sweep.halted", sweep_id=sweep_id, halt_reason=halt_reason, detail=detail
        )

    def sweep_finished(
        self,
        sweep_id: str,
        status: str,
        attempted: int,
        completed: int,
        failed: int,
        total_cost_usd: float,
        elapsed_seconds: float,
    ) -> None:
        self._log.info(
            "sweep.finished",
            sweep_id=sweep_id,
            status=status,
            attempted=attempted,
            completed=completed,
            failed=failed,
            total_cost_usd=round(total_cost_usd, 4),
            elapsed_seconds=round(elapsed_seconds, 2),
        )
