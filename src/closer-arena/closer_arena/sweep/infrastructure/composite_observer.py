"""CompositeSweepObserver — fans out all events to a list of observers."""

from closer_arena.sweep.domain.observer import SweepObserver


class CompositeSweepObserver:
    """Delegates every observer event to each observer in order.

    Does NOT inherit from SweepObserver (structural typing via Protocol).
    """

    def __init__(self, observers: list[SweepObserver]) -> None:
        self._observers = observers

    def sweep_started(
        self, sweep_id: str, target_total: int, batch_size: int, num_groups: int
    ) -> None:
        for obs in self._observers:
            obs.sweep_started(
                sweep_id=sweep_id,
                target_total=target_total,
                batch_size=batch_size,
                num_groups=num_groups,
            )

    def group_started(self, sweep_id: str, group_index: int, group_size: int) -> None:
        for obs in self._observers:
            obs.group_started(
                sweep_id=sweep_id, group_index=group_index, group_size=group_size
            )

    def slot_completed(self, sweep_id: str, slot: int, session_id: str) -> None:
        for obs in self._observers:
            obs.slot_completed(sweep_id=sweep_id, slot=slot, session_id=session_id)

    def slot_failed(
        self, sweep_id: str, slot: int, session_id: str, reason: str
    ) -> None:
        for obs in self._observers:
            obs.slot_failed(
                sweep_id=sweep_id, slot=slot, session_id=session_id, reason=reason
            )

    def group_completed(
        self,
        sweep_id: str,
        group_index: int,
        completed_count: int,
        target_total: int,
    ) -> None:
        for obs in self._observers:
            obs.group_completed(
                sweep_id=sweep_id,
                group_index=group_index,
                completed_count=completed_count,
                target_total=target_total,
            )

    def sweep_halted(self, sweep_id: str, halt_reason: str, detail: str) -> None:
        for obs in self._observers:
            obs.sweep_halted(sweep_id=sweep_id, halt_reason=halt_reason, detail=detail)

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
        for obs in self._observers:
            obs.sweep_finished(
                sweep_id=sweep_id,
                status=status,
                attempted=attempted,
                completed=completed,
                failed=failed,
                total_cost_usd=total_cost_usd,
                elapsed_seconds=elapsed_seconds,
            )
