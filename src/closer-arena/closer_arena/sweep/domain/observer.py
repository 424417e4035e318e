"""Observer port for the sweep domain — defines events in domain language."""

from typing import Protocol


class SweepObserver(Protocol):
    """Observer port emitting structured events during a batch sweep.

    Implementations may log to structlog, render progress, or record for tests.
    """

    def sweep_started(
        self, sweep_id: str, target_total: int, batch_size: int, num_groups: int
    ) -> None: ...

    def group_started(self, sweep_id: str, group_index: int, group_size: int) -> None: ...

    def slot_completed(self, sweep_id: str, slot: int, session_id: str) -> None: ...

    def slot_failed(
        self, sweep_id: str, slot: int, session_id: str, reason: str
    ) -> None: ...

    def group_completed(
        self,
        sweep_id: str,
        group_index: int,
        completed_count: int,
        target_total: int,
    ) -> None: ...

    def sweep_halted(self, sweep_id: str, halt_reason: str, detail: str) -> None: ...

    def sweep_finished(
        self,
        sweep_id: str,
        status: str,
        attempted: int,
        completed: int,
        failed: int,
        total_cost_usd: float,
        elapsed_seconds: float,
    ) -> None: ...
