"""ProgressSweepObserver — renders a Rich progress bar for a sweep on stderr."""

from __future__ import annotations

from rich.console import Console
from rich.progress import (
    Progress,
    ProgressColumn,
    Task,
    TaskID,
    TextColumn,
    TimeElapsedColumn,
)
from rich.text import Text


class _CountsColumn(ProgressColumn):
    """Renders ok+failed+inflight/total with colors matching the bar segments."""

    def render(self, task: Task) -> Text:
        return Text.assemble(
            (str(int(task.fields.get("ok", 0))), "bright_green"),
            ("+", "dim white"),
            (str(int(task.fields.get("failed", 0))), "red"),
            ("+", "dim white"),
            (str(int(task.fields.get("inflight", 0))), "grey50"),
            ("/", "dim white"),
            (str(int(task.total or 0)), "default"),
        )


class _SegmentBarColumn(ProgressColumn):
    """Four segments: completed, failed, in-flight, not yet launched."""

    def __init__(self, bar_width: int = 40) -> None:
        super().__init__()
        self.bar_width = bar_width

    def render(self, task: Task) -> Text:
        total = task.total or 0
        widths = [0, 0, 0]
        if total > 0:
            remaining_width = self.bar_width
            for i, key in enumerate(("ok", "failed", "inflight")):
                cells = min(
                    int(int(task.fields.get(key, 0)) / total * self.bar_width),
                    remaining_width,
                )
                widths[i] = cells
                remaining_width -= cells
        ok_cells, failed_cells, inflight_cells = widths
        rest = self.bar_width - ok_cells - failed_cells - inflight_cells

        result = Text()
        result.append("█" * ok_cells, style="bright_green")
        result.append("█" * failed_cells, style="red")
        result.append("▒" * inflight_cells, style="grey50")
        result.append("░" * rest, style="dim white")
        return result


class ProgressSweepObserver:
    """Shows one progress row for the running sweep.

    Only sweep_started, group_started, slot_completed, slot_failed, sweep_halted
    and sweep_finished change the display; all other events are no-ops.

    Pass ``disabled=True`` to suppress all terminal output (useful in tests).

    Does NOT inherit from SweepObserver (structural typing via Protocol).
    """

    def __init__(self, disabled: bool = False) -> None:
        self._disabled = disabled
        self._progress: Progress | None = None
        self._task_id: TaskID | None = None
        self.ok = 0
        self.failed = 0
        self.inflight = 0

    def _refresh(self, description: str | None = None) -> None:
        if self._progress is None or self._task_id is None:
            return
        fields: dict[str, object] = {
            "ok": self.ok,
            "failed": self.failed,
            "inflight": self.inflight,
        }
        if description is not None:
            fields["description"] = description
        self._progress.update(
            self._task_id, completed=self.ok + self.failed, **fields
        )

    def sweep_started(
        self, sweep_id: str, target_total: int, batch_size: int, num_groups: int
    ) -> None:
        self.ok = 0
        self.failed = 0
        self.inflight = 0
        if self._disabled:
            return
        self._progress = Progress(
            TextColumn("{task.description}"),
            _SegmentBarColumn(bar_width=40),
            _CountsColumn(),
            TimeElapsedColumn(),
            console=Console(stderr=True),
            refresh_per_second=10,
            transient=False,
        )
        self._task_id = self._progress.add_task(
            description=f"[bold]sweep {sweep_id[:8]}[/bold]",
            total=float(target_total),
            ok=0,
            failed=0,
            inflight=0,
        )
        self._progress.start()

    def group_started(self, sweep_id: str, group_index: int, group_size: int) -> None:
        self.inflight += group_size
        self._refresh()

    def slot_completed(self, sweep_id: str, slot: int, session_id: str) -> None:
        self.inflight = max(0, self.inflight - 1)
        self.ok += 1
        self._refresh()

    def slot_failed(
        self, sweep_id: str, slot: int, session_id: str, reason: str
    ) -> None:
        self.inflight = max(0, self.inflight - 1)
        self.failed += 1
        self._refresh()

    def group_completed(
        self,
        sweep_id: str,
        group_index: int,
        completed_count: int,
        target_total: int,
    ) -> None:
        pass

    def sweep_halted(self, sweep_id: str, halt_reason: str, detail: str) -> None:
        self._refresh(description=f"[red]sweep {sweep_id[:8]} halted[/red]")

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
        if self._progress is not None:
            self._progress.stop()
        self._progress = None
        self._task_id = None
