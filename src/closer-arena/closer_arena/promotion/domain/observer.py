"""Observer port for promotion — defines events in domain language."""

from typing import Protocol


class PromotionObserver(Protocol):
    def tactic_promoted(self, session_id: str, source: str, priority: int) -> None: ...

    def tactic_skipped(self, session_id: str, reason: str) -> None: ...

    def instructions_written(self, path: str, tactic_count: int) -> None: ...
