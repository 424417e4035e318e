"""Observer port for the ranking pass — defines events in domain language."""

from typing import Protocol


class RankingObserver(Protocol):
    def ranking_started(self, sweep_id: str, considered: int, successful: int) -> None: ...

    def ranking_reused(self, sweep_id: str, ranked_count: int) -> None: ...

    def ranking_no_successful_paths(self, sweep_id: str, considered: int) -> None: ...

    def selection_discarded(self, sweep_id: str, reason: str) -> None: ...

    def ranking_completed(self, sweep_id: str, ranked_count: int) -> None: ...
