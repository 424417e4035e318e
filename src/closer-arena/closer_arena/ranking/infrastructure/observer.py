"""Structlog implementation of the RankingObserver port."""

import structlog


class StructlogRankingObserver:
    """Delegates ranking events to structlog.

    Satisfies the RankingObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def ranking_started(self, sweep_id: str, considered: int, successful: int) -> None:
        self._log.info(
            "ranking.started",
            sweep_id=sweep_id,
            considered=considered,
            successful=successful,
        )

    def ranking_reused(self, sweep_id: str, ranked_count: int) -> None:
        self._log.info("ranking.reused", sweep_id=sweep_id, ranked_count=ranked_count)

    def ranking_no_successful_paths(self, sweep_id: str, considered: int) -> None:
        self._log.warning(
            "ranking.no_successful_paths", sweep_id=sweep_id, considered=considered
        )

    def selection_discarded(self, sweep_id: str, reason: str) -> None:
        self._log.warning("ranking.selection_discarded", sweep_id=sweep_id, reason=reason)

    def ranking_completed(self, sweep_id: str, ranked_count: int) -> None:
        self._log.info(
            "ranking.completed", sweep_id=sweep_id, ranked_count=ranked_count
        )
