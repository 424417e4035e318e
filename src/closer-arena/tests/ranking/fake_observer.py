"""FakeRankingObserver — records ranking events for assertion in tests."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RankingStartedEvent:
    sweep_id: str
    considered: int
    successful: int


@dataclass(frozen=True)
class RankingCountEvent:
    sweep_id: str
    count: int


@dataclass(frozen=True)
class SelectionDiscardedEvent:
    sweep_id: str
    reason: str


class FakeRankingObserver:
    """Records all emitted ranking events as typed frozen dataclasses."""

    def __init__(self) -> None:
        self._started: list[RankingStartedEvent] = []
        self._reused: list[RankingCountEvent] = []
        self._no_successful_paths: list[RankingCountEvent] = []
        self._discarded: list[SelectionDiscardedEvent] = []
        self._completed: list[RankingCountEvent] = []

    @property
    def started(self) -> list[RankingStartedEvent]:
        return self._started

    @property
    def reused(self) -> list[RankingCountEvent]:
        return self._reused

    @property
    def no_successful_paths(self) -> list[RankingCountEvent]:
        return self._no_successful_paths

    @property
    def discarded(self) -> list[SelectionDiscardedEvent]:
        return self._discarded

    @property
    def completed(self) -> list[RankingCountEvent]:
        return self._completed

    def ranking_started(self, sweep_id: str, considered: int, successful: int) -> None:
        self._started.append(
            RankingStartedEvent(
                sweep_id=sweep_id, considered=considered, successful=successful
            )
        )

    def ranking_reused(self, sweep_id: str, ranked_count: int) -> None:
        self._reused.append(RankingCountEvent(sweep_id=sweep_id, count=ranked_count))

    def ranking_no_successful_paths(self, sweep_id: str, considered: int) -> None:
        self._no_successful_paths.append(
            RankingCountEvent(sweep_id=sweep_id, count=considered)
        )

    def selection_discarded(self, sweep_id: str, reason: str) -> None:
        self._discarded.append(SelectionDiscardedEvent(sweep_id=sweep_id, reason=reason))

    def ranking_completed(self, sweep_id: str, ranked_count: int) -> None:
        self._completed.append(RankingCountEvent(sweep_id=sweep_id, count=ranked_count))
