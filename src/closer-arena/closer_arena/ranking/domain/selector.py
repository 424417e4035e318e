"""Selector Protocol — picks and orders the best of the successful sessions."""

from typing import Protocol

from closer_arena.ranking.domain.candidate import RankingCandidate
from closer_arena.ranking.domain.selection import Selection


class Selector(Protocol):
    async def select(
        self, sweep_id: str, candidates: list[RankingCandidate], top_k: int
    ) -> list[Selection]:
        """Return up to top_k selections. Raises SelectionError on failure.

        Output is not trusted: the ranking pass discards out-of-range indices
        and duplicate ranks.
        """
        ...
