"""Scorer Protocol — turns a finished transcript into a SessionScore."""

from typing import Protocol

from closer_arena.scoring.domain.score import SessionScore


class Scorer(Protocol):
    """Scores a completed session.

    Implementations never raise for model or parsing failures; they return
    SessionScore.failed() instead, so a scoring problem cannot abort a session
    that has already finished its turns.
    """

    async def score(
        self, session_id: str, transcript: str, throttled: bool = False
    ) -> SessionScore: ...
