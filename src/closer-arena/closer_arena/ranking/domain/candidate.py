"""RankingCandidate — a successful session offered to the selector."""

from pydantic import BaseModel, ConfigDict

from closer_arena.config.domain.ranking import RankingConfig
from closer_arena.session.domain.session import Session, SessionStatus


class RankingCandidate(BaseModel):
    model_config = ConfigDict(frozen=True)

    index: int
    session_id: str
    composite_score: float
    math_defense: float
    transcript_excerpt: str
    winning_excerpt: str | None


def is_successful(session: Session, config: RankingConfig) -> bool:
    """A session is a candidate only if it completed with a high enough score,
    the counter-agent verbally agreed to the price, and the price was defended.
    """
    score = session.score
    if session.status is not SessionStatus.COMPLETED or score is None:
        return False
    return (
        not score.scoring_failed
        and score.composite_score >= config.min_composite_score
        and score.verbal_yes_to_price
        and score.math_defense >= config.min_math_defense
    )


def to_candidate(index: int, session: Session, excerpt_chars: int) -> RankingCandidate:
    score = session.score
    if score is None:
        raise ValueError(f"session '{session.session_id}' has no score to rank")
    return RankingCandidate(
        index=index,
        session_id=session.session_id,
        composite_score=score.composite_score,
        math_defense=score.math_defense,
        transcript_excerpt=session.transcript()[:excerpt_chars],
        winning_excerpt=session.winning_excerpt,
    )
