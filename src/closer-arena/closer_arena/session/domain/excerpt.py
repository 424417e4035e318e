"""Choice of the excerpt that best represents why a session was won."""

from closer_arena.generation.domain.role import Role
from closer_arena.scoring.domain.score import SessionScore
from closer_arena.session.domain.session import Session

_FALLBACK_TURNS = 3


def select_winning_excerpt(
    session: Session, score: SessionScore | None, max_chars: int
) -> str | None:
    """Prefer the scorer's winning rebuttal; otherwise the last scripted turns.

    The fallback joins the final three scripted turns and truncates to
    max_chars with a trailing ellipsis.
    """
    if score is not None and score.winning_rebuttal:
        return score.winning_rebuttal

    scripted = [turn.text for turn in session.turns if turn.role is Role.SCRIPTED]
    if not scripted:
        return None
    excerpt = " ".join(scripted[-_FALLBACK_TURNS:])
    if len(excerpt) > max_chars:
        return excerpt[:max_chars] + "..."
    return excerpt
