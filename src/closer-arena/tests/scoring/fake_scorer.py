"""FakeScorer — returns a canned SessionScore for use in tests."""

from dataclasses import dataclass

from closer_arena.scoring.domain.evaluation import RawEvaluation
from closer_arena.scoring.domain.normalization import normalize_evaluation
from closer_arena.scoring.domain.score import SessionScore


def make_score(
    math_defense: float = 9.0,
    humanity: float = 8.0,
    success: float = 9.0,
    margin_integrity: float = 90.0,
    verbal_yes_to_price: bool = True,
    document_status: str | None = "completed",
    price_variance_percent: float | None = 0.0,
    winning_rebuttal: str | None = "The repairs alone run $40k, so this is the number.",
) -> SessionScore:
    """Normalize a raw evaluation; the defaults clear every ranking threshold."""
    return normalize_evaluation(
        RawEvaluation(
            math_defense=math_defense,
            humanity=humanity,
            success=success,
            margin_integrity=margin_integrity,
            verbal_yes_to_price=verbal_yes_to_price,
            document_status=document_status,
            price_variance_percent=price_variance_percent,
            winning_rebuttal=winning_rebuttal,
            feedback="Solid close.",
        )
    )


@dataclass(frozen=True)
class ScoreCall:
    session_id: str
    transcript: str
    throttled: bool


class FakeScorer:
    """Satisfies the Scorer protocol.

    ``scores`` maps a session id to the score it receives; every other session
    gets ``default``.
    """

    def __init__(
        self,
        default: SessionScore | None = None,
        scores: dict[str, SessionScore] | None = None,
    ) -> None:
        self._default = default if default is not None else make_score()
        self._scores = scores if scores is not None else {}
        self._calls: list[ScoreCall] = []

    @property
    def calls(self) -> list[ScoreCall]:
        return self._calls

    async def score(
        self, session_id: str, transcript: str, throttled: bool = False
    ) -> SessionScore:
        self._calls.append(
            ScoreCall(session_id=session_id, transcript=transcript, throttled=throttled)
        )
        return self._scores.get(session_id, self._default)
