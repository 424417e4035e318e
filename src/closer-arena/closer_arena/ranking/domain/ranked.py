"""RankedResult and RankingOutcome — what the ranking pass produces."""

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


class RankedResult(BaseModel):
    """One ranked winning session. Keyed by (sweep_id, rank)."""

    model_config = ConfigDict(frozen=True)

    record_id: str
    sweep_id: str
    session_id: str
    rank: int = Field(ge=1)
    rationale: str
    key_moment: str
    composite_score: float
    winning_excerpt: str | None

    @staticmethod
    def make_id(sweep_id: str, rank: int) -> str:
        return f"{sweep_id}:{rank}"


class RankingStatus(StrEnum):
    RANKED = "ranked"
    NO_SUCCESSFUL_PATHS = "no_successful_paths"


class RankingOutcome(BaseModel):
    model_config = ConfigDict(frozen=True)

    sweep_id: str
    status: RankingStatus
    candidates_considered: int
    successful: int
    results: list[RankedResult]
    reused: bool = False
