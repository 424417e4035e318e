"""Selection — the selector's verdict on one candidate."""

from pydantic import BaseModel, ConfigDict, Field


class Selection(BaseModel):
    model_config = ConfigDict(frozen=True)

    candidate_index: int
    rank: int
    rationale: str = ""
    key_moment: str = ""


class SelectionResponse(BaseModel):
    """Structured output requested from the ranking model."""

    model_config = ConfigDict(frozen=True)

    selections: list[Selection] = Field(default_factory=list)
