"""Tactic — winning language promoted from a session into the base instructions."""

from datetime import datetime
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


class TacticSource(StrEnum):
    RANKED = "ranked"
    GOLDEN_SAMPLE = "golden_sample"


class Tactic(BaseModel):
    """One promoted excerpt. ``tactic_id`` is the source session id, so each
    session can be promoted at most once.
    """

    model_config = ConfigDict(frozen=True)

    tactic_id: str
    session_id: str
    text: str = Field(min_length=1)
    priority: int = Field(ge=0, le=10)
    source: TacticSource
    composite_score: float
    created_at: datetime
