"""Scoring model configuration."""

from pydantic import BaseModel, Field


class ScoringConfig(BaseModel, frozen=True):
    """The scoring model, and the cheaper model used while the budget is throttled."""

    model: str = "gpt-4o"
    throttled_model: str = "gpt-4o-mini"
    temperature: float = Field(default=0.3, ge=0.0, le=2.0)
