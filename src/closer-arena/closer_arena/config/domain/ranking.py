"""Ranking pass configuration."""

from pydantic import BaseModel, Field


class RankingConfig(BaseModel, frozen=True):
    """Success thresholds and the model that picks the top-K successful sessions."""

    model: str = "gpt-4o"
    temperature: float = Field(default=0.3, ge=0.0, le=2.0)
    top_k: int = Field(default=3, ge=1)
    min_composite_score: float = Field(default=70.0, ge=0.0, le=100.0)
    min_math_defense: float = Field(default=8.0, ge=0.0, le=10.0)
    excerpt_chars: int = Field(default=1000, ge=1)
