"""Promotion of winning sessions into tactics."""

from pydantic import BaseModel, Field


class PromotionConfig(BaseModel, frozen=True):
    golden_sample_threshold: float = Field(default=95.0, ge=0.0, le=100.0)
    golden_sample_priority: int = Field(default=8, ge=0, le=10)
    excerpt_chars: int = Field(default=500, ge=1)
