"""Batch sweep defaults."""

from pydantic import BaseModel, Field


class SweepConfig(BaseModel, frozen=True):
    total_sessions: int = Field(default=50, ge=1)
    batch_size: int = Field(default=10, ge=1)
    inter_batch_delay_seconds: float = Field(default=1.0, ge=0.0)
    temperature: float = Field(default=0.8, ge=0.0, le=2.0)
