"""Per-session limits."""

from pydantic import BaseModel, Field


class SessionConfig(BaseModel, frozen=True):
    """Limits applied to every session.

    kill_threshold_usd is inclusive: a session whose accumulated spend reaches
    the threshold exactly is killed on that turn.
    """

    max_turns: int = Field(default=15, ge=1)
    kill_threshold_usd: float = Field(default=5.0, gt=0.0)
    trip_breaker_on_kill: bool = True
    audit_score_threshold: float = Field(default=70.0, ge=0.0, le=100.0)
