"""BreakerCheck — the outcome of consulting the circuit breaker once."""

from enum import StrEnum

from pydantic import BaseModel, ConfigDict


class TripSource(StrEnum):
    LOCAL = "local"
    REMOTE = "remote"


class BreakerCheck(BaseModel):
    model_config = ConfigDict(frozen=True)

    tripped: bool
    source: TripSource | None = None
    reason: str | None = None
