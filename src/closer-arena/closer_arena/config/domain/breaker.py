"""Circuit breaker configuration."""

from pydantic import BaseModel, Field


class BreakerConfig(BaseModel, frozen=True):
    """Remote kill-switch endpoint. When status_url is unset only the local flag applies."""

    status_url: str | None = None
    timeout_seconds: float = Field(default=2.0, gt=0.0)
