"""GenerationResult value object — the outcome of a single generation call."""

from pydantic import BaseModel, ConfigDict

from closer_arena.generation.domain.usage import UsageMetrics


class GenerationResult(BaseModel):
    """Immutable value object capturing the reply text and its metered usage."""

    model_config = ConfigDict(frozen=True)

    text: str
    model: str
    usage: UsageMetrics
    duration_ms: int
