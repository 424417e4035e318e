"""UsageMetrics value object — token usage from one generation call."""

from pydantic import BaseModel, ConfigDict, Field


class UsageMetrics(BaseModel):
    model_config = ConfigDict(frozen=True)

    input_tokens: int = Field(default=0, ge=0)
    output_tokens: int = Field(default=0, ge=0)
