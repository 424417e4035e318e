"""Per-model token pricing configuration."""

from pydantic import BaseModel, Field


class ModelPrice(BaseModel, frozen=True):
    """USD price per one million tokens for a single model."""

    input_per_million_usd: float = Field(ge=0.0)
    output_per_million_usd: float = Field(ge=0.0)


def _default_models() -> dict[str, ModelPrice]:
    return {
        "gpt-4o": ModelPrice(input_per_million_usd=2.5, output_per_million_usd=10.0),
        "gpt-4o-mini": ModelPrice(
            input_per_million_usd=0.15, output_per_million_usd=0.6
        ),
    }


class PricingConfig(BaseModel, frozen=True):
    models: dict[str, ModelPrice] = Field(default_factory=_default_models)
