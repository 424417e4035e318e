"""RawEvaluation — the scoring model's structured output, before normalization."""

from pydantic import BaseModel, ConfigDict


class RawEvaluation(BaseModel):
    """Exactly what the scoring model returned.

    Every field is optional and unbounded: models omit fields and drift out of
    range. Nothing downstream reads this type directly; it is always passed
    through normalize_evaluation() first.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    math_defense: float | None = None
    humanity: float | None = None
    success: float | None = None
    margin_integrity: float | None = None
    technical_assistance: float | None = None
    verbal_yes_to_price: bool | None = None
    contract_signed: bool | None = None
    document_status: str | None = None
    price_variance_percent: float | None = None
    calculated_profit: float | None = None
    winning_rebuttal: str | None = None
    feedback: str | None = None
