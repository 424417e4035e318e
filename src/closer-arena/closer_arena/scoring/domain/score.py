"""SessionScore — the fully populated, normalized result of scoring one session."""

from pydantic import BaseModel, ConfigDict, Field


class SessionScore(BaseModel):
    """Immutable normalized score. Every field has a value; nothing is optional
    except the free-text fields and values the scoring model may legitimately
    not know (document status, price variance, profit).
    """

    model_config = ConfigDict(frozen=True)

    math_defense: float = Field(ge=0.0, le=10.0)
    humanity: float = Field(ge=0.0, le=10.0)
    success: float = Field(ge=0.0, le=10.0)
    margin_integrity: float = Field(ge=0.0, le=100.0)
    technical_assistance: float = Field(ge=0.0, le=10.0)
    base_score: float = Field(ge=0.0, le=100.0)
    adjustment: float
    composite_score: float = Field(ge=0.0, le=100.0)
    verbal_yes_to_price: bool
    contract_signed: bool
    document_status: str | None
    price_variance_percent: float | None
    calculated_profit: float | None
    success_validated: bool
    winning_rebuttal: str | None
    feedback: str
    scoring_failed: bool = False

    @classmethod
    def failed(cls, reason: str) -> "SessionScore":
        """The zero score recorded when the scoring call itself fails."""
        return cls(
            math_defense=0.0,
            humanity=0.0,
            success=0.0,
            margin_integrity=0.0,
            technical_assistance=0.0,
            base_score=0.0,
            adjustment=0.0,
            composite_score=0.0,
            verbal_yes_to_price=False,
            contract_signed=False,
            document_status=None,
            price_variance_percent=None,
            calculated_profit=None,
            success_validated=False,
            winning_rebuttal=None,
            feedback=f"Scoring failed: {reason}",
            scoring_failed=True,
        )
