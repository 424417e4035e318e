"""Single normalization pass from RawEvaluation to SessionScore.

Composite = four equal quarters, each worth 25 points:

    math_defense * 2.5 + humanity * 2.5 + success * 2.5 + margin_integrity / 4

then a price-variance adjustment when a contract was signed, then clamped to
[0, 100]. Missing sub-scores count as 0 (no credit). Missing flags count as
False.
"""

from closer_arena.scoring.domain.evaluation import RawEvaluation
from closer_arena.scoring.domain.score import SessionScore

PROFIT_PROTECTOR_BONUS = 10.0

# (max variance percent, penalty) in ascending order; anything above the last
# bound takes _MAX_VARIANCE_PENALTY.
_VARIANCE_PENALTY_TIERS: tuple[tuple[float, float], ...] = (
    (5.0, -5.0),
    (10.0, -10.0),
    (15.0, -15.0),
)
_MAX_VARIANCE_PENALTY = -20.0

_COMPLETED_DOCUMENT_STATUS = "completed"


def clamp(value: float | None, low: float, high: float, default: float = 0.0) -> float:
    if value is None:
        return default
    return max(low, min(high, float(value)))


def price_variance_adjustment(
    contract_signed: bool, price_variance_percent: float | None
) -> float:
    """Bonus for closing at or under the target price, tiered penalty above it.

    Only a signed contract is adjusted. An unknown variance earns nothing.
    """
    if not contract_signed or price_variance_percent is None:
        return 0.0
    if price_variance_percent <= 0:
        return PROFIT_PROTECTOR_BONUS
    for bound, penalty in _VARIANCE_PENALTY_TIERS:
        if price_variance_percent <= bound:
            return penalty
    return _MAX_VARIANCE_PENALTY


def normalize_evaluation(raw: RawEvaluation) -> SessionScore:
    math_defense = clamp(raw.math_defense, 0.0, 10.0)
    humanity = clamp(raw.humanity, 0.0, 10.0)
    success = clamp(raw.success, 0.0, 10.0)
    margin_integrity = clamp(raw.margin_integrity, 0.0, 100.0)
    technical_assistance = clamp(raw.technical_assistance, 0.0, 10.0)

    base_score = (
        math_defense * 2.5 + humanity * 2.5 + success * 2.5 + margin_integrity / 4
    )

    document_status = raw.document_status.strip().lower() if raw.document_status else None
    verbal_yes = bool(raw.verbal_yes_to_price)
    contract_signed = (
        raw.contract_signed
        if raw.contract_signed is not None
        else document_status == _COMPLETED_DOCUMENT_STATUS
    )

    adjustment = price_variance_adjustment(
        contract_signed=contract_signed,
        price_variance_percent=raw.price_variance_percent,
    )
    composite = round(clamp(base_score + adjustment, 0.0, 100.0), 2)

    return SessionScore(
        math_defense=math_defense,
        humanity=humanity,
        success=success,
        margin_integrity=margin_integrity,
        technical_assistance=technical_assistance,
        base_score=round(base_score, 2),
        adjustment=adjustment,
        composite_score=composite,
        verbal_yes_to_price=verbal_yes,
        contract_signed=contract_signed,
        document_status=document_status,
        price_variance_percent=raw.price_variance_percent,
        calculated_profit=raw.calculated_profit,
        success_validated=verbal_yes and document_status == _COMPLETED_DOCUMENT_STATUS,
        winning_rebuttal=(raw.winning_rebuttal or "").strip() or None,
        feedback=(raw.feedback or "").strip(),
    )
