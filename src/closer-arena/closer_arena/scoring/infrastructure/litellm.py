"""LiteLLMScorer — scores a transcript with a structured LiteLLM call."""

import time

import litellm
from pydantic import ValidationError

from closer_arena.config.domain.scoring import ScoringConfig
from closer_arena.generation.infrastructure.usage import usage_from_response
from closer_arena.ledger.domain.pricing import PriceTable
from closer_arena.ledger.domain.recorder import SpendRecorder
from closer_arena.scoring.domain.evaluation import RawEvaluation
from closer_arena.scoring.domain.normalization import normalize_evaluation
from closer_arena.scoring.domain.observer import ScoringObserver
from closer_arena.scoring.domain.score import SessionScore

_SYSTEM_PROMPT = """\
You are the referee of a simulated negotiation between a CLOSER (a scripted \
acquisitions agent) and a PERSONA (a property seller). Read the transcript and \
score the CLOSER only.

## Metrics

- math_defense (0-10): did the closer defend the offer price with concrete \
numbers (repair costs, comparable sales, carrying costs) instead of conceding?
- humanity (0-10): did the closer sound like a warm, attentive human rather \
than a script? Penalize robotic repetition and ignoring the seller's feelings.
- success (0-10): how far did the conversation progress toward an agreement?
- margin_integrity (0-100): how much of the target margin survived the \
negotiation? 100 means no price concession at all.
- technical_assistance (0-10): how well the closer guided the seller through \
paperwork or signing steps, if any occurred.

## Outcome flags

- verbal_yes_to_price: true only if the seller explicitly agreed to the price.
- contract_signed: true only if the seller signed or committed to sign.
- document_status: "completed", "delivered", or null.
- price_variance_percent: how far the agreed price is above the target price, \
in percent (negative if below). null if no price was agreed.
- calculated_profit: the closer's implied profit in dollars, or null.
- winning_rebuttal: the single closer line that most moved the seller, verbatim.
- feedback: two or three sentences of coaching for the closer.

Respond with a JSON object containing exactly these fields.
"""


class LiteLLMScorer:
    """Scorer that asks an LLM referee for a RawEvaluation and normalizes it.

    The throttled model is used while the daily budget is throttled. Call
    spend is written to the ledger under a ``scoring:<session_id>`` attribution.

    Does NOT inherit from Scorer (structural typing via Protocol).
    """

    def __init__(
        self,
        config: ScoringConfig,
        spend: SpendRecorder,
        prices: PriceTable,
        observer: ScoringObserver,
    ) -> None:
        litellm.suppress_debug_info = True
        self._config = config
        self._spend = spend
        self._prices = prices
        self._observer = observer

    async def score(
        self, session_id: str, transcript: str, throttled: bool = False
    ) -> SessionScore:
        """Score one transcript. Returns SessionScore.failed() instead of raising
        when the call fails or its output cannot be parsed.

        Raises:
            StoreUnavailableError: if the call's spend cannot be recorded.
        """
        model = self._config.throttled_model if throttled else self._config.model
        self._observer.scoring_started(
            session_id=session_id, model=model, throttled=throttled
        )

        start = time.monotonic()
        try:
            response = await litellm.acompletion(
                model=model,
                temperature=self._config.temperature,
                response_format=RawEvaluation,
                messages=[
                    {"role": "system", "content": _SYSTEM_PROMPT},
                    {"role": "user", "content": f"## Transcript\n\n{transcript}"},
                ],
            )
        except Exception as exc:
            reason = str(exc)
            self._observer.scoring_failed(session_id=session_id, reason=reason)
            return SessionScore.failed(reason=reason)

        duration_ms = int((time.monotonic() - start) * 1000)

        usage = usage_from_response(response)
        cost = self._prices.cost(
            model=model,
            input_tokens=usage.input_tokens,
            output_tokens=usage.output_tokens,
        )
        await self._spend.record_spend(
            amount_usd=cost,
            attribution=f"scoring:{session_id}",
            model=model,
            input_tokens=usage.input_tokens,
            output_tokens=usage.output_tokens,
        )

        try:
            raw = RawEvaluation.model_validate_json(
                response.choices[0].message.content or ""
            )
        except (IndexError, AttributeError, ValidationError) as exc:
            reason = f"Failed to parse scoring response: {exc}"
            self._observer.scoring_failed(session_id=session_id, reason=reason)
            return SessionScore.failed(reason=reason)

        score = normalize_evaluation(raw)
        self._observer.scoring_completed(
            session_id=session_id,
            composite_score=score.composite_score,
            cost_usd=cost,
            duration_ms=duration_ms,
        )
        return score
