"""LiteLLMSelector — asks an LLM to pick the top-K breakthrough sessions."""

import time

import litellm
from pydantic import ValidationError

from closer_arena.config.domain.ranking import RankingConfig
from closer_arena.generation.infrastructure.usage import usage_from_response
from closer_arena.ledger.domain.pricing import PriceTable
from closer_arena.ledger.domain.recorder import SpendRecorder
from closer_arena.ranking.domain.candidate import RankingCandidate
from closer_arena.ranking.domain.errors import SelectionError
from closer_arena.ranking.domain.selection import Selection, SelectionResponse

_SYSTEM_PROMPT = """\
You review successful negotiation sessions in which a CLOSER persuaded a \
seller to accept a price without giving up margin. Pick the sessions whose \
technique is most worth teaching, and rank them best first.

For each pick, give:
- candidate_index: the index shown in the candidate header
- rank: 1 for the best, counting up without gaps
- rationale: the breakthrough insight that made the session work
- key_moment: the exchange where the seller's resistance turned

Respond with a JSON object: {"selections": [...]}.
"""


class LiteLLMSelector:
    """Selector backed by a structured LiteLLM call.

    Call spend is written to the ledger under ``ranking:<sweep_id>``.

    Does NOT inherit from Selector (structural typing via Protocol).
    """

    def __init__(
        self,
        config: RankingConfig,
        spend: SpendRecorder,
        prices: PriceTable,
    ) -> None:
        litellm.suppress_debug_info = True
        self._config = config
        self._spend = spend
        self._prices = prices

    async def select(
        self, sweep_id: str, candidates: list[RankingCandidate], top_k: int
    ) -> list[Selection]:
        """Ask the ranking model for up to top_k selections and record its spend.

        Raises:
            SelectionError: if the call fails or the response cannot be parsed.
        """
        start = time.monotonic()
        try:
            response = await litellm.acompletion(
                model=self._config.model,
                temperature=self._config.temperature,
                response_format=SelectionResponse,
                messages=[
                    {"role": "system", "content": _SYSTEM_PROMPT},
                    {"role": "user", "content": _render_candidates(candidates, top_k)},
                ],
            )
        except Exception as exc:
            raise SelectionError(sweep_id=sweep_id, reason=str(exc)) from exc
        duration_ms = int((time.monotonic() - start) * 1000)

        usage = usage_from_response(response)
        await self._spend.record_spend(
            amount_usd=self._prices.cost(
                model=self._config.model,
                input_tokens=usage.input_tokens,
                output_tokens=usage.output_tokens,
            ),
            attribution=f"ranking:{sweep_id}",
            model=self._config.model,
            input_tokens=usage.input_tokens,
            output_tokens=usage.output_tokens,
        )

        try:
            parsed = SelectionResponse.model_validate_json(
                response.choices[0].message.content or ""
            )
        except (IndexError, AttributeError, ValidationError) as exc:
            raise SelectionError(
                sweep_id=sweep_id,
                reason=f"unparseable response after {duration_ms}ms: {exc}",
            ) from exc
        return parsed.selections


def _render_candidates(candidates: list[RankingCandidate], top_k: int) -> str:
    blocks = [
        (
            f"## Candidate {c.index} (score {c.composite_score:.1f},"
            f" math defense {c.math_defense:.1f})\n\n{c.transcript_excerpt}"
        )
        for c in candidates
    ]
    return f"Select the top {top_k} of {len(candidates)} candidates.\n\n" + "\n\n".join(
        blocks
    )
