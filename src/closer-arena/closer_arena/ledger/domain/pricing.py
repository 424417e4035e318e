"""PriceTable — turns token usage into USD spend."""

from closer_arena.config.domain.pricing import PricingConfig
from closer_arena.ledger.domain.errors import UnknownModelPriceError

_PER_MILLION = 1_000_000


class PriceTable:
    def __init__(self, config: PricingConfig) -> None:
        self._models = config.models

    def cost(self, model: str, input_tokens: int, output_tokens: int) -> float:
        """Return the USD cost of one call.

        Raises:
            UnknownModelPriceError: if the model has no configured price.
        """
        price = self._models.get(model)
        if price is None:
            raise UnknownModelPriceError(model=model)
        return (
            input_tokens * price.input_per_million_usd
            + output_tokens * price.output_per_million_usd
        ) / _PER_MILLION
