"""Error types raised by the cost ledger domain."""

from closer_arena.core.errors import ArenaError


class UnknownModelPriceError(ArenaError):
    """Raised when spend is computed for a model missing from the price table."""

    def __init__(self, model: str) -> None:
        self.model = model
        super().__init__(f"Failed to price usage: no price configured for model '{model}'")


class BudgetExceededError(ArenaError):
    """Raised when new work is refused because today's spend reached the cap."""

    def __init__(self, today_total_usd: float, daily_cap_usd: float) -> None:
        self.today_total_usd = today_total_usd
        self.daily_cap_usd = daily_cap_usd
        super().__init__(
            f"Failed to admit work: daily budget exceeded"
            f" (${today_total_usd:.2f} of ${daily_cap_usd:.2f})",
            retriable=True,
        )
