"""BudgetState — derived view of today's spend against the daily cap."""

from pydantic import BaseModel, ConfigDict


class BudgetState(BaseModel):
    """Snapshot of the daily budget. Always recomputed from the ledger, never cached."""

    model_config = ConfigDict(frozen=True)

    daily_cap_usd: float
    today_total_usd: float
    remaining_usd: float
    percentage_used: float
    is_throttled: bool
    is_exceeded: bool

    @classmethod
    def from_spend(
        cls,
        daily_cap_usd: float,
        today_total_usd: float,
        throttle_remaining_fraction: float,
    ) -> "BudgetState":
        """Derive the budget state from today's total.

        Throttled means the remaining fraction of the cap has dropped below
        ``throttle_remaining_fraction``. Exceeded means spend has reached the cap.
        An exceeded budget is also throttled.
        """
        remaining = max(0.0, daily_cap_usd - today_total_usd)
        return cls(
            daily_cap_usd=daily_cap_usd,
            today_total_usd=today_total_usd,
            remaining_usd=remaining,
            percentage_used=100.0 * today_total_usd / daily_cap_usd,
            is_throttled=remaining / daily_cap_usd < throttle_remaining_fraction,
            is_exceeded=today_total_usd >= daily_cap_usd,
        )
