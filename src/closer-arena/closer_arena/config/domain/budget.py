"""Daily budget configuration."""

from pydantic import BaseModel, Field


class BudgetConfig(BaseModel, frozen=True):
    """Daily spend cap and the remaining-fraction below which spend is throttled."""

    daily_cap_usd: float = Field(default=15.0, gt=0.0)
    throttle_remaining_fraction: float = Field(default=0.10, ge=0.0, le=1.0)
