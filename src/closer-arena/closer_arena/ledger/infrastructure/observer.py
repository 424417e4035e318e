"""Structlog implementation of the LedgerObserver port."""

import structlog


class StructlogLedgerObserver:
    """Delegates ledger domain events to structlog.

    Satisfies the LedgerObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def spend_recorded(
        self,
        entry_id: str,
        attribution: str,
        amount_usd: float,
        model: str | None,
    ) -> None:
        self._log.info(
            "ledger.spend_recorded",
            entry_id=entry_id,
            attribution=attribution,
            amount_usd=round(amount_usd, 6),
            model=model,
        )

    def budget_throttled(self, today_total_usd: float, remaining_usd: float) -> None:
        self._log.warning(
            "ledger.budget_throttled",
            today_total_usd=round(today_total_usd, 4),
            remaining_usd=round(remaining_usd, 4),
        )

    def budget_exceeded(self, today_total_usd: float, daily_cap_usd: float) -> None:
        self._log.error(
            "ledger.budget_exceeded",
            today_total_usd=round(today_total_usd, 4),
            daily_cap_usd=daily_cap_usd,
        )
