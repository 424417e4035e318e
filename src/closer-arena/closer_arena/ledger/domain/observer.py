"""Observer port for the cost ledger — defines events in domain language."""

from typing import Protocol


class LedgerObserver(Protocol):
    def spend_recorded(
        self,
        entry_id: str,
        attribution: str,
        amount_usd: float,
        model: str | None,
    ) -> None: ...

    def budget_throttled(self, today_total_usd: float, remaining_usd: float) -> None: ...

    def budget_exceeded(self, today_total_usd: float, daily_cap_usd: float) -> None: ...
