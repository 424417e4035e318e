"""CostLedger — append-only spend records and today's budget state."""

import math
import uuid
from collections.abc import Iterable

from closer_arena.config.domain.budget import BudgetConfig
from closer_arena.core.clock import Clock, utc_now
from closer_arena.ledger.domain.budget import BudgetState
from closer_arena.ledger.domain.entry import CostLedgerEntry
from closer_arena.ledger.domain.observer import LedgerObserver
from closer_arena.store.domain.store import RecordStore

LEDGER_COLLECTION = "cost_ledger"


class CostLedger:
    """Records every unit of spend and answers "how much have we spent today?".

    Entries are appended to the record store and never rewritten, so the day's
    total only ever grows. Budget state is recomputed from the stored entries on
    every call; the ledger holds no in-memory running total.
    """

    def __init__(
        self,
        config: BudgetConfig,
        store: RecordStore,
        observer: LedgerObserver,
        clock: Clock = utc_now,
    ) -> None:
        self._config = config
        self._store = store
        self._observer = observer
        self._clock = clock

    async def record_spend(
        self,
        amount_usd: float,
        attribution: str,
        model: str | None = None,
        input_tokens: int = 0,
        output_tokens: int = 0,
    ) -> CostLedgerEntry:
        """Append one spend entry for today.

        Raises:
            ValueError: if amount_usd is negative.
            StoreUnavailableError: if the entry cannot be persisted.
        """
        if amount_usd < 0:
            raise ValueError(f"amount_usd must be >= 0, got {amount_usd}")

        now = self._clock()
        entry = CostLedgerEntry(
            entry_id=str(uuid.uuid4()),
            amount_usd=amount_usd,
            attribution=attribution,
            model=model,
            input_tokens=input_tokens,
            output_tokens=output_tokens,
            created_at=now,
            day=now.date().isoformat(),
        )
        await self._store.create(
            LEDGER_COLLECTION, entry.entry_id, entry.model_dump(mode="json")
        )
        self._observer.spend_recorded(
            entry_id=entry.entry_id,
            attribution=attribution,
            amount_usd=amount_usd,
            model=model,
        )
        return entry

    async def today_total(self) -> float:
        day = self._clock().date().isoformat()
        records = await self._store.query(LEDGER_COLLECTION, day=day)
        return math.fsum(float(record["amount_usd"]) for record in records)

    async def get_budget_state(self) -> BudgetState:
        """Derive the current budget state from today's entries."""
        state = BudgetState.from_spend(
            daily_cap_usd=self._config.daily_cap_usd,
            today_total_usd=await self.today_total(),
            throttle_remaining_fraction=self._config.throttle_remaining_fraction,
        )
        if state.is_exceeded:
            self._observer.budget_exceeded(
                today_total_usd=state.today_total_usd,
                daily_cap_usd=state.daily_cap_usd,
            )
        elif state.is_throttled:
            self._observer.budget_throttled(
                today_total_usd=state.today_total_usd,
                remaining_usd=state.remaining_usd,
            )
        return state

    async def spend_by_attribution(self, attributions: Iterable[str]) -> float:
        """Total spend, across all days, for the given attributions."""
        amounts: list[float] = []
        for attribution in attributions:
            records = await self._store.query(LEDGER_COLLECTION, attribution=attribution)
            amounts.extend(float(record["amount_usd"]) for record in records)
        return math.fsum(amounts)
