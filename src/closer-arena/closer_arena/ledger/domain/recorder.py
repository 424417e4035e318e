"""SpendRecorder Protocol — the narrow write side of the ledger."""

from typing import Protocol

from closer_arena.ledger.domain.entry import CostLedgerEntry


class SpendRecorder(Protocol):
    async def record_spend(
        self,
        amount_usd: float,
        attribution: str,
        model: str | None = None,
        input_tokens: int = 0,
        output_tokens: int = 0,
    ) -> CostLedgerEntry: ...
