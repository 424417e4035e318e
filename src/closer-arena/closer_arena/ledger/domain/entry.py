"""CostLedgerEntry — one append-only spend record."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

type Attribution = str


class CostLedgerEntry(BaseModel):
    """A single recorded spend, attributed to the unit of work that caused it.

    Attribution is a session id for turn spend, ``scoring:<session_id>`` for
    the call that scored a session, or ``ranking:<sweep_id>`` for a ranking
    call. ``day`` is the UTC calendar date the spend counts against. Entries
    are never updated or deleted.
    """

    model_config = ConfigDict(frozen=True)

    entry_id: str
    amount_usd: float = Field(ge=0.0)
    attribution: Attribution
    model: str | None = None
    input_tokens: int = Field(default=0, ge=0)
    output_tokens: int = Field(default=0, ge=0)
    created_at: datetime
    day: str
