"""SweepRepository — BatchSweep persistence on top of the record store."""

from closer_arena.store.domain.store import RecordStore
from closer_arena.sweep.domain.errors import SweepNotFoundError
from closer_arena.sweep.domain.sweep import BatchSweep

SWEEPS_COLLECTION = "sweeps"


class SweepRepository:
    def __init__(self, store: RecordStore) -> None:
        self._store = store

    async def add(self, sweep: BatchSweep) -> None:
        await self._store.create(SWEEPS_COLLECTION, sweep.sweep_id, sweep.to_record())

    async def save(self, sweep: BatchSweep) -> None:
        await self._store.update(SWEEPS_COLLECTION, sweep.sweep_id, sweep.to_record())

    async def get(self, sweep_id: str) -> BatchSweep:
        record = await self._store.get(SWEEPS_COLLECTION, sweep_id)
        if record is None:
            raise SweepNotFoundError(sweep_id=sweep_id)
        return BatchSweep.model_validate(record)
