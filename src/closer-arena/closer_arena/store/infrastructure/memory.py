"""InMemoryRecordStore — dict-backed store for tests and throwaway runs."""

import copy
from typing import Any

from closer_arena.store.domain.store import Record
from closer_arena.store.infrastructure.errors import (
    DuplicateRecordError,
    RecordNotFoundError,
)


class InMemoryRecordStore:
    """Keeps every collection in process memory.

    Records are deep-copied on the way in and out so callers can never mutate
    stored state by accident.

    Does NOT inherit from RecordStore (structural typing via Protocol).
    """

    def __init__(self) -> None:
        self._collections: dict[str, dict[str, Record]] = {}

    async def create(self, collection: str, record_id: str, record: Record) -> None:
        records = self._collections.setdefault(collection, {})
        if record_id in records:
            raise DuplicateRecordError(collection=collection, record_id=record_id)
        records[record_id] = copy.deepcopy(record)

    async def update(
        self, collection: str, record_id: str, changes: Record
    ) -> Record:
        records = self._collections.get(collection, {})
        if record_id not in records:
            raise RecordNotFoundError(collection=collection, record_id=record_id)
        records[record_id] = {**records[record_id], **copy.deepcopy(changes)}
        return copy.deepcopy(records[record_id])

    async def upsert(self, collection: str, record_id: str, record: Record) -> None:
        self._collections.setdefault(collection, {})[record_id] = copy.deepcopy(record)

    async def delete(self, collection: str, record_id: str) -> bool:
        return self._collections.get(collection, {}).pop(record_id, None) is not None

    async def get(self, collection: str, record_id: str) -> Record | None:
        record = self._collections.get(collection, {}).get(record_id)
        return copy.deepcopy(record) if record is not None else None

    async def query(self, collection: str, **equals: Any) -> list[Record]:
        return [
            copy.deepcopy(record)
            for record in self._collections.get(collection, {}).values()
            if all(record.get(key) == value for key, value in equals.items())
        ]
