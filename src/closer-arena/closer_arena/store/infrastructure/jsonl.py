"""JsonlRecordStore — append-only JSONL log per collection, replayed on read."""

import asyncio
import copy
import json
from pathlib import Path
from typing import Any

from closer_arena.store.domain.store import Record
from closer_arena.store.infrastructure.errors import (
    DuplicateRecordError,
    RecordNotFoundError,
    StoreUnavailableError,
)


class JsonlRecordStore:
    """Durable store that keeps one ``<collection>.jsonl`` file per collection.

    Every write appends one operation line, never rewriting earlier lines:

        {"op": "put", "id": "...", "record": {...}}
        {"op": "patch", "id": "...", "record": {...changed fields...}}
        {"op": "delete", "id": "...", "record": {}}

    A collection's log is replayed into memory the first time it is touched.
    All operations are serialized through a single asyncio.Lock, so a single
    process may share one instance across concurrent sessions. Multiple
    processes writing the same directory are not supported.

    File reads and appends are synchronous and run while the lock is held, so
    they block the event loop and every concurrent session waits on each write.

    Does NOT inherit from RecordStore (structural typing via Protocol).
    """

    def __init__(self, root: Path) -> None:
        self._root = root
        self._lock = asyncio.Lock()
        self._cache: dict[str, dict[str, Record]] = {}

    async def create(self, collection: str, record_id: str, record: Record) -> None:
        async with self._lock:
            records = self._load(collection=collection)
            if record_id in records:
                raise DuplicateRecordError(collection=collection, record_id=record_id)
            self._append(collection=collection, op="put", record_id=record_id, record=record)
            records[record_id] = copy.deepcopy(record)

    async def update(
        self, collection: str, record_id: str, changes: Record
    ) -> Record:
        async with self._lock:
            records = self._load(collection=collection)
            if record_id not in records:
                raise RecordNotFoundError(collection=collection, record_id=record_id)
            self._append(
                collection=collection, op="patch", record_id=record_id, record=changes
            )
            records[record_id] = {**records[record_id], **copy.deepcopy(changes)}
            return copy.deepcopy(records[record_id])

    async def upsert(self, collection: str, record_id: str, record: Record) -> None:
        async with self._lock:
            records = self._load(collection=collection)
            self._append(collection=collection, op="put", record_id=record_id, record=record)
            records[record_id] = copy.deepcopy(record)

    async def delete(self, collection: str, record_id: str) -> bool:
        async with self._lock:
            records = self._load(collection=collection)
            if record_id not in records:
                return False
            self._append(
                collection=collection, op="delete", record_id=record_id, record={}
            )
            del records[record_id]
            return True

    async def get(self, collection: str, record_id: str) -> Record | None:
        async with self._lock:
            record = self._load(collection=collection).get(record_id)
            return copy.deepcopy(record) if record is not None else None

    async def query(self, collection: str, **equals: Any) -> list[Record]:
        async with self._lock:
            return [
                copy.deepcopy(record)
                for record in self._load(collection=collection).values()
                if all(record.get(key) == value for key, value in equals.items())
            ]

    def _path(self, collection: str) -> Path:
        return self._root / f"{collection}.jsonl"

    def _load(self, collection: str) -> dict[str, Record]:
        """Return the replayed collection, reading the log on first access."""
        if collection in self._cache:
            return self._cache[collection]

        records: dict[str, Record] = {}
        path = self._path(collection=collection)
        try:
            if path.exists():
                with path.open(encoding="utf-8") as fh:
                    for index, line in enumerate(fh):
                        if line.strip():
                            _replay(records=records, line=line, index=index, path=path)
        except OSError as exc:
            raise StoreUnavailableError(reason=f"{path}: {exc}") from exc

        self._cache[collection] = records
        return records

    def _append(
        self, collection: str, op: str, record_id: str, record: Record
    ) -> None:
        path = self._path(collection=collection)
        try:
            line = json.dumps({"op": op, "id": record_id, "record": record})
            self._root.mkdir(parents=True, exist_ok=True)
            with path.open("a", encoding="utf-8") as fh:
                fh.write(line + "\n")
        except (OSError, TypeError) as exc:
            raise StoreUnavailableError(reason=f"{path}: {exc}") from exc


def _replay(records: dict[str, Record], line: str, index: int, path: Path) -> None:
    try:
        entry = json.loads(line)
        op = entry["op"]
        record_id = entry["id"]
        record = entry["record"]
    except (json.JSONDecodeError, KeyError, TypeError) as exc:
        raise StoreUnavailableError(
            reason=f"{path}: line {index}: corrupt entry: {exc}"
        ) from exc

    if op == "put":
        records[record_id] = record
    elif op == "patch" and record_id in records:
        records[record_id] = {**records[record_id], **record}
    elif op == "delete" and record_id in records:
        del records[record_id]
    else:
        raise StoreUnavailableError(
            reason=f"{path}: line {index}: cannot apply '{op}' to '{record_id}'"
        )
