"""Maps StoreConfig.type to a RecordStore implementation."""

from closer_arena.config.domain.store import StoreConfig
from closer_arena.store.domain.store import RecordStore
from closer_arena.store.infrastructure.jsonl import JsonlRecordStore
from closer_arena.store.infrastructure.memory import InMemoryRecordStore


def create_record_store(config: StoreConfig) -> RecordStore:
    if config.type == "memory":
        return InMemoryRecordStore()
    return JsonlRecordStore(root=config.path)
