"""RecordStore port — the durable record store every context persists through."""

from typing import Any, Protocol

type Record = dict[str, Any]


class RecordStore(Protocol):
    """Async key/value store of JSON-compatible records grouped into collections.

    Records are plain dicts. Each record lives under a caller-chosen id that is
    unique within its collection. Implementations raise StoreUnavailableError
    when the backing medium cannot be read or written.
    """

    async def create(self, collection: str, record_id: str, record: Record) -> None:
        """Insert a new record. Raises DuplicateRecordError if the id exists."""
        ...

    async def update(
        self, collection: str, record_id: str, changes: Record
    ) -> Record:
        """Merge changes into an existing record and return the merged record.

        Raises RecordNotFoundError if the id does not exist.
        """
        ...

    async def upsert(self, collection: str, record_id: str, record: Record) -> None:
        """Insert the record, or replace it wholesale if the id exists."""
        ...

    async def delete(self, collection: str, record_id: str) -> bool:
        """Remove a record. Returns False if the id did not exist."""
        ...

    async def get(self, collection: str, record_id: str) -> Record | None: ...

    async def query(self, collection: str, **equals: Any) -> list[Record]:
        """Return records whose fields equal every given keyword, in insertion order."""
        ...
