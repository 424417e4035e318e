"""Error types raised by record store infrastructure."""

from closer_arena.core.errors import ArenaError


class StoreUnavailableError(ArenaError):
    """Raised when the backing store cannot be read or written."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Failed to access record store: {reason}", retriable=True)


class RecordNotFoundError(ArenaError):
    """Raised when an update targets a record id that does not exist."""

    def __init__(self, collection: str, record_id: str) -> None:
        self.collection = collection
        self.record_id = record_id
        super().__init__(
            f"Failed to find record '{record_id}' in collection '{collection}'"
        )


class DuplicateRecordError(ArenaError):
    """Raised when create() is called with an id that already exists."""

    def __init__(self, collection: str, record_id: str) -> None:
        self.collection = collection
        self.record_id = record_id
        super().__init__(
            f"Failed to create record '{record_id}' in collection '{collection}':"
            " id already exists"
        )
