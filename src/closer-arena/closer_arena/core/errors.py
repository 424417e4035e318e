"""Base exception class for all closer-arena errors."""


class ArenaError(Exception):
    """Base class for all closer-arena errors.

    ``retriable`` marks errors a caller may reasonably try again later. The
    session orchestrator never retries on its own; the flag is informational
    for operators and outer tooling.
    """

    def __init__(self, message: str, retriable: bool = False) -> None:
        super().__init__(message)
        self.retriable = retriable
