"""GenerationObserver port — domain events emitted around generation calls."""

from typing import Protocol


class GenerationObserver(Protocol):
    """Observer port for generation domain events.

    Implementations may log to structlog, record for tests, or emit metrics.
    """

    def generation_started(self, role: str, model: str) -> None: ...

    def generation_completed(
        self,
        role: str,
        model: str,
        duration_ms: int,
        input_tokens: int,
        output_tokens: int,
    ) -> None: ...

    def generation_failed(self, role: str, model: str, reason: str) -> None: ...
