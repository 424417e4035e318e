"""Structlog implementation of the GenerationObserver port."""

import structlog


class StructlogGenerationObserver:
    """Delegates generation domain events to structlog.

    Satisfies the GenerationObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def generation_started(self, role: str, model: str) -> None:
        self._log.debug("generation.started", role=role, model=model)

    def generation_completed(
        self,
        role: str,
        model: str,
        duration_ms: int,
        input_tokens: int,
        output_tokens: int,
    ) -> None:
        self._log.debug(
            "generation.completed",
            role=role,
            model=model,
            duration_ms=duration_ms,
            input_tokens=input_tokens,
            output_tokens=output_tokens,
        )

    def generation_failed(self, role: str, model: str, reason: str) -> None:
        self._log.error("generation.failed", role=role, model=model, reason=reason)
