"""FakeGenerationObserver — records generation domain events for assertion in tests."""

from dataclasses import dataclass


@dataclass(frozen=True)
class GenerationStartedEvent:
    role: str
    model: str


@dataclass(frozen=True)
class GenerationCompletedEvent:
    role: str
    model: str
    duration_ms: int
    input_tokens: int
    output_tokens: int


@dataclass(frozen=True)
class GenerationFailedEvent:
    role: str
    model: str
    reason: str


class FakeGenerationObserver:
    """Records all emitted generation events as typed frozen dataclasses."""

    def __init__(self) -> None:
        self._started: list[GenerationStartedEvent] = []
        self._completed: list[GenerationCompletedEvent] = []
        self._failed: list[GenerationFailedEvent] = []

    @property
    def started(self) -> list[GenerationStartedEvent]:
        return self._started

    @property
    def completed(self) -> list[GenerationCompletedEvent]:
        return self._completed

    @property
    def failed(self) -> list[GenerationFailedEvent]:
        return self._failed

    def generation_started(self, role: str, model: str) -> None:
        self._started.append(GenerationStartedEvent(role=role, model=model))

    def generation_completed(
        self,
        role: str,
        model: str,
        duration_ms: int,
        input_tokens: int,
        output_tokens: int,
    ) -> None:
        self._completed.append(
            GenerationCompletedEvent(
                role=role,
                model=model,
                duration_ms=duration_ms,
                input_tokens=input_tokens,
                output_tokens=output_tokens,
            )
        )

    def generation_failed(self, role: str, model: str, reason: str) -> None:
        self._failed.append(GenerationFailedEvent(role=role, model=model, reason=reason))
