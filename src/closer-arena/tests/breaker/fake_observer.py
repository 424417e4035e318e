"""FakeBreakerObserver — records circuit breaker events for assertion in tests."""

from dataclasses import dataclass


@dataclass(frozen=True)
class BreakerTrippedEvent:
    source: str
    reason: str | None


@dataclass(frozen=True)
class RemoteUnavailableEvent:
    url: str
    reason: str


class FakeBreakerObserver:
    """Records all emitted breaker events as typed frozen dataclasses."""

    def __init__(self) -> None:
        self._activated: list[str] = []
        self._deactivated = 0
        self._tripped: list[BreakerTrippedEvent] = []
        self._unavailable: list[RemoteUnavailableEvent] = []

    @property
    def activated(self) -> list[str]:
        return self._activated

    @property
    def deactivated(self) -> int:
        return self._deactivated

    @property
    def tripped(self) -> list[BreakerTrippedEvent]:
        return self._tripped

    @property
    def unavailable(self) -> list[RemoteUnavailableEvent]:
        return self._unavailable

    def kill_switch_activated(self, reason: str) -> None:
        self._activated.append(reason)

    def kill_switch_deactivated(self) -> None:
        self._deactivated += 1

    def breaker_tripped(self, source: str, reason: str | None) -> None:
        self._tripped.append(BreakerTrippedEvent(source=source, reason=reason))

    def remote_status_unavailable(self, url: str, reason: str) -> None:
        self._unavailable.append(RemoteUnavailableEvent(url=url, reason=reason))
