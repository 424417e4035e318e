"""Observer port for the circuit breaker — defines events in domain language."""

from typing import Protocol


class BreakerObserver(Protocol):
    def kill_switch_activated(self, reason: str) -> None: ...

    def kill_switch_deactivated(self) -> None: ...

    def breaker_tripped(self, source: str, reason: str | None) -> None: ...

    def remote_status_unavailable(self, url: str, reason: str) -> None: ...
