"""LocalKillSwitch — the process-local half of the circuit breaker."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from closer_arena.core.clock import Clock, utc_now


class KillSwitchStatus(BaseModel):
    model_config = ConfigDict(frozen=True)

    active: bool
    activated_at: datetime | None = None
    reason: str | None = None


class LocalKillSwitch:
    """In-memory kill flag shared by everything running in this process.

    Reading it costs nothing, so it is always consulted before the remote
    status. Activating an already-active switch keeps the original timestamp
    and reason.
    """

    def __init__(self, clock: Clock = utc_now) -> None:
        self._clock = clock
        self._status = KillSwitchStatus(active=False)

    def activate(self, reason: str) -> KillSwitchStatus:
        if not self._status.active:
            self._status = KillSwitchStatus(
                active=True, activated_at=self._clock(), reason=reason
            )
        return self._status

    def deactivate(self) -> KillSwitchStatus:
        self._status = KillSwitchStatus(active=False)
        return self._status

    def status(self) -> KillSwitchStatus:
        return self._status

    @property
    def active(self) -> bool:
        return self._status.active
