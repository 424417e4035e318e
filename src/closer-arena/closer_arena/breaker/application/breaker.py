"""CircuitBreaker — combines the local kill flag with the remote status."""

from closer_arena.breaker.domain.check import BreakerCheck, TripSource
from closer_arena.breaker.domain.kill_switch import KillSwitchStatus, LocalKillSwitch
from closer_arena.breaker.domain.observer import BreakerObserver
from closer_arena.breaker.domain.remote import RemoteBreakerStatus


class CircuitBreaker:
    """Decides whether new work may start.

    Sources are consulted cheapest first and the first positive wins, so the
    remote endpoint is never polled while the local flag is set. An unknown
    remote status counts as not tripped.
    """

    def __init__(
        self,
        kill_switch: LocalKillSwitch,
        remote: RemoteBreakerStatus,
        observer: BreakerObserver,
    ) -> None:
        self._kill_switch = kill_switch
        self._remote = remote
        self._observer = observer

    async def check(self) -> BreakerCheck:
        local = self._kill_switch.status()
        if local.active:
            self._observer.breaker_tripped(source=TripSource.LOCAL, reason=local.reason)
            return BreakerCheck(tripped=True, source=TripSource.LOCAL, reason=local.reason)

        if await self._remote.fetch() is True:
            reason = "remote kill switch active"
            self._observer.breaker_tripped(source=TripSource.REMOTE, reason=reason)
            return BreakerCheck(tripped=True, source=TripSource.REMOTE, reason=reason)

        return BreakerCheck(tripped=False)

    async def is_tripped(self) -> bool:
        return (await self.check()).tripped

    def trip(self, reason: str) -> KillSwitchStatus:
        """Activate the local flag so no further work starts in this process."""
        status = self._kill_switch.activate(reason=reason)
        self._observer.kill_switch_activated(reason=status.reason or reason)
        return status

    def reset(self) -> KillSwitchStatus:
        status = self._kill_switch.deactivate()
        self._observer.kill_switch_deactivated()
        return status
