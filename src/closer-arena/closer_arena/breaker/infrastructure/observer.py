"""Structlog implementation of the BreakerObserver port."""

import structlog


class StructlogBreakerObserver:
    """Delegates circuit breaker events to structlog.

    Satisfies the BreakerObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def kill_switch_activated(self, reason: str) -> None:
        self._log.warning("breaker.kill_switch.activated", reason=reason)

    def kill_switch_deactivated(self) -> None:
        self._log.info("breaker.kill_switch.deactivated")

    def breaker_tripped(self, source: str, reason: str | None) -> None:
        self._log.warning("breaker.tripped", source=source, reason=reason)

    def remote_status_unavailable(self, url: str, reason: str) -> None:
        self._log.warning(
            "breaker.remote_status.unavailable",
            url=url,
            reason=reason,
            message="Remote kill switch unreachable, treating as inactive",
        )
