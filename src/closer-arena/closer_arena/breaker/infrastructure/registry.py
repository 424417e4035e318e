"""Builds the remote half of the circuit breaker from config."""

from closer_arena.breaker.domain.observer import BreakerObserver
from closer_arena.breaker.domain.remote import DisabledRemoteStatus, RemoteBreakerStatus
from closer_arena.breaker.infrastructure.http_status import HttpBreakerStatus
from closer_arena.config.domain.breaker import BreakerConfig


def create_remote_status(
    config: BreakerConfig, observer: BreakerObserver
) -> RemoteBreakerStatus:
    if not config.status_url:
        return DisabledRemoteStatus()
    return HttpBreakerStatus(
        url=config.status_url,
        timeout_seconds=config.timeout_seconds,
        observer=observer,
    )
