"""RemoteBreakerStatus port — an externally controlled kill switch."""

from typing import Protocol


class RemoteBreakerStatus(Protocol):
    async def fetch(self) -> bool | None:
        """Return True if the remote switch is active, False if not, None if unknown.

        Implementations must not raise for transport or decoding failures;
        they report None so the breaker can fail open.
        """
        ...


class DisabledRemoteStatus:
    """Used when no remote endpoint is configured. Always reports inactive."""

    async def fetch(self) -> bool | None:
        return False
