"""HttpBreakerStatus — polls a remote kill-switch endpoint over HTTP."""

import httpx

from closer_arena.breaker.domain.observer import BreakerObserver


class HttpBreakerStatus:
    """GETs ``url`` and reads ``{"active": bool}`` from the JSON body.

    Fails open: a timeout, transport error, non-2xx status or malformed body
    is reported to the observer and returned as None (unknown).

    Does NOT inherit from RemoteBreakerStatus (structural typing via Protocol).
    """

    def __init__(
        self,
        url: str,
        timeout_seconds: float,
        observer: BreakerObserver,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._url = url
        self._timeout = timeout_seconds
        self._observer = observer
        self._transport = transport

    async def fetch(self) -> bool | None:
        try:
            async with httpx.AsyncClient(
                timeout=self._timeout, transport=self._transport
            ) as client:
                response = await client.get(self._url)
            response.raise_for_status()
            body = response.json()
        except (httpx.HTTPError, ValueError) as exc:
            self._observer.remote_status_unavailable(url=self._url, reason=str(exc))
            return None

        active = body.get("active") if isinstance(body, dict) else None
        if not isinstance(active, bool):
            self._observer.remote_status_unavailable(
                url=self._url, reason="response has no boolean 'active' field"
            )
            return None
        return active
