"""WebhookNotifier and LogNotifier — the two Notifier implementations."""

import httpx

from closer_arena.notification.domain.observer import NotificationObserver


class WebhookNotifier:
    """POSTs ``{"text": message}`` to an incoming-webhook URL (Slack compatible).

    Delivery problems are reported to the observer and swallowed: an alert
    that cannot be sent must never stop the work it is reporting on.

    Does NOT inherit from Notifier (structural typing via Protocol).
    """

    channel = "webhook"

    def __init__(
        self,
        url: str,
        timeout_seconds: float,
        observer: NotificationObserver,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._url = url
        self._timeout = timeout_seconds
        self._observer = observer
        self._transport = transport

    async def notify(self, message: str) -> None:
        try:
            async with httpx.AsyncClient(
                timeout=self._timeout, transport=self._transport
            ) as client:
                response = await client.post(self._url, json={"text": message})
            response.raise_for_status()
        except httpx.HTTPError as exc:
            self._observer.notification_failed(
                channel=self.channel, message=message, reason=str(exc)
            )
            return
        self._observer.notification_sent(channel=self.channel, message=message)


class LogNotifier:
    """Used when no webhook is configured; the observer's log is the only sink."""

    channel = "log"

    def __init__(self, observer: NotificationObserver) -> None:
        self._observer = observer

    async def notify(self, message: str) -> None:
        self._observer.notification_sent(channel=self.channel, message=message)
