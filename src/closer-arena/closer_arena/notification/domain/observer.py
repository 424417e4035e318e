"""Observer port for notifications — defines events in domain language."""

from typing import Protocol


class NotificationObserver(Protocol):
    def notification_sent(self, channel: str, message: str) -> None: ...

    def notification_failed(self, channel: str, message: str, reason: str) -> None: ...
