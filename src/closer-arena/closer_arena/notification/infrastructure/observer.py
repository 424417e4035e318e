"""Structlog implementation of the NotificationObserver port."""

import structlog


class StructlogNotificationObserver:
    """Delegates notification events to structlog.

    Satisfies the NotificationObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def notification_sent(self, channel: str, message: str) -> None:
        self._log.info("notification.sent", channel=channel, message=message)

    def notification_failed(self, channel: str, message: str, reason: str) -> None:
        self._log.warning(
            "notification.failed", channel=channel, message=message, reason=reason
        )
