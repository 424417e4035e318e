"""Builds the notifier from config."""

from closer_arena.config.domain.notification import NotificationConfig
from closer_arena.notification.domain.notifier import Notifier
from closer_arena.notification.domain.observer import NotificationObserver
from closer_arena.notification.infrastructure.webhook import LogNotifier, WebhookNotifier


def create_notifier(config: NotificationConfig, observer: NotificationObserver) -> Notifier:
    if not config.webhook_url:
        return LogNotifier(observer=observer)
    return WebhookNotifier(
        url=config.webhook_url,
        timeout_seconds=config.timeout_seconds,
        observer=observer,
    )
