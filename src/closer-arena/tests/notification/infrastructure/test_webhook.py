"""Tests for WebhookNotifier, LogNotifier and the notifier registry."""

import json

import httpx

from closer_arena.config.domain.notification import NotificationConfig
from closer_arena.notification.infrastructure.registry import create_notifier
from closer_arena.notification.infrastructure.webhook import LogNotifier, WebhookNotifier
from tests.notification.fake_observer import FakeNotificationObserver

_URL = "https://hooks.example.test/alerts"


class TestWebhookNotifier:
    """notify() posts the message and never raises on delivery failure."""

    async def test_posts_text_payload(self) -> None:
        bodies: list[dict[str, str]] = []

        def handler(request: httpx.Request) -> httpx.Response:
            bodies.append(json.loads(request.content))
            return httpx.Response(200)

        observer = FakeNotificationObserver()
        notifier = WebhookNotifier(
            url=_URL,
            timeout_seconds=1.0,
            observer=observer,
            transport=httpx.MockTransport(handler),
        )

        await notifier.notify("Kill threshold hit")

        assert bodies == [{"text": "Kill threshold hit"}]
        assert observer.sent[0].channel == "webhook"

    async def test_http_error_is_reported_not_raised(self) -> None:
        observer = FakeNotificationObserver()
        notifier = WebhookNotifier(
            url=_URL,
            timeout_seconds=1.0,
            observer=observer,
            transport=httpx.MockTransport(lambda request: httpx.Response(500)),
        )

        await notifier.notify("hello")

        assert observer.sent == []
        assert observer.failed[0].message == "hello"

    async def test_connection_error_is_reported_not_raised(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("refused", request=request)

        observer = FakeNotificationObserver()
        notifier = WebhookNotifier(
            url=_URL,
            timeout_seconds=1.0,
            observer=observer,
            transport=httpx.MockTransport(handler),
        )

        await notifier.notify("hello")

        assert len(observer.failed) == 1


class TestLogNotifier:
    async def test_reports_message_as_sent(self) -> None:
        observer = FakeNotificationObserver()

        await LogNotifier(observer=observer).notify("sweep halted")

        assert observer.sent[0].channel == "log"
        assert observer.sent[0].message == "sweep halted"


class TestCreateNotifier:
    def test_no_webhook_builds_log_notifier(self) -> None:
        notifier = create_notifier(
            config=NotificationConfig(), observer=FakeNotificationObserver()
        )

        assert isinstance(notifier, LogNotifier)

    def test_webhook_url_builds_webhook_notifier(self) -> None:
        notifier = create_notifier(
            config=NotificationConfig(webhook_url=_URL),
            observer=FakeNotificationObserver(),
        )

        assert isinstance(notifier, WebhookNotifier)

    def test_empty_webhook_url_falls_back_to_log_notifier(self) -> None:
        notifier = create_notifier(
            config=NotificationConfig(webhook_url=""),
            observer=FakeNotificationObserver(),
        )

        assert isinstance(notifier, LogNotifier)
