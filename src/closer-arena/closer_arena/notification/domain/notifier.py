"""Notifier Protocol — fire-and-forget operator alerts."""

from typing import Protocol


class Notifier(Protocol):
    async def notify(self, message: str) -> None:
        """Deliver an alert. Implementations log delivery failures and never raise."""
        ...
