"""Notification sink configuration."""

from pydantic import BaseModel, Field


class NotificationConfig(BaseModel, frozen=True):
    webhook_url: str | None = None
    timeout_seconds: float = Field(default=5.0, gt=0.0)
