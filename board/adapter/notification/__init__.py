"""Notification adapters."""

from .webhook import MockNotificationChannel, WebhookNotificationChannel

__all__ = ["MockNotificationChannel", "WebhookNotificationChannel"]
