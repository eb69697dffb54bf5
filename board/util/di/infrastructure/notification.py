"""Notification infrastructure providers."""

from dishka import Scope, provide

from board.adapter.notification import WebhookNotificationChannel
from board.config import Settings
from board.domain.service import NotificationChannel
from board.util.di.base import ProviderBase


class NotificationProvider(ProviderBase):
    """Notification component base."""

    __mock_component__ = "notification"


class ProdNotificationProvider(NotificationProvider):
    """Production notification provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_notification_channel(self, settings: Settings) -> NotificationChannel:
        """Provide notification channel.

        Raises:
            ValueError: If the relay webhook is not configured
        """
        if not settings.notification.webhook_url:
            raise ValueError("Notification webhook URL must be configured")

        return WebhookNotificationChannel(
            webhook_url=settings.notification.webhook_url,
            timeout_seconds=settings.notification.timeout_seconds,
        )
