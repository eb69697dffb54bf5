"""Mock notification providers for testing."""

from dishka import Scope, provide

from board.adapter.notification import MockNotificationChannel
from board.domain.service import NotificationChannel
from board.util.di.infrastructure.notification import NotificationProvider


class MockNotificationProvider(NotificationProvider):
    """Mock notification provider recording sent messages."""

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_notification_channel(self) -> NotificationChannel:
        """Provide recording notification channel."""
        return MockNotificationChannel()
