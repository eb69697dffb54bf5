"""Notification channels.

The browser notification itself is shown by the client; the server posts
each notification to a relay that pushes it to the recipient's sessions.
"""

import httpx
import logfire

from board.adapter.error import DeliveryError
from board.domain.service.notification_service import Notification, NotificationChannel
from board.domain.value import UserId


class WebhookNotificationChannel(NotificationChannel):
    """Posts notifications as JSON to a relay webhook."""

    def __init__(self, webhook_url: str, timeout_seconds: float = 5.0) -> None:
        """Initialize webhook channel.

        Args:
            webhook_url: Relay endpoint
            timeout_seconds: Per-request timeout
        """
        self.webhook_url = webhook_url
        self.timeout_seconds = timeout_seconds

    async def send(self, recipient_id: UserId, notification: Notification) -> None:
        """Post a notification to the relay.

        Raises:
            DeliveryError: If the relay is unreachable or rejects the message
        """
        payload = {
            "recipient_id": str(recipient_id),
            "title": notification.title,
            "body": notification.body,
        }

        try:
            async with httpx.AsyncClient() as client:
                response = await client.post(
                    self.webhook_url, json=payload, timeout=self.timeout_seconds
                )
        except httpx.HTTPError as e:
            logfire.error("Notification relay HTTP error", error=str(e))
            raise DeliveryError(f"HTTP error sending notification: {e}")

        if response.status_code >= 400:
            logfire.error(
                "Notification relay rejected message",
                status_code=response.status_code,
                error=response.text,
            )
            raise DeliveryError(f"Notification relay returned {response.status_code}")


class MockNotificationChannel(NotificationChannel):
    """Records notifications instead of sending them.

    Set ``fail`` to make every send raise, for exercising failure paths.
    """

    def __init__(self, fail: bool = False) -> None:
        self.fail = fail
        self.sent: list[tuple[UserId, Notification]] = []

    async def send(self, recipient_id: UserId, notification: Notification) -> None:
        """Record a notification."""
        if self.fail:
            raise DeliveryError("Mock notification channel configured to fail")
        self.sent.append((recipient_id, notification))
