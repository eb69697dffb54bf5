"""User notifications."""

from abc import ABC, abstractmethod

import logfire

from board.domain.value import UserId
from board.domain.value.common import ValueObject

from .base import Service


class Notification(ValueObject):
    """A short message shown to a user."""

    title: str
    body: str


class NotificationChannel(ABC):
    """Outbound channel delivering notifications to a user's client."""

    @abstractmethod
    async def send(self, recipient_id: UserId, notification: Notification) -> None:
        """Deliver a notification.

        Args:
            recipient_id: User to notify
            notification: Message to deliver

        Raises:
            Exception: Any delivery failure
        """
        pass


class NotificationService(Service):
    """Best-effort notifications.

    A failed delivery is logged and dropped; it never fails the action
    that triggered it.
    """

    def __init__(self, channel: NotificationChannel) -> None:
        """Initialize notification service.

        Args:
            channel: Delivery channel
        """
        self.channel = channel

    async def notify(self, recipient_id: UserId, title: str, body: str) -> bool:
        """Send a notification, swallowing delivery failures.

        Args:
            recipient_id: User to notify
            title: Notification title
            body: Notification body

        Returns:
            True if delivered
        """
        with logfire.span("notification_service.notify", recipient_id=str(recipient_id)):
            try:
                await self.channel.send(recipient_id, Notification(title=title, body=body))
            except Exception as e:
                logfire.warn(
                    "Notification delivery failed",
                    recipient_id=str(recipient_id),
                    title=title,
                    error=str(e),
                )
                return False
            logfire.info("Notification sent", recipient_id=str(recipient_id), title=title)
            return True

    async def notify_new_answer(self, question_author_id: UserId, question_title: str) -> bool:
        """Tell a question's author it received an answer."""
        return await self.notify(
            question_author_id,
            "New Answer",
            f"Someone answered your question: {question_title}",
        )

    async def notify_answer_upvoted(self, answer_author_id: UserId, question_title: str) -> bool:
        """Tell an answer's author it received an upvote."""
        return await self.notify(
            answer_author_id,
            "Answer Upvoted",
            f'Your answer to "{question_title}" received an upvote!',
        )
