"""Secret delivery channels.

The concrete email/SMS mechanism sits behind a relay; this side only hands
over the address, subject and secret.
"""

from dataclasses import dataclass

import httpx
import logfire

from board.adapter.error import DeliveryError
from board.domain.service.credential_service import SecretDeliveryChannel


class WebhookSecretDeliveryChannel(SecretDeliveryChannel):
    """Posts secrets as JSON to a delivery relay webhook."""

    def __init__(self, webhook_url: str, timeout_seconds: float = 5.0) -> None:
        """Initialize webhook channel.

        Args:
            webhook_url: Relay endpoint
            timeout_seconds: Per-request timeout
        """
        self.webhook_url = webhook_url
        self.timeout_seconds = timeout_seconds

    async def deliver(self, address: str, subject: str, secret: str) -> None:
        """Hand a secret to the relay.

        Raises:
            DeliveryError: If the relay is unreachable or rejects the message
        """
        payload = {"address": address, "subject": subject, "secret": secret}

        try:
            async with httpx.AsyncClient() as client:
                response = await client.post(
                    self.webhook_url, json=payload, timeout=self.timeout_seconds
                )
        except httpx.HTTPError as e:
            # Never log the payload: it carries the secret
            logfire.error("Delivery relay HTTP error", error=str(e))
            raise DeliveryError(f"HTTP error delivering message: {e}")

        if response.status_code >= 400:
            logfire.error("Delivery relay rejected message", status_code=response.status_code)
            raise DeliveryError(f"Delivery relay returned {response.status_code}")

        logfire.info("Secret handed to delivery relay", subject=subject)


@dataclass
class DeliveredSecret:
    address: str
    subject: str
    secret: str


class MockSecretDeliveryChannel(SecretDeliveryChannel):
    """Records delivered secrets for assertions."""

    def __init__(self, fail: bool = False) -> None:
        self.fail = fail
        self.delivered: list[DeliveredSecret] = []

    async def deliver(self, address: str, subject: str, secret: str) -> None:
        """Record a secret."""
        if self.fail:
            raise DeliveryError("Mock delivery channel configured to fail")
        self.delivered.append(DeliveredSecret(address=address, subject=subject, secret=secret))

    def last_for(self, address: str) -> DeliveredSecret | None:
        """Most recent secret sent to ``address``."""
        for item in reversed(self.delivered):
            if item.address == address:
                return item
        return None
