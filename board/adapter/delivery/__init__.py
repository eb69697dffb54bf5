"""Secret delivery adapters."""

from .webhook import DeliveredSecret, MockSecretDeliveryChannel, WebhookSecretDeliveryChannel

__all__ = ["DeliveredSecret", "MockSecretDeliveryChannel", "WebhookSecretDeliveryChannel"]
