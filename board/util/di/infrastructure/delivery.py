"""Secret delivery infrastructure providers."""

from dishka import Scope, provide

from board.adapter.delivery import WebhookSecretDeliveryChannel
from board.config import Settings
from board.domain.service import SecretDeliveryChannel
from board.util.di.base import ProviderBase


class DeliveryProvider(ProviderBase):
    """Secret delivery component base."""

    __mock_component__ = "delivery"


class ProdDeliveryProvider(DeliveryProvider):
    """Production secret delivery provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_secret_delivery_channel(self, settings: Settings) -> SecretDeliveryChannel:
        """Provide secret delivery channel.

        Raises:
            ValueError: If the relay webhook is not configured
        """
        if not settings.delivery.webhook_url:
            raise ValueError("Delivery webhook URL must be configured")

        return WebhookSecretDeliveryChannel(
            webhook_url=settings.delivery.webhook_url,
            timeout_seconds=settings.delivery.timeout_seconds,
        )
