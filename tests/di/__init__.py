"""Mock providers for testing."""

from .delivery import MockDeliveryProvider
from .notification import MockNotificationProvider
from .persistence import MockPersistenceProvider
from .video import MockVideoProvider
from .container import build_test_container

__all__ = [
    "MockDeliveryProvider",
    "MockNotificationProvider",
    "MockPersistenceProvider",
    "MockVideoProvider",
    "build_test_container",
]
