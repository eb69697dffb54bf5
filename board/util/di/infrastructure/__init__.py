"""Infrastructure providers."""

# Import bases
from .delivery import DeliveryProvider
from .notification import NotificationProvider
from .persistence import PersistenceProvider
from .video import VideoProvider

# Import implementations (needed for __subclasses__())
from .delivery import ProdDeliveryProvider  # noqa: F401
from .notification import ProdNotificationProvider  # noqa: F401
from .persistence import ProdPersistenceProvider  # noqa: F401
from .video import ProdVideoProvider  # noqa: F401

__all__ = [
    "DeliveryProvider",
    "NotificationProvider",
    "PersistenceProvider",
    "ProdDeliveryProvider",
    "ProdNotificationProvider",
    "ProdPersistenceProvider",
    "ProdVideoProvider",
    "VideoProvider",
]
