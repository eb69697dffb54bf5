"""Infrastructure layer errors."""


class AdapterError(Exception):
    """Base infrastructure error."""

    pass


class DeliveryError(AdapterError):
    """Outbound message could not be delivered."""

    pass


class VideoStorageError(AdapterError):
    """Video could not be written."""

    pass
