"""Base class for domain services."""


class Service:
    """Marker base for domain services.

    Services hold the board's rules: policy windows, the points ledger,
    rate limits, vote counting and notifications. They depend on
    repository and channel interfaces only, never on adapters.
    """
