"""Points use cases."""

from .transfer_points import (
    TransferPointsRequest,
    TransferPointsResponse,
    TransferPointsUseCase,
)

__all__ = ["TransferPointsRequest", "TransferPointsResponse", "TransferPointsUseCase"]
