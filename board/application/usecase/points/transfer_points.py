"""Transfer points use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from board.config import StoreSettings
from board.domain.error import LedgerRejectedError
from board.domain.service import PointsLedgerService, UserService
from board.domain.value import UserId

from ..base import BaseUseCase, store_timeout


class TransferPointsRequest(BaseModel):
    """Transfer points request."""

    from_user_id: str  # User ID from authenticated user
    recipient_email: str = Field(min_length=1, max_length=255)
    amount: int


class TransferPointsResponse(BaseModel):
    """Transfer points response."""

    transfer_id: str
    to_user_id: str
    amount: int
    created_at: datetime


class TransferPointsUseCase(BaseUseCase):
    """Use case for sending points to another user by email."""

    def __init__(
        self,
        user_service: UserService,
        ledger_service: PointsLedgerService,
        store_settings: StoreSettings,
    ) -> None:
        """Initialize transfer points use case.

        Args:
            user_service: User domain service
            ledger_service: Points ledger service
            store_settings: Store call limits
        """
        self.user_service = user_service
        self.ledger_service = ledger_service
        self.store_settings = store_settings

    async def execute(self, request: TransferPointsRequest) -> TransferPointsResponse:
        """Execute transfer flow.

        An unknown recipient email is reported by the ledger like any other
        rejection, after the sender-side checks.

        Args:
            request: Transfer points request

        Returns:
            The applied transfer

        Raises:
            LedgerRejectedError: If the ledger refuses the transfer
            NotFoundError: If the sender does not exist
            StoreUnavailableError: If the store cannot be reached in time
        """
        timeout = self.store_settings.operation_timeout_seconds

        recipient = await store_timeout(
            self.user_service.get_user_by_email(request.recipient_email),
            timeout,
            "transfer_points",
        )
        outcome = await store_timeout(
            self.ledger_service.transfer(
                UserId(UUID(request.from_user_id)),
                recipient.id if recipient else None,
                request.amount,
            ),
            timeout,
            "transfer_points",
        )
        if outcome.rejection is not None:
            raise LedgerRejectedError(outcome.rejection)
        transfer = outcome.transfer
        if transfer is None:
            raise ValueError("Transfer outcome has neither a transfer nor a rejection")

        return TransferPointsResponse(
            transfer_id=str(transfer.id),
            to_user_id=str(transfer.to_user_id),
            amount=transfer.amount,
            created_at=transfer.created_at,
        )
