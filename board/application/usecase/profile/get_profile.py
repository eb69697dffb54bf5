"""Get profile use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from board.config import StoreSettings
from board.domain.service import PointsLedgerService, UserService
from board.domain.value import DeviceType, Language, UserId

from ..base import BaseUseCase, store_timeout


class GetProfileRequest(BaseModel):
    """Get profile request."""

    user_id: str  # User ID from authenticated user


class LoginHistoryItem(BaseModel):
    """One sign-in."""

    device_type: DeviceType
    browser: str
    os: str
    ip_address: str
    login_at: datetime


class TransferItem(BaseModel):
    """One transfer, seen from the profile owner's side."""

    transfer_id: str
    direction: str  # "sent" or "received"
    counterparty_id: str
    amount: int
    created_at: datetime


class GetProfileResponse(BaseModel):
    """Get profile response."""

    user_id: str
    email: str
    points: int
    preferred_language: Language
    login_history: list[LoginHistoryItem]
    transfers: list[TransferItem]


class GetProfileUseCase(BaseUseCase):
    """Use case for the signed-in user's profile page."""

    def __init__(
        self,
        user_service: UserService,
        ledger_service: PointsLedgerService,
        store_settings: StoreSettings,
    ) -> None:
        """Initialize get profile use case.

        Args:
            user_service: User domain service
            ledger_service: Points ledger service
            store_settings: Store call limits
        """
        self.user_service = user_service
        self.ledger_service = ledger_service
        self.store_settings = store_settings

    async def execute(self, request: GetProfileRequest) -> GetProfileResponse:
        """Execute get profile flow.

        Args:
            request: Get profile request

        Returns:
            Balance, language, recent sign-ins and transfers

        Raises:
            NotFoundError: If the user does not exist
            StoreUnavailableError: If the store cannot be reached in time
        """
        user_id = UserId(UUID(request.user_id))
        timeout = self.store_settings.operation_timeout_seconds

        user = await store_timeout(self.user_service.get_by_id(user_id), timeout, "get_profile")
        logins = await store_timeout(
            self.user_service.get_login_history(user_id), timeout, "get_profile"
        )
        transfers = await store_timeout(
            self.ledger_service.history(user_id), timeout, "get_profile"
        )

        return GetProfileResponse(
            user_id=str(user.id),
            email=user.email,
            points=user.points,
            preferred_language=user.preferred_language,
            login_history=[
                LoginHistoryItem(
                    device_type=entry.device_type,
                    browser=entry.browser,
                    os=entry.os,
                    ip_address=entry.ip_address,
                    login_at=entry.login_at,
                )
                for entry in logins
            ],
            transfers=[
                TransferItem(
                    transfer_id=str(t.id),
                    direction="sent" if t.from_user_id == user_id else "received",
                    counterparty_id=str(
                        t.to_user_id if t.from_user_id == user_id else t.from_user_id
                    ),
                    amount=t.amount,
                    created_at=t.created_at,
                )
                for t in transfers
            ],
        )
