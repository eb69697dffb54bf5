"""Record login use case."""

from datetime import datetime
from uuid import UUID, uuid4

from pydantic import BaseModel

from board.config import StoreSettings
from board.domain.error import PolicyDeniedError
from board.domain.model import LoginHistoryEntry
from board.domain.service import ClockPolicy, UserService
from board.domain.value import DeviceType, LoginHistoryEntryId, PolicyAction, UserId

from ..base import BaseUseCase, store_timeout


class RecordLoginRequest(BaseModel):
    """Record login request."""

    user_id: str  # User ID from the identity provider
    user_agent: str = ""
    platform: str = ""
    ip_address: str = ""
    now: datetime | None = None


class RecordLoginResponse(BaseModel):
    """Record login response."""

    entry_id: str
    device_type: DeviceType
    login_at: datetime


class RecordLoginUseCase(BaseUseCase):
    """Applies the mobile access window and records the sign-in."""

    def __init__(
        self,
        user_service: UserService,
        clock_policy: ClockPolicy,
        store_settings: StoreSettings,
    ) -> None:
        """Initialize record login use case.

        Args:
            user_service: User domain service
            clock_policy: Time-of-day policy
            store_settings: Store call limits
        """
        self.user_service = user_service
        self.clock_policy = clock_policy
        self.store_settings = store_settings

    async def execute(self, request: RecordLoginRequest) -> RecordLoginResponse:
        """Execute record login flow.

        Args:
            request: Record login request

        Returns:
            The stored history entry

        Raises:
            PolicyDeniedError: If a mobile device signs in outside the mobile window
            StoreUnavailableError: If the store cannot be reached in time
        """
        now = request.now or datetime.now()
        device_type = DeviceType.from_user_agent(request.user_agent)

        if device_type is DeviceType.MOBILE and not self.clock_policy.allowed(
            PolicyAction.MOBILE_ACCESS_WINDOW, now
        ):
            window = self.clock_policy.window(PolicyAction.MOBILE_ACCESS_WINDOW)
            raise PolicyDeniedError(
                PolicyAction.MOBILE_ACCESS_WINDOW, window.start_hour, window.end_hour
            )

        entry = LoginHistoryEntry(
            id=LoginHistoryEntryId(uuid4()),
            user_id=UserId(UUID(request.user_id)),
            device_type=device_type,
            browser=request.user_agent[:1000],
            os=request.platform[:255],
            ip_address=request.ip_address[:64],
            login_at=now,
        )
        saved = await store_timeout(
            self.user_service.record_login(entry),
            self.store_settings.operation_timeout_seconds,
            "record_login",
        )

        return RecordLoginResponse(
            entry_id=str(saved.id), device_type=saved.device_type, login_at=saved.login_at
        )
