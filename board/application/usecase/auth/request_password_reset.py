"""Request password reset use case."""

from datetime import datetime, timedelta

from pydantic import BaseModel, Field

from board.config import StoreSettings
from board.domain.error import NotFoundError, RateLimitedError
from board.domain.service import CredentialService, RateLimitService, UserService

from ..base import BaseUseCase, store_timeout


class RequestPasswordResetRequest(BaseModel):
    """Request password reset request."""

    email: str = Field(min_length=3, max_length=255)
    now: datetime | None = None


class RequestPasswordResetResponse(BaseModel):
    """Request password reset response."""

    email: str
    delivered: bool


class RequestPasswordResetUseCase(BaseUseCase):
    """Generates a new password and sends it, at most once per period."""

    def __init__(
        self,
        user_service: UserService,
        rate_limit_service: RateLimitService,
        credential_service: CredentialService,
        store_settings: StoreSettings,
    ) -> None:
        """Initialize request password reset use case.

        Args:
            user_service: User domain service
            rate_limit_service: Password reset rate limiter
            credential_service: Credential delivery service
            store_settings: Store call limits
        """
        self.user_service = user_service
        self.rate_limit_service = rate_limit_service
        self.credential_service = credential_service
        self.store_settings = store_settings

    async def execute(
        self, request: RequestPasswordResetRequest
    ) -> RequestPasswordResetResponse:
        """Execute password reset flow.

        Args:
            request: Request password reset request

        Returns:
            Confirmation that a new password was sent

        Raises:
            NotFoundError: If no user has the email
            RateLimitedError: If a reset was already requested this period
            StoreUnavailableError: If the store cannot be reached in time
            DeliveryError: If the password could not be delivered
        """
        now = request.now or datetime.now()
        timeout = self.store_settings.operation_timeout_seconds

        user = await store_timeout(
            self.user_service.get_user_by_email(request.email),
            timeout,
            "request_password_reset",
        )
        if not user:
            raise NotFoundError("User", request.email)

        decision = await store_timeout(
            self.rate_limit_service.try_consume(user.id, now),
            timeout,
            "request_password_reset",
        )
        if not decision.allowed:
            raise RateLimitedError(
                decision.retry_after or timedelta(0),
                "You can only request a password reset once per day",
            )

        await self.credential_service.send_new_password(user.email)

        return RequestPasswordResetResponse(email=user.email, delivered=True)
