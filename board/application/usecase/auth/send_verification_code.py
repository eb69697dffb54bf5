"""Send verification code use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from board.config import StoreSettings
from board.domain.error import VerificationStateError
from board.domain.service import CredentialService, UserService, VerificationGate
from board.domain.value import UserId

from ..base import BaseUseCase, store_timeout


class SendVerificationCodeRequest(BaseModel):
    """Send verification code request."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    user_id: str  # User ID from authenticated user
    gate: VerificationGate


class SendVerificationCodeResponse(BaseModel):
    """Send verification code response."""

    expires_at: datetime


class SendVerificationCodeUseCase(BaseUseCase):
    """Issues a code on the flow's gate and sends it to the user's email."""

    def __init__(
        self,
        user_service: UserService,
        credential_service: CredentialService,
        store_settings: StoreSettings,
    ) -> None:
        """Initialize send verification code use case.

        Args:
            user_service: User domain service
            credential_service: Credential delivery service
            store_settings: Store call limits
        """
        self.user_service = user_service
        self.credential_service = credential_service
        self.store_settings = store_settings

    async def execute(
        self, request: SendVerificationCodeRequest
    ) -> SendVerificationCodeResponse:
        """Execute send verification code flow.

        Issuing again replaces any outstanding code.

        Args:
            request: Send verification code request

        Returns:
            When the new code stops being accepted

        Raises:
            NotFoundError: If the user does not exist
            VerificationStateError: If the gate is already verified
            DeliveryError: If the code could not be delivered
        """
        user = await store_timeout(
            self.user_service.get_by_id(UserId(UUID(request.user_id))),
            self.store_settings.operation_timeout_seconds,
            "send_verification_code",
        )

        code = request.gate.issue()
        await self.credential_service.send_verification_code(user.email, code)

        expires_at = request.gate.expires_at
        if expires_at is None:
            raise VerificationStateError("No code outstanding after issue")
        return SendVerificationCodeResponse(expires_at=expires_at)
