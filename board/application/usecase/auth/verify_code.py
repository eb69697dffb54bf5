"""Verify code use case."""

from pydantic import BaseModel, ConfigDict

from board.domain.error import VerificationExpiredError, VerificationMismatchError
from board.domain.service import VerificationGate
from board.domain.value import VerificationResult

from ..base import BaseUseCase


class VerifyCodeRequest(BaseModel):
    """Verify code request."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    gate: VerificationGate
    code: str


class VerifyCodeResponse(BaseModel):
    """Verify code response."""

    verified: bool


class VerifyCodeUseCase(BaseUseCase):
    """Checks a code entered by the user against the flow's gate."""

    async def execute(self, request: VerifyCodeRequest) -> VerifyCodeResponse:
        """Execute verification.

        Args:
            request: Verify code request

        Returns:
            Verified response

        Raises:
            VerificationMismatchError: If the code does not match (retry allowed)
            VerificationExpiredError: If the code expired (re-issue needed)
            VerificationStateError: If no code is outstanding
        """
        result = request.gate.verify(request.code.strip())
        if result is VerificationResult.MISMATCH:
            raise VerificationMismatchError()
        if result is VerificationResult.EXPIRED:
            raise VerificationExpiredError()
        return VerifyCodeResponse(verified=True)
