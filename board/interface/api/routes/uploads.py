"""Upload verification routes.

A video upload must be preceded by an email verification: request a code,
then submit it. The verified flow is spent by the next video upload.
"""

from datetime import datetime

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Request
from pydantic import BaseModel, Field

from board.application.usecase.auth import (
    SendVerificationCodeRequest,
    SendVerificationCodeResponse,
    SendVerificationCodeUseCase,
    VerifyCodeRequest,
    VerifyCodeResponse,
    VerifyCodeUseCase,
)
from board.domain.service import JWTService
from board.domain.value import VerificationState
from board.interface.api.session import require_user_id
from board.interface.api.upload_flows import UploadFlowRegistry

router = APIRouter(prefix="/uploads", tags=["uploads"], route_class=DishkaRoute)


class VerifyCodeBody(BaseModel):
    """Verification code submitted by the user."""

    code: str = Field(min_length=1, max_length=12)


class UploadFlowResponse(BaseModel):
    """State of the user's upload flow."""

    state: VerificationState
    expires_at: datetime | None


@router.post("/verification", response_model=SendVerificationCodeResponse)
async def send_verification_code(
    request: Request,
    send_code_use_case: FromDishka[SendVerificationCodeUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> SendVerificationCodeResponse:
    """Email a fresh one-time code for the user's upload flow.

    Requires authentication. Replaces any outstanding code.
    """
    user_id = require_user_id(jwt_service, auth_token, "upload")
    flows: UploadFlowRegistry = request.app.state.upload_flows

    return await send_code_use_case.execute(
        SendVerificationCodeRequest(user_id=user_id, gate=flows.gate_for(user_id))
    )


@router.post("/verification/verify", response_model=VerifyCodeResponse)
async def verify_code(
    body: VerifyCodeBody,
    request: Request,
    verify_code_use_case: FromDishka[VerifyCodeUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> VerifyCodeResponse:
    """Submit the one-time code for the user's upload flow.

    Requires authentication. A wrong code may be retried until it expires.
    """
    user_id = require_user_id(jwt_service, auth_token, "upload")
    flows: UploadFlowRegistry = request.app.state.upload_flows

    return await verify_code_use_case.execute(
        VerifyCodeRequest(gate=flows.gate_for(user_id), code=body.code)
    )


@router.get("/verification", response_model=UploadFlowResponse)
async def get_upload_flow(
    request: Request,
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> UploadFlowResponse:
    """Report where the user's upload flow stands."""
    user_id = require_user_id(jwt_service, auth_token)
    flows: UploadFlowRegistry = request.app.state.upload_flows

    gate = flows.peek(user_id)
    if gate is None:
        return UploadFlowResponse(state=VerificationState.IDLE, expires_at=None)
    return UploadFlowResponse(state=gate.state, expires_at=gate.expires_at)
