"""Authentication-adjacent routes: password reset and sign-in recording."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header, HTTPException, Request, status
from pydantic import BaseModel, Field

from board.application.usecase.auth import (
    RecordLoginRequest,
    RecordLoginResponse,
    RecordLoginUseCase,
    RequestPasswordResetRequest,
    RequestPasswordResetResponse,
    RequestPasswordResetUseCase,
)
from board.domain.service import JWTService
from board.interface.api.session import require_user_id

router = APIRouter(prefix="/auth", tags=["auth"], route_class=DishkaRoute)


class PasswordResetBody(BaseModel):
    """Password reset request body."""

    email: str = Field(min_length=3, max_length=255)


class RecordLoginBody(BaseModel):
    """Sign-in details reported by the client after the identity provider accepts it."""

    platform: str = ""


@router.post("/password-reset", response_model=RequestPasswordResetResponse)
async def request_password_reset(
    body: PasswordResetBody,
    password_reset_use_case: FromDishka[RequestPasswordResetUseCase],
) -> RequestPasswordResetResponse:
    """Send a newly generated password to the account's email.

    Public endpoint, limited to one request per account per day.

    Args:
        body: Account email
        password_reset_use_case: Password reset use case from DI

    Returns:
        Delivery confirmation
    """
    return await password_reset_use_case.execute(
        RequestPasswordResetRequest(email=body.email)
    )


@router.post(
    "/logins",
    response_model=RecordLoginResponse,
    status_code=status.HTTP_201_CREATED,
)
async def record_login(
    body: RecordLoginBody,
    request: Request,
    record_login_use_case: FromDishka[RecordLoginUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    user_agent: str = Header(default=""),
) -> RecordLoginResponse:
    """Record a sign-in in the user's login history.

    Requires authentication. Mobile devices may only sign in during the
    mobile access window.

    Args:
        body: Client-reported platform
        request: Incoming request, for the client address
        record_login_use_case: Record login use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie
        user_agent: User-Agent header

    Returns:
        The recorded entry
    """
    user_id = require_user_id(jwt_service, auth_token)

    try:
        login_request = RecordLoginRequest(
            user_id=user_id,
            user_agent=user_agent,
            platform=body.platform,
            ip_address=request.client.host if request.client else "",
        )
        return await record_login_use_case.execute(login_request)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
