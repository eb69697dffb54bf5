"""Points routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, status
from pydantic import BaseModel, Field

from board.application.usecase.points import (
    TransferPointsRequest,
    TransferPointsResponse,
    TransferPointsUseCase,
)
from board.domain.service import JWTService
from board.interface.api.session import require_user_id

router = APIRouter(prefix="/points", tags=["points"], route_class=DishkaRoute)


class TransferPointsBody(BaseModel):
    """Transfer request body."""

    recipient_email: str = Field(min_length=1, max_length=255)
    amount: int


@router.post(
    "/transfers",
    response_model=TransferPointsResponse,
    status_code=status.HTTP_201_CREATED,
)
async def transfer_points(
    body: TransferPointsBody,
    transfer_use_case: FromDishka[TransferPointsUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> TransferPointsResponse:
    """Send points to another user, addressed by email.

    Requires authentication. A rejected transfer answers 422 with the
    reason (404 when the recipient does not exist) and changes nothing.

    Args:
        body: Recipient email and amount
        transfer_use_case: Transfer points use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        The recorded transfer
    """
    user_id = require_user_id(jwt_service, auth_token, "transfer points")
    return await transfer_use_case.execute(
        TransferPointsRequest(
            from_user_id=user_id,
            recipient_email=body.recipient_email,
            amount=body.amount,
        )
    )
