"""Vote routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, status

from board.application.usecase.vote import (
    UpvoteAnswerRequest,
    UpvoteAnswerResponse,
    UpvoteAnswerUseCase,
)
from board.domain.service import JWTService
from board.interface.api.session import require_user_id

router = APIRouter(tags=["votes"], route_class=DishkaRoute)


@router.post("/answers/{answer_id}/upvote", response_model=UpvoteAnswerResponse)
async def upvote_answer(
    answer_id: str,
    upvote_use_case: FromDishka[UpvoteAnswerUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> UpvoteAnswerResponse:
    """Upvote an answer.

    Requires authentication. Every call adds one vote.

    Args:
        answer_id: Answer UUID
        upvote_use_case: Upvote use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        The answer's count right after the increment
    """
    require_user_id(jwt_service, auth_token, "vote")

    try:
        request = UpvoteAnswerRequest(answer_id=answer_id)
        return await upvote_use_case.execute(request)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
