"""User profile routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie
from pydantic import BaseModel

from board.application.usecase.profile import (
    GetProfileRequest,
    GetProfileResponse,
    GetProfileUseCase,
    UpdateLanguageRequest,
    UpdateLanguageResponse,
    UpdateLanguageUseCase,
)
from board.domain.service import JWTService
from board.interface.api.session import require_user_id

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


class UpdateLanguageBody(BaseModel):
    """Preferred language body, as a language code."""

    language: str


@router.get("/me", response_model=GetProfileResponse)
async def get_current_user_profile(
    get_profile_use_case: FromDishka[GetProfileUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> GetProfileResponse:
    """Get the current user's profile.

    Returns points balance, preferred language, login history (newest
    first) and points transfers.
    """
    user_id = require_user_id(jwt_service, auth_token)
    return await get_profile_use_case.execute(GetProfileRequest(user_id=user_id))


@router.put("/me/language", response_model=UpdateLanguageResponse)
async def update_language(
    body: UpdateLanguageBody,
    update_language_use_case: FromDishka[UpdateLanguageUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> UpdateLanguageResponse:
    """Change the current user's preferred language."""
    user_id = require_user_id(jwt_service, auth_token)
    return await update_language_use_case.execute(
        UpdateLanguageRequest(user_id=user_id, language=body.language)
    )
