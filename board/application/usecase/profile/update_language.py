"""Update language use case."""

from uuid import UUID

from pydantic import BaseModel

from board.config import StoreSettings
from board.domain.error import ValidationError
from board.domain.service import UserService
from board.domain.value import Language, UserId

from ..base import BaseUseCase, store_timeout


class UpdateLanguageRequest(BaseModel):
    """Update language request.

    ``language`` is taken as a raw code and checked against the supported set.
    """

    user_id: str  # User ID from authenticated user
    language: str


class UpdateLanguageResponse(BaseModel):
    """Update language response."""

    user_id: str
    preferred_language: Language


class UpdateLanguageUseCase(BaseUseCase):
    """Use case for changing the interface language."""

    def __init__(self, user_service: UserService, store_settings: StoreSettings) -> None:
        """Initialize update language use case.

        Args:
            user_service: User domain service
            store_settings: Store call limits
        """
        self.user_service = user_service
        self.store_settings = store_settings

    async def execute(self, request: UpdateLanguageRequest) -> UpdateLanguageResponse:
        """Execute update language flow.

        Args:
            request: Update language request

        Returns:
            The stored language

        Raises:
            ValidationError: If the code is not a supported language
            NotFoundError: If the user does not exist
        """
        try:
            language = Language(request.language.strip().lower())
        except ValueError:
            supported = ", ".join(lang.value for lang in Language)
            raise ValidationError(
                f"Unsupported language '{request.language}', expected one of: {supported}"
            )

        user = await store_timeout(
            self.user_service.update_language(UserId(UUID(request.user_id)), language),
            self.store_settings.operation_timeout_seconds,
            "update_language",
        )
        return UpdateLanguageResponse(
            user_id=str(user.id), preferred_language=user.preferred_language
        )
