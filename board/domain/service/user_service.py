"""User domain service."""

import logfire

from board.domain.error import NotFoundError
from board.domain.model import LoginHistoryEntry, User
from board.domain.repository import LoginHistoryRepository, UserRepository
from board.domain.value import Language, UserId

from .base import Service


class UserService(Service):
    """Domain service for user profile operations."""

    def __init__(
        self,
        user_repository: UserRepository,
        login_history_repository: LoginHistoryRepository,
    ) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
            login_history_repository: Login history repository
        """
        self.user_repository = user_repository
        self.login_history_repository = login_history_repository

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User entity

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            return user

    async def get_user_by_email(self, email: str) -> User | None:
        """Get user by email.

        Args:
            email: User email

        Returns:
            User if found, None otherwise
        """
        with logfire.span("user_service.get_user_by_email"):
            user = await self.user_repository.find_by_email(email)
            if user:
                logfire.info("User found by email", user_id=str(user.id))
            else:
                logfire.warn("User not found by email")
            return user

    async def update_language(self, user_id: UserId, language: Language) -> User:
        """Set a user's preferred language.

        Args:
            user_id: User ID
            language: New language

        Returns:
            Updated user

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span(
            "user_service.update_language", user_id=str(user_id), language=language.value
        ):
            user = await self.get_by_id(user_id)
            await self.user_repository.update_language(user_id, language)
            logfire.info("Language updated", user_id=str(user_id), language=language.value)
            return user.model_copy(update={"preferred_language": language})

    async def record_login(self, entry: LoginHistoryEntry) -> LoginHistoryEntry:
        """Append a sign-in record."""
        with logfire.span(
            "user_service.record_login",
            user_id=str(entry.user_id),
            device_type=entry.device_type.value,
        ):
            return await self.login_history_repository.append(entry)

    async def get_login_history(self, user_id: UserId, limit: int = 20) -> list[LoginHistoryEntry]:
        """List a user's sign-ins, newest first."""
        with logfire.span("user_service.get_login_history", user_id=str(user_id)):
            return await self.login_history_repository.find_by_user(user_id, limit=limit)
