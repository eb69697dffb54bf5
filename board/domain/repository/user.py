"""User repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from board.domain.model.user import User
from board.domain.value import Language, UserId


class UserRepository(ABC):
    """Repository for User aggregate.

    Defines the contract for user persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_id_for_update(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID and lock the row until the transaction ends.

        Used by read-check-write sequences (rate limiting, transfers) so
        concurrent callers cannot both pass a check against stale state.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by email (case-insensitive).

        Args:
            email: Email address

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update identity fields).

        Args:
            user: The user to save

        Returns:
            The saved user
        """
        pass

    @abstractmethod
    async def update_password_reset_state(
        self, user_id: UserId, count: int, reset_at: Optional[datetime]
    ) -> None:
        """Persist the password reset counter and its period start.

        Args:
            user_id: The user's ID
            count: Resets consumed in the current period
            reset_at: Start of the current period
        """
        pass

    @abstractmethod
    async def update_language(self, user_id: UserId, language: Language) -> None:
        """Persist the user's preferred language.

        Args:
            user_id: The user's ID
            language: Validated language code
        """
        pass
