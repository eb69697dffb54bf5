"""In-memory user repository for testing."""

from datetime import datetime
from typing import Optional

from board.domain.model.user import User
from board.domain.repository.user import UserRepository
from board.domain.value import Language, UserId

from .database import InMemoryDatabase


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self, database: InMemoryDatabase | None = None) -> None:
        self.database = database or InMemoryDatabase()

    @property
    def _users(self) -> dict[UserId, User]:
        return self.database.users

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def find_by_id_for_update(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID. Row locks have no in-memory counterpart."""
        return self._users.get(user_id)

    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by their email, ignoring case."""
        wanted = email.strip().lower()
        for user in self._users.values():
            if user.email.lower() == wanted:
                return user
        return None

    async def save(self, user: User) -> User:
        """Save or update a user."""
        self._users[user.id] = user
        return user

    async def update_password_reset_state(
        self, user_id: UserId, count: int, reset_at: Optional[datetime]
    ) -> None:
        """Persist the password reset counter and its period start."""
        user = self._users.get(user_id)
        if user:
            self._users[user_id] = user.model_copy(
                update={"password_reset_count": count, "password_reset_at": reset_at}
            )

    async def update_language(self, user_id: UserId, language: Language) -> None:
        """Persist the user's preferred language."""
        user = self._users.get(user_id)
        if user:
            self._users[user_id] = user.model_copy(
                update={"preferred_language": language}
            )
