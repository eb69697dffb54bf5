"""PostgreSQL implementation of User repository."""

from datetime import datetime
from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from board.domain.model import User
from board.domain.repository import UserRepository
from board.domain.value import Language, UserId
from board.persistence.error import store_errors
from board.persistence.mappers import row_to_user, user_to_dict
from board.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: User ID to look up

        Returns:
            User if found, None otherwise
        """
        with store_errors("user_repository.find_by_id"):
            stmt = select(users_table).where(users_table.c.id == user_id)
            result = await self.session.execute(stmt)
            row = result.mappings().first()
            return row_to_user(dict(row)) if row else None

    async def find_by_id_for_update(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID, holding a row lock until the transaction ends."""
        with store_errors("user_repository.find_by_id_for_update"):
            stmt = (
                select(users_table)
                .where(users_table.c.id == user_id)
                .with_for_update()
            )
            result = await self.session.execute(stmt)
            row = result.mappings().first()
            return row_to_user(dict(row)) if row else None

    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by their email, ignoring case.

        Args:
            email: Email to search for

        Returns:
            User if found, None otherwise
        """
        with store_errors("user_repository.find_by_email"):
            stmt = select(users_table).where(
                func.lower(users_table.c.email) == email.strip().lower()
            )
            result = await self.session.execute(stmt)
            row = result.mappings().first()
            return row_to_user(dict(row)) if row else None

    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Args:
            user: User to save

        Returns:
            Saved user
        """
        with store_errors("user_repository.save"):
            existing = await self.find_by_id(user.id)

            user_dict = user_to_dict(user)

            if existing:
                stmt = (
                    users_table.update()
                    .where(users_table.c.id == user.id)
                    .values(**user_dict)
                )
            else:
                stmt = users_table.insert().values(**user_dict)
            await self.session.execute(stmt)

            await self.session.flush()
            return user

    async def update_password_reset_state(
        self, user_id: UserId, count: int, reset_at: Optional[datetime]
    ) -> None:
        """Persist the password reset counter and its period start."""
        with store_errors("user_repository.update_password_reset_state"):
            stmt = (
                users_table.update()
                .where(users_table.c.id == user_id)
                .values(password_reset_count=count, password_reset_at=reset_at)
            )
            await self.session.execute(stmt)
            await self.session.flush()

    async def update_language(self, user_id: UserId, language: Language) -> None:
        """Persist the user's preferred language."""
        with store_errors("user_repository.update_language"):
            stmt = (
                users_table.update()
                .where(users_table.c.id == user_id)
                .values(preferred_language=language.value)
            )
            await self.session.execute(stmt)
            await self.session.flush()
