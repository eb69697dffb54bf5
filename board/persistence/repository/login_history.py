"""PostgreSQL implementation of LoginHistory repository."""

from typing import List

from sqlalchemy import desc, select
from sqlalchemy.ext.asyncio import AsyncSession

from board.domain.model import LoginHistoryEntry
from board.domain.repository import LoginHistoryRepository
from board.domain.value import UserId
from board.persistence.error import store_errors
from board.persistence.mappers import (
    login_history_entry_to_dict,
    row_to_login_history_entry,
)
from board.persistence.tables import login_history_table


class PostgresLoginHistoryRepository(LoginHistoryRepository):
    """PostgreSQL implementation of LoginHistoryRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def append(self, entry: LoginHistoryEntry) -> LoginHistoryEntry:
        """Append a sign-in record."""
        with store_errors("login_history_repository.append"):
            stmt = login_history_table.insert().values(**login_history_entry_to_dict(entry))
            await self.session.execute(stmt)
            await self.session.flush()
            return entry

    async def find_by_user(self, user_id: UserId, limit: int = 20) -> List[LoginHistoryEntry]:
        """Find a user's sign-ins, newest first."""
        with store_errors("login_history_repository.find_by_user"):
            stmt = (
                select(login_history_table)
                .where(login_history_table.c.user_id == user_id)
                .order_by(desc(login_history_table.c.login_at))
                .limit(limit)
            )
            result = await self.session.execute(stmt)
            return [row_to_login_history_entry(dict(row)) for row in result.mappings()]
