"""In-memory login history repository for testing."""

from board.domain.model.login_history import LoginHistoryEntry
from board.domain.repository.login_history import LoginHistoryRepository
from board.domain.value import UserId

from .database import InMemoryDatabase


class InMemoryLoginHistoryRepository(LoginHistoryRepository):
    """In-memory implementation of LoginHistoryRepository for testing."""

    def __init__(self, database: InMemoryDatabase | None = None) -> None:
        self.database = database or InMemoryDatabase()

    async def append(self, entry: LoginHistoryEntry) -> LoginHistoryEntry:
        """Append a sign-in record."""
        self.database.login_history.append(entry)
        return entry

    async def find_by_user(self, user_id: UserId, limit: int = 20) -> list[LoginHistoryEntry]:
        """Find a user's sign-ins, newest first."""
        entries = [e for e in self.database.login_history if e.user_id == user_id]
        entries.sort(key=lambda e: e.login_at, reverse=True)
        return entries[:limit]
