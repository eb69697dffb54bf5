"""Login history repository interface."""

from abc import ABC, abstractmethod
from typing import List

from board.domain.model.login_history import LoginHistoryEntry
from board.domain.value import UserId


class LoginHistoryRepository(ABC):
    """Repository for append-only sign-in records."""

    @abstractmethod
    async def append(self, entry: LoginHistoryEntry) -> LoginHistoryEntry:
        """Append a sign-in record.

        Args:
            entry: The entry to append

        Returns:
            The stored entry
        """
        pass

    @abstractmethod
    async def find_by_user(self, user_id: UserId, limit: int = 20) -> List[LoginHistoryEntry]:
        """Find a user's sign-ins, newest first."""
        pass
