"""Points transfer repository interface."""

from abc import ABC, abstractmethod
from typing import List

from board.domain.model.points_transfer import PointsTransfer
from board.domain.value import UserId


class PointsTransferRepository(ABC):
    """Repository for the append-only points transfer ledger."""

    @abstractmethod
    async def apply(self, transfer: PointsTransfer) -> bool:
        """Debit the sender, credit the recipient and append the record.

        All three writes form one atomic unit. The debit is guarded so the
        sender's balance can never go below zero; if the guard fails
        nothing is written.

        Args:
            transfer: The transfer to apply

        Returns:
            True if applied, False if the guarded debit failed
        """
        pass

    @abstractmethod
    async def find_by_user(self, user_id: UserId, limit: int = 50) -> List[PointsTransfer]:
        """Find transfers sent or received by a user, newest first.

        Args:
            user_id: The user's ID
            limit: Maximum number of records

        Returns:
            List of transfers
        """
        pass
