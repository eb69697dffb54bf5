"""In-memory points transfer repository for testing."""

from board.domain.model.points_transfer import PointsTransfer
from board.domain.repository.points_transfer import PointsTransferRepository
from board.domain.value import UserId

from .database import InMemoryDatabase


class InMemoryPointsTransferRepository(PointsTransferRepository):
    """In-memory implementation of PointsTransferRepository for testing.

    Balances live on the shared user table, so ``apply`` mutates both users
    and appends the record without awaiting in between.
    """

    def __init__(self, database: InMemoryDatabase | None = None) -> None:
        self.database = database or InMemoryDatabase()

    async def apply(self, transfer: PointsTransfer) -> bool:
        """Debit, credit and append as one step."""
        users = self.database.users
        sender = users.get(transfer.from_user_id)
        recipient = users.get(transfer.to_user_id)
        if not sender or not recipient or sender.points < transfer.amount:
            return False

        users[sender.id] = sender.model_copy(
            update={"points": sender.points - transfer.amount}
        )
        users[recipient.id] = recipient.model_copy(
            update={"points": recipient.points + transfer.amount}
        )
        self.database.points_transfers.append(transfer)
        return True

    async def find_by_user(self, user_id: UserId, limit: int = 50) -> list[PointsTransfer]:
        """Find transfers sent or received by a user, newest first."""
        transfers = [
            t
            for t in self.database.points_transfers
            if user_id in (t.from_user_id, t.to_user_id)
        ]
        transfers.sort(key=lambda t: t.created_at, reverse=True)
        return transfers[:limit]
