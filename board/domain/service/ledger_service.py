"""Points ledger domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from board.domain.error import NotFoundError
from board.domain.model import PointsTransfer
from board.domain.repository import PointsTransferRepository, UserRepository
from board.domain.value import LedgerRejection, PointsTransferId, UserId
from board.domain.value.outcome import TransferOutcome
from board.util.locking import KeyedLock

from .base import Service


class PointsLedgerService(Service):
    """Moves points between users without overdraft.

    Both parties are locked in id order for the whole check-then-apply
    sequence. The repository applies debit, credit and the audit record as
    one unit and re-checks the sender balance in the debit itself.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        transfer_repository: PointsTransferRepository,
        locks: KeyedLock,
        minimum_standing: int = 10,
    ) -> None:
        """Initialize ledger service.

        Args:
            user_repository: User repository
            transfer_repository: Points transfer repository
            locks: Shared per-subject lock map
            minimum_standing: Balance a sender must hold to transfer at all
        """
        self.user_repository = user_repository
        self.transfer_repository = transfer_repository
        self.locks = locks
        self.minimum_standing = minimum_standing

    async def transfer(
        self, from_user_id: UserId, to_user_id: UserId | None, amount: int
    ) -> TransferOutcome:
        """Transfer points from one user to another.

        Checks run in a fixed order and the first failure is reported.
        Nothing is written unless every check passes.

        Args:
            from_user_id: Sender
            to_user_id: Recipient, or None when the recipient could not be resolved
            amount: Points to move

        Returns:
            The applied transfer, or the rejection reason

        Raises:
            NotFoundError: If the sender does not exist
            StoreUnavailableError: If the store cannot be reached
        """
        with logfire.span(
            "ledger_service.transfer",
            from_user_id=str(from_user_id),
            to_user_id=str(to_user_id) if to_user_id else None,
            amount=amount,
        ):
            if amount <= 0:
                return self._reject(LedgerRejection.AMOUNT_NOT_POSITIVE)
            if from_user_id == to_user_id:
                return self._reject(LedgerRejection.SELF_TRANSFER)

            parties = [from_user_id] if to_user_id is None else [from_user_id, to_user_id]
            async with self.locks.hold(*parties):
                # Row locks in the same order as the key locks
                users = {}
                for user_id in sorted(parties, key=str):
                    users[user_id] = await self.user_repository.find_by_id_for_update(user_id)
                sender = users[from_user_id]
                recipient = users.get(to_user_id) if to_user_id else None

                if not sender:
                    logfire.warn("Transfer sender not found", user_id=str(from_user_id))
                    raise NotFoundError("User", str(from_user_id))
                if sender.points < self.minimum_standing:
                    return self._reject(LedgerRejection.INSUFFICIENT_STANDING)
                if sender.points < amount:
                    return self._reject(LedgerRejection.INSUFFICIENT_AMOUNT)
                if not recipient:
                    return self._reject(LedgerRejection.RECIPIENT_NOT_FOUND)

                transfer = PointsTransfer(
                    id=PointsTransferId(uuid4()),
                    from_user_id=from_user_id,
                    to_user_id=recipient.id,
                    amount=amount,
                    created_at=datetime.now(),
                )
                if not await self.transfer_repository.apply(transfer):
                    # Guarded debit refused: balance changed outside our locks
                    return self._reject(LedgerRejection.INSUFFICIENT_AMOUNT)

                logfire.info(
                    "Points transferred",
                    transfer_id=str(transfer.id),
                    from_user_id=str(from_user_id),
                    to_user_id=str(to_user_id),
                    amount=amount,
                )
                return TransferOutcome.applied(transfer)

    async def history(self, user_id: UserId, limit: int = 50) -> list[PointsTransfer]:
        """List transfers sent or received by a user, newest first.

        Args:
            user_id: User ID
            limit: Maximum number of records

        Returns:
            List of transfers
        """
        with logfire.span("ledger_service.history", user_id=str(user_id)):
            return await self.transfer_repository.find_by_user(user_id, limit=limit)

    def _reject(self, reason: LedgerRejection) -> TransferOutcome:
        logfire.info("Transfer rejected", reason=reason.value)
        return TransferOutcome.rejected(reason)
