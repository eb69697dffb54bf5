"""PostgreSQL implementation of PointsTransfer repository."""

from typing import List

import logfire
from sqlalchemy import desc, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from board.domain.model import PointsTransfer
from board.domain.repository import PointsTransferRepository
from board.domain.value import UserId
from board.persistence.error import store_errors
from board.persistence.mappers import points_transfer_to_dict, row_to_points_transfer
from board.persistence.tables import points_transfers_table, users_table


class _DebitRefused(Exception):
    """Guarded debit matched no row; unwinds the savepoint."""


class PostgresPointsTransferRepository(PointsTransferRepository):
    """PostgreSQL implementation of PointsTransferRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def apply(self, transfer: PointsTransfer) -> bool:
        """Apply debit, credit and audit insert inside one SAVEPOINT.

        The debit only matches while ``points >= amount``, so the balance
        check is re-evaluated by the database at write time.
        """
        with logfire.span(
            "points_transfer_repository.apply",
            transfer_id=str(transfer.id),
            amount=transfer.amount,
        ):
            with store_errors("points_transfer_repository.apply"):
                try:
                    async with self.session.begin_nested():
                        debit = await self.session.execute(
                            update(users_table)
                            .where(users_table.c.id == transfer.from_user_id)
                            .where(users_table.c.points >= transfer.amount)
                            .values(points=users_table.c.points - transfer.amount)
                        )
                        if debit.rowcount != 1:
                            raise _DebitRefused()

                        await self.session.execute(
                            update(users_table)
                            .where(users_table.c.id == transfer.to_user_id)
                            .values(points=users_table.c.points + transfer.amount)
                        )
                        await self.session.execute(
                            points_transfers_table.insert().values(
                                **points_transfer_to_dict(transfer)
                            )
                        )
                except _DebitRefused:
                    logfire.warn(
                        "Guarded debit refused", from_user_id=str(transfer.from_user_id)
                    )
                    return False

                return True

    async def find_by_user(self, user_id: UserId, limit: int = 50) -> List[PointsTransfer]:
        """Find transfers sent or received by a user, newest first."""
        with store_errors("points_transfer_repository.find_by_user"):
            stmt = (
                select(points_transfers_table)
                .where(
                    or_(
                        points_transfers_table.c.from_user_id == user_id,
                        points_transfers_table.c.to_user_id == user_id,
                    )
                )
                .order_by(desc(points_transfers_table.c.created_at))
                .limit(limit)
            )
            result = await self.session.execute(stmt)
            return [row_to_points_transfer(dict(row)) for row in result.mappings()]
