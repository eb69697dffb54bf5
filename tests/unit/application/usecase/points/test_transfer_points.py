"""Unit tests for TransferPointsUseCase."""

from uuid import uuid4

import pytest

from board.application.usecase.points import TransferPointsRequest, TransferPointsUseCase
from board.domain.error import LedgerRejectedError, NotFoundError
from board.domain.repository import UserRepository
from board.domain.value import LedgerRejection
from tests.conftest import make_user
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


class TestTransferPoints:
    """Tests for sending points by recipient email."""

    @pytest.mark.asyncio
    async def test_transfer_by_email_moves_points(self, unit_env):
        use_case = await unit_env.get(TransferPointsUseCase)
        user_repo = await unit_env.get(UserRepository)
        sender = await user_repo.save(make_user(points=20))
        recipient = await user_repo.save(make_user(email="grace@example.com", points=0))

        response = await use_case.execute(
            TransferPointsRequest(
                from_user_id=str(sender.id),
                recipient_email="GRACE@example.com",
                amount=5,
            )
        )

        assert response.to_user_id == str(recipient.id)
        assert response.amount == 5
        assert (await user_repo.find_by_id(sender.id)).points == 15
        assert (await user_repo.find_by_id(recipient.id)).points == 5

    @pytest.mark.asyncio
    async def test_unknown_recipient_is_rejected(self, unit_env):
        use_case = await unit_env.get(TransferPointsUseCase)
        user_repo = await unit_env.get(UserRepository)
        sender = await user_repo.save(make_user(points=20))

        with pytest.raises(LedgerRejectedError) as exc_info:
            await use_case.execute(
                TransferPointsRequest(
                    from_user_id=str(sender.id),
                    recipient_email="nobody@example.com",
                    amount=5,
                )
            )

        assert exc_info.value.reason is LedgerRejection.RECIPIENT_NOT_FOUND
        assert (await user_repo.find_by_id(sender.id)).points == 20

    @pytest.mark.asyncio
    async def test_sender_checks_come_before_recipient_lookup(self, unit_env):
        use_case = await unit_env.get(TransferPointsUseCase)
        user_repo = await unit_env.get(UserRepository)
        sender = await user_repo.save(make_user(points=5))

        with pytest.raises(LedgerRejectedError) as exc_info:
            await use_case.execute(
                TransferPointsRequest(
                    from_user_id=str(sender.id),
                    recipient_email="nobody@example.com",
                    amount=1,
                )
            )

        assert exc_info.value.reason is LedgerRejection.INSUFFICIENT_STANDING

    @pytest.mark.asyncio
    async def test_amount_above_balance_is_rejected(self, unit_env):
        use_case = await unit_env.get(TransferPointsUseCase)
        user_repo = await unit_env.get(UserRepository)
        sender = await user_repo.save(make_user(points=12))
        await user_repo.save(make_user(email="grace@example.com"))

        with pytest.raises(LedgerRejectedError) as exc_info:
            await use_case.execute(
                TransferPointsRequest(
                    from_user_id=str(sender.id),
                    recipient_email="grace@example.com",
                    amount=13,
                )
            )

        assert exc_info.value.reason is LedgerRejection.INSUFFICIENT_AMOUNT

    @pytest.mark.asyncio
    async def test_unknown_sender_is_not_found(self, unit_env):
        use_case = await unit_env.get(TransferPointsUseCase)
        user_repo = await unit_env.get(UserRepository)
        await user_repo.save(make_user(email="grace@example.com"))

        with pytest.raises(NotFoundError):
            await use_case.execute(
                TransferPointsRequest(
                    from_user_id=str(uuid4()),
                    recipient_email="grace@example.com",
                    amount=1,
                )
            )
