"""Unit tests for GetProfileUseCase."""

from datetime import datetime

import pytest

from board.application.usecase.auth import RecordLoginRequest, RecordLoginUseCase
from board.application.usecase.points import TransferPointsRequest, TransferPointsUseCase
from board.application.usecase.profile import GetProfileRequest, GetProfileUseCase
from board.domain.repository import UserRepository
from board.domain.value import DeviceType, Language
from tests.conftest import make_user
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


class TestGetProfile:
    """Tests for the profile page data."""

    @pytest.mark.asyncio
    async def test_profile_includes_logins_and_transfers(self, unit_env):
        use_case = await unit_env.get(GetProfileUseCase)
        record_login = await unit_env.get(RecordLoginUseCase)
        transfer = await unit_env.get(TransferPointsUseCase)
        user_repo = await unit_env.get(UserRepository)
        user = await user_repo.save(make_user(email="ada@example.com", points=30))
        other = await user_repo.save(make_user(email="grace@example.com", points=0))

        await record_login.execute(
            RecordLoginRequest(
                user_id=str(user.id),
                user_agent="Mozilla/5.0 (X11; Linux x86_64) Firefox/120.0",
                platform="Linux",
                ip_address="198.51.100.2",
                now=datetime(2026, 3, 14, 20, 0),
            )
        )
        await transfer.execute(
            TransferPointsRequest(
                from_user_id=str(user.id), recipient_email=other.email, amount=10
            )
        )

        response = await use_case.execute(GetProfileRequest(user_id=str(user.id)))

        assert response.email == "ada@example.com"
        assert response.points == 20
        assert response.preferred_language is Language.ENGLISH
        assert len(response.login_history) == 1
        assert response.login_history[0].device_type is DeviceType.DESKTOP
        assert response.login_history[0].os == "Linux"
        assert len(response.transfers) == 1
        assert response.transfers[0].direction == "sent"
        assert response.transfers[0].counterparty_id == str(other.id)

    @pytest.mark.asyncio
    async def test_recipient_sees_received_transfer(self, unit_env):
        use_case = await unit_env.get(GetProfileUseCase)
        transfer = await unit_env.get(TransferPointsUseCase)
        user_repo = await unit_env.get(UserRepository)
        sender = await user_repo.save(make_user(points=30))
        recipient = await user_repo.save(make_user(email="grace@example.com"))

        await transfer.execute(
            TransferPointsRequest(
                from_user_id=str(sender.id), recipient_email=recipient.email, amount=3
            )
        )

        response = await use_case.execute(GetProfileRequest(user_id=str(recipient.id)))

        assert response.points == 3
        assert response.transfers[0].direction == "received"
        assert response.transfers[0].counterparty_id == str(sender.id)
