"""Unit tests for RequestPasswordResetUseCase."""

from datetime import datetime, timedelta

import pytest

from board.application.usecase.auth import (
    RequestPasswordResetRequest,
    RequestPasswordResetUseCase,
)
from board.domain.error import NotFoundError, RateLimitedError
from board.domain.repository import UserRepository
from board.domain.service import SecretDeliveryChannel
from tests.conftest import make_user
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()

NOON = datetime(2026, 3, 14, 12, 0)


class TestRequestPasswordReset:
    """Tests for the password reset flow."""

    @pytest.mark.asyncio
    async def test_reset_delivers_new_password(self, unit_env):
        use_case = await unit_env.get(RequestPasswordResetUseCase)
        user_repo = await unit_env.get(UserRepository)
        channel = await unit_env.get(SecretDeliveryChannel)
        await user_repo.save(make_user(email="ada@example.com"))

        response = await use_case.execute(
            RequestPasswordResetRequest(email="Ada@Example.com", now=NOON)
        )

        assert response.delivered
        delivered = channel.last_for("ada@example.com")
        assert len(delivered.secret) == 12
        assert delivered.secret.isalpha()

    @pytest.mark.asyncio
    async def test_second_reset_same_day_is_rate_limited(self, unit_env):
        use_case = await unit_env.get(RequestPasswordResetUseCase)
        user_repo = await unit_env.get(UserRepository)
        channel = await unit_env.get(SecretDeliveryChannel)
        await user_repo.save(make_user(email="ada@example.com"))
        await use_case.execute(RequestPasswordResetRequest(email="ada@example.com", now=NOON))

        with pytest.raises(RateLimitedError) as exc_info:
            await use_case.execute(
                RequestPasswordResetRequest(
                    email="ada@example.com", now=NOON + timedelta(hours=1)
                )
            )

        assert exc_info.value.retry_after == timedelta(hours=23)
        assert "once per day" in str(exc_info.value)
        assert len(channel.delivered) == 1

    @pytest.mark.asyncio
    async def test_reset_next_day_is_allowed(self, unit_env):
        use_case = await unit_env.get(RequestPasswordResetUseCase)
        user_repo = await unit_env.get(UserRepository)
        channel = await unit_env.get(SecretDeliveryChannel)
        await user_repo.save(make_user(email="ada@example.com"))
        await use_case.execute(RequestPasswordResetRequest(email="ada@example.com", now=NOON))

        await use_case.execute(
            RequestPasswordResetRequest(
                email="ada@example.com", now=NOON + timedelta(days=1)
            )
        )

        assert len(channel.delivered) == 2

    @pytest.mark.asyncio
    async def test_unknown_email_is_not_found(self, unit_env):
        use_case = await unit_env.get(RequestPasswordResetUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                RequestPasswordResetRequest(email="nobody@example.com", now=NOON)
            )
