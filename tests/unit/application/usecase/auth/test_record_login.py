"""Unit tests for RecordLoginUseCase."""

from datetime import datetime
from uuid import uuid4

import pytest

from board.application.usecase.auth import RecordLoginRequest, RecordLoginUseCase
from board.domain.error import PolicyDeniedError
from board.domain.repository import LoginHistoryRepository
from board.domain.value import DeviceType, UserId
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()

IPHONE = "Mozilla/5.0 (iPhone; CPU iPhone OS 17_0 like Mac OS X) Mobile/15E148"
DESKTOP = "Mozilla/5.0 (X11; Linux x86_64) Gecko/20100101 Firefox/120.0"


class TestRecordLogin:
    """Tests for sign-in recording and the mobile window."""

    @pytest.mark.asyncio
    async def test_mobile_login_inside_window_is_recorded(self, unit_env):
        use_case = await unit_env.get(RecordLoginUseCase)
        history_repo = await unit_env.get(LoginHistoryRepository)
        user_id = uuid4()

        response = await use_case.execute(
            RecordLoginRequest(
                user_id=str(user_id),
                user_agent=IPHONE,
                platform="iOS",
                ip_address="203.0.113.7",
                now=datetime(2026, 3, 14, 11, 0),
            )
        )

        assert response.device_type is DeviceType.MOBILE
        entries = await history_repo.find_by_user(UserId(user_id))
        assert len(entries) == 1
        assert entries[0].ip_address == "203.0.113.7"

    @pytest.mark.asyncio
    async def test_mobile_login_outside_window_is_denied(self, unit_env):
        use_case = await unit_env.get(RecordLoginUseCase)
        history_repo = await unit_env.get(LoginHistoryRepository)
        user_id = uuid4()

        with pytest.raises(PolicyDeniedError):
            await use_case.execute(
                RecordLoginRequest(
                    user_id=str(user_id),
                    user_agent=IPHONE,
                    now=datetime(2026, 3, 14, 13, 0),
                )
            )

        assert await history_repo.find_by_user(UserId(user_id)) == []

    @pytest.mark.asyncio
    async def test_desktop_login_is_allowed_any_time(self, unit_env):
        use_case = await unit_env.get(RecordLoginUseCase)

        response = await use_case.execute(
            RecordLoginRequest(
                user_id=str(uuid4()),
                user_agent=DESKTOP,
                now=datetime(2026, 3, 14, 23, 0),
            )
        )

        assert response.device_type is DeviceType.DESKTOP

    @pytest.mark.parametrize(
        "user_agent,expected",
        [
            (IPHONE, DeviceType.MOBILE),
            ("Mozilla/5.0 (iPad; CPU OS 17_0 like Mac OS X)", DeviceType.MOBILE),
            ("Mozilla/5.0 (Linux; Android 14; Pixel 8)", DeviceType.MOBILE),
            (DESKTOP, DeviceType.DESKTOP),
            ("", DeviceType.DESKTOP),
        ],
    )
    def test_device_classification(self, user_agent, expected):
        assert DeviceType.from_user_agent(user_agent) is expected
