"""Unit tests for CredentialService."""

import string

import pytest

from board.adapter.delivery import MockSecretDeliveryChannel
from board.adapter.error import DeliveryError
from board.domain.service import CredentialService, SecretDeliveryChannel
from board.domain.service.credential_service import PASSWORD_LENGTH, generate_password
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


class TestGeneratePassword:
    """Tests for generate_password."""

    def test_password_is_twelve_letters(self):
        for _ in range(50):
            password = generate_password()

            assert len(password) == PASSWORD_LENGTH == 12
            assert all(c in string.ascii_letters for c in password)

    def test_password_mixes_cases(self):
        for _ in range(50):
            password = generate_password()

            assert any(c.isupper() for c in password)
            assert any(c.islower() for c in password)

    def test_too_short_length_is_rejected(self):
        with pytest.raises(ValueError):
            generate_password(1)


class TestDelivery:
    """Tests for secret delivery."""

    @pytest.mark.asyncio
    async def test_send_new_password_delivers_generated_password(self, unit_env):
        service = await unit_env.get(CredentialService)
        channel = await unit_env.get(SecretDeliveryChannel)

        password = await service.send_new_password("ada@example.com")

        delivered = channel.last_for("ada@example.com")
        assert delivered.secret == password
        assert delivered.subject == "Your new password"

    @pytest.mark.asyncio
    async def test_send_verification_code_delivers_code(self, unit_env):
        service = await unit_env.get(CredentialService)
        channel = await unit_env.get(SecretDeliveryChannel)

        await service.send_verification_code("ada@example.com", "123456")

        assert channel.last_for("ada@example.com").secret == "123456"

    @pytest.mark.asyncio
    async def test_delivery_failure_is_surfaced(self):
        service = CredentialService(MockSecretDeliveryChannel(fail=True))

        with pytest.raises(DeliveryError):
            await service.send_new_password("ada@example.com")
