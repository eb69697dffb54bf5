"""Unit tests for session token utilities."""

from datetime import datetime, timedelta, timezone

import jwt
import pytest

from board.config import AuthSettings
from board.domain.service import JWTService
from board.util.jwt import JWTError, create_token, verify_token

SETTINGS = AuthSettings(jwt_secret="test-secret")


class TestVerifyToken:
    """Tests for verify_token."""

    def test_round_trip_carries_subject(self):
        token = create_token("user-1", "ada@example.com", SETTINGS)

        payload = verify_token(token, SETTINGS)

        assert payload.user_id == "user-1"
        assert payload.email == "ada@example.com"
        assert payload.expires_at - payload.issued_at == timedelta(days=30)

    def test_expired_token_is_rejected(self):
        past = datetime.now(timezone.utc) - timedelta(days=2)
        token = jwt.encode(
            {"sub": "user-1", "iat": past, "exp": past + timedelta(days=1)},
            "test-secret",
            algorithm="HS256",
        )

        with pytest.raises(JWTError, match="expired"):
            verify_token(token, SETTINGS)

    def test_missing_subject_is_rejected(self):
        now = datetime.now(timezone.utc)
        token = jwt.encode(
            {"iat": now, "exp": now + timedelta(days=1)}, "test-secret", algorithm="HS256"
        )

        with pytest.raises(JWTError, match="'sub'"):
            verify_token(token, SETTINGS)

    def test_wrong_secret_is_rejected(self):
        token = create_token("user-1", None, AuthSettings(jwt_secret="other-secret"))

        with pytest.raises(JWTError, match="Invalid token"):
            verify_token(token, SETTINGS)


class TestJWTService:
    """Tests for resolving the signed-in user."""

    def test_missing_or_bad_token_is_anonymous(self):
        service = JWTService(SETTINGS)

        assert service.get_user_id_from_token(None) is None
        assert service.get_user_id_from_token("garbage") is None

    def test_valid_token_resolves_user(self):
        service = JWTService(SETTINGS)

        assert service.get_user_id_from_token(service.create_token("user-7")) == "user-7"
