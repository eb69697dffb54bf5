"""Session token utilities.

Tokens are minted by the identity provider and carry the user id in the
standard ``sub`` claim. ``create_token`` exists for the provider side and
for tests.
"""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel

from board.config import AuthSettings

REQUIRED_CLAIMS = ["sub", "exp", "iat"]


class TokenPayload(BaseModel):
    """Verified session claims."""

    user_id: str
    email: str | None = None
    issued_at: datetime
    expires_at: datetime


class JWTError(Exception):
    """Token could not be verified."""

    pass


def create_token(user_id: str, email: str | None, settings: AuthSettings) -> str:
    """Mint a signed session token.

    Args:
        user_id: Subject user ID
        email: User email, carried for display only
        settings: Authentication settings

    Returns:
        Encoded token
    """
    issued_at = datetime.now(timezone.utc)
    claims = {
        "sub": user_id,
        "email": email,
        "iat": issued_at,
        "exp": issued_at + timedelta(days=settings.jwt_expiry_days),
    }
    return jwt.encode(claims, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Verify a session token and extract its claims.

    Args:
        token: Encoded token
        settings: Authentication settings

    Returns:
        Verified claims

    Raises:
        JWTError: If the token is expired, tampered with, or missing a claim
    """
    try:
        claims = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": REQUIRED_CLAIMS},
        )
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except jwt.MissingRequiredClaimError as e:
        raise JWTError(f"Token is missing the '{e.claim}' claim")
    except jwt.InvalidTokenError:
        raise JWTError("Invalid token")

    return TokenPayload(
        user_id=claims["sub"],
        email=claims.get("email"),
        issued_at=datetime.fromtimestamp(claims["iat"], timezone.utc),
        expires_at=datetime.fromtimestamp(claims["exp"], timezone.utc),
    )
