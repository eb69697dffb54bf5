"""Session token domain service."""

import logfire

from board.config import AuthSettings
from board.util.jwt import JWTError, TokenPayload, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Verifies the session tokens that authenticate board actions.

    Tokens are minted by the identity provider; any token that verifies
    is trusted for its subject. The board keeps no session state of its own.
    """

    def __init__(self, auth_settings: AuthSettings) -> None:
        self.auth_settings = auth_settings

    def create_token(self, user_id: str, email: str | None = None) -> str:
        """Mint a session token for a user."""
        return create_token(user_id, email, self.auth_settings)

    def verify_token(self, token: str) -> TokenPayload:
        """Verify a session token.

        Args:
            token: Encoded token

        Returns:
            Verified claims

        Raises:
            JWTError: If the token is invalid or expired
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                return verify_token(token, self.auth_settings)
            except JWTError as e:
                logfire.info("Session token rejected", reason=str(e))
                raise

    def get_user_id_from_token(self, token: str | None) -> str | None:
        """Resolve the signed-in user, or None for a missing or bad token."""
        if not token:
            return None
        try:
            return self.verify_token(token).user_id
        except JWTError:
            return None
