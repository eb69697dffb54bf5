"""Session helpers shared by the routes."""

from board.domain.service import JWTService
from board.interface.error import AuthenticationRequiredError


def require_user_id(
    jwt_service: JWTService, auth_token: str | None, action: str | None = None
) -> str:
    """Resolve the authenticated user ID from the session cookie.

    Args:
        jwt_service: JWT service for token verification
        auth_token: JWT token from cookie
        action: What the caller is trying to do, for the error message

    Returns:
        User ID (UUID string)

    Raises:
        AuthenticationRequiredError: If the token is missing or invalid
    """
    user_id = jwt_service.get_user_id_from_token(auth_token)
    if not user_id:
        if action:
            raise AuthenticationRequiredError(f"Authentication required to {action}")
        raise AuthenticationRequiredError()
    return user_id
