"""
Bearer token dependency for identifying the caller.
"""
from typing import Annotated, Optional

from fastapi import Depends, Header

from phongnews.core.errors import AuthError, NotFoundError
from phongnews.core.security import JWTError, decode_token
from phongnews.models.user import User
from phongnews.services.auth_service import USER_NOT_FOUND, AuthService
from phongnews.dependencies.services import get_auth_service

INVALID_TOKEN = "Token không hợp lệ."


async def get_current_user(
    authorization: Annotated[Optional[str], Header()] = None,
    auth_service: AuthService = Depends(get_auth_service),
) -> User:
    """
    Resolve ``Authorization: Bearer <token>`` to the stored user.

    Raises:
        AuthError: If the header is missing or the token is invalid or expired
        NotFoundError: If the email in the token no longer matches a user
    """
    if not authorization or not authorization.lower().startswith("bearer "):
        raise AuthError(INVALID_TOKEN)

    token = authorization.split(" ", 1)[1].strip()
    try:
        payload = decode_token(token)
    except JWTError:
        raise AuthError(INVALID_TOKEN)

    email = payload.get("email")
    if not email:
        raise AuthError(INVALID_TOKEN)

    user = await auth_service.get_user_by_email(email)
    if user is None:
        raise NotFoundError(USER_NOT_FOUND)
    return user


# Type alias for cleaner route signatures
CurrentUser = Annotated[User, Depends(get_current_user)]
