"""
Security utilities for password hashing and JWT token management.
"""
import secrets
import string
from datetime import datetime, timedelta, timezone
from functools import lru_cache
from typing import Any

from jose import JWTError, jwt
from passlib.context import CryptContext

from phongnews.config import get_settings

TEMP_PASSWORD_ALPHABET = string.ascii_lowercase + string.digits
TEMP_PASSWORD_LENGTH = 6


@lru_cache
def _pwd_context(rounds: int) -> CryptContext:
    return CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=rounds)


def hash_password(plain_password: str) -> str:
    """
    Hash a plain password using bcrypt.

    Args:
        plain_password: The plain text password to hash

    Returns:
        Hashed password string
    """
    return _pwd_context(get_settings().bcrypt_rounds).hash(plain_password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify a plain password against a hashed password.

    Args:
        plain_password: The plain text password to verify
        hashed_password: The hashed password to compare against

    Returns:
        True if password matches, False otherwise (including unreadable hashes)
    """
    try:
        return _pwd_context(get_settings().bcrypt_rounds).verify(plain_password, hashed_password)
    except ValueError:
        return False


def create_access_token(email: str, expires_delta: timedelta | None = None) -> str:
    """
    Create a signed token carrying the user's email.

    Args:
        email: Email address embedded as the ``email`` claim
        expires_delta: Optional custom expiration time (defaults to JWT_EXPIRE_DAYS)

    Returns:
        Encoded JWT token string
    """
    settings = get_settings()

    if expires_delta is None:
        expires_delta = timedelta(days=settings.jwt_expire_days)

    now = datetime.now(timezone.utc)
    payload = {
        "email": email,
        "iat": now,
        "exp": now + expires_delta,
        # Registration tokens are pending-map keys: unique per mint
        "jti": secrets.token_urlsafe(8),
    }

    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_token(token: str) -> dict[str, Any]:
    """
    Decode and validate a JWT token.

    Args:
        token: The JWT token string to decode

    Returns:
        Decoded payload dictionary with keys: email, iat, exp, jti

    Raises:
        JWTError: If token is invalid or expired
    """
    settings = get_settings()
    return jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])


def generate_temporary_password(length: int = TEMP_PASSWORD_LENGTH) -> str:
    """Random short lowercase alphanumeric password for resets."""
    return "".join(secrets.choice(TEMP_PASSWORD_ALPHABET) for _ in range(length))


__all__ = [
    "JWTError",
    "hash_password",
    "verify_password",
    "create_access_token",
    "decode_token",
    "generate_temporary_password",
]
