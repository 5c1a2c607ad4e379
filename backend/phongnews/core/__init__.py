"""
Core module - Security utilities and the error taxonomy.
"""
from phongnews.core.errors import (
    AppError,
    AuthError,
    ConflictError,
    ForbiddenError,
    InternalError,
    MailError,
    NotFoundError,
    StoreError,
    ValidationError,
)
from phongnews.core.security import (
    hash_password,
    verify_password,
    create_access_token,
    decode_token,
    generate_temporary_password,
)

__all__ = [
    "AppError",
    "AuthError",
    "ConflictError",
    "ForbiddenError",
    "InternalError",
    "MailError",
    "NotFoundError",
    "StoreError",
    "ValidationError",
    "hash_password",
    "verify_password",
    "create_access_token",
    "decode_token",
    "generate_temporary_password",
]
