"""
Error taxonomy shared by services and routers.

Services raise these; the exception handler registered in ``phongnews.main``
renders them as ``{"message": ...}`` with the matching status code.
"""
from typing import Any, Optional

from fastapi import status


class AppError(Exception):
    """Base class for errors that map onto an HTTP response."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Lỗi máy chủ."

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_body(self) -> dict[str, Any]:
        return {"message": self.message}


class ValidationError(AppError):
    """Missing or malformed input."""
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Dữ liệu không hợp lệ."


class ConflictError(AppError):
    """Duplicate email on registration."""
    status_code = status.HTTP_409_CONFLICT
    default_message = "Email đã tồn tại."


class NotFoundError(AppError):
    """Unknown user, token or record."""
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Không tìm thấy."


class AuthError(AppError):
    """Bad credential."""
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Sai mật khẩu."


class ForbiddenError(AuthError):
    """Valid credential on an account that may not sign in yet."""
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Chưa được duyệt."


class InternalError(AppError):
    """Unexpected failure; the cause is echoed to the caller as ``error``."""

    def __init__(self, message: Optional[str] = None, detail: str = ""):
        super().__init__(message)
        self.detail = detail

    def to_body(self) -> dict[str, Any]:
        return {"message": self.message, "error": self.detail}


class StoreError(Exception):
    """The key-value backend rejected a command or could not be reached."""


class MailError(Exception):
    """The SMTP server rejected a message or could not be reached."""
