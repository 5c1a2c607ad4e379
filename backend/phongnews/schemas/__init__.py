"""
Request and response schemas for API endpoints.
"""
from phongnews.schemas.auth import (
    ForgotPasswordRequest,
    LoginRequest,
    LoginResponse,
    MessageResponse,
    RegisterRequest,
)
from phongnews.schemas.common import OkResponse, ReadinessResponse

__all__ = [
    # Auth
    "RegisterRequest",
    "LoginRequest",
    "ForgotPasswordRequest",
    "MessageResponse",
    "LoginResponse",
    # Common
    "OkResponse",
    "ReadinessResponse",
]
