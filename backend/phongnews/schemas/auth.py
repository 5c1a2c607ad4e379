"""
Authentication request/response schemas.

Request fields are optional so that a missing field is reported with the
application's own 400 message instead of FastAPI's 422.
"""
from typing import Any, Optional

from pydantic import BaseModel, Field


class RegisterRequest(BaseModel):
    """Registration request body."""
    name: Optional[str] = Field(None, description="Display name")
    email: Optional[str] = Field(None, description="Email address")
    password: Optional[str] = Field(None, description="Plain text password")


class LoginRequest(BaseModel):
    """Login request body."""
    email: Optional[str] = Field(None, description="Email address")
    password: Optional[str] = Field(None, description="Plain text password")


class ForgotPasswordRequest(BaseModel):
    """Password reset request body."""
    email: Optional[str] = Field(None, description="Email address")


class MessageResponse(BaseModel):
    """Generic human-readable confirmation."""
    message: str


class LoginResponse(BaseModel):
    """Login response with signed token and the user without its password."""
    token: str = Field(..., description="Signed bearer token")
    user: dict[str, Any] = Field(..., description="Stored user minus password")
