"""
Authentication router for registration, approval, login and password reset.
"""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query, Request, status
from fastapi.responses import PlainTextResponse

from phongnews.config import Settings, get_settings
from phongnews.core.errors import AppError, InternalError
from phongnews.dependencies.auth import CurrentUser
from phongnews.dependencies.services import get_auth_service
from phongnews.schemas.auth import (
    ForgotPasswordRequest,
    LoginRequest,
    LoginResponse,
    MessageResponse,
    RegisterRequest,
)
from phongnews.services.auth_service import AuthService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["Authentication"])


def public_base_url(request: Request, settings: Settings) -> str:
    """PUBLIC_BASE_URL if set, else the origin the client used to reach us."""
    if settings.public_base_url:
        return settings.public_base_url
    proto = request.headers.get("x-forwarded-proto") or "https"
    host = request.headers.get("x-forwarded-host") or request.headers.get("host", "")
    return f"{proto}://{host}"


@router.post(
    "/register",
    response_model=MessageResponse,
    summary="Register a new account pending admin approval",
)
async def register(
    request: Request,
    body: RegisterRequest,
    auth_service: AuthService = Depends(get_auth_service),
    settings: Settings = Depends(get_settings),
):
    """
    Store a registration draft and e-mail the admin an approval link.

    - **name**, **email**, **password**: all required
    """
    try:
        return await auth_service.register(body, public_base_url(request, settings))
    except AppError:
        raise
    except Exception as e:
        logger.exception("Registration failed for %s", body.email)
        raise InternalError("Lỗi đăng ký", detail=str(e)) from e


@router.get(
    "/approve",
    response_class=PlainTextResponse,
    summary="Approve a pending registration",
)
async def approve(
    token: Optional[str] = Query(None, description="Approval token from the admin e-mail"),
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Promote the pending draft stored under ``token``.

    Anyone holding the link can approve; responses are plain text.
    """
    try:
        return PlainTextResponse(await auth_service.approve(token))
    except AppError as e:
        return PlainTextResponse(e.message, status_code=e.status_code)


@router.post(
    "/login",
    response_model=LoginResponse,
    summary="Login and get a signed token",
)
async def login(
    body: LoginRequest,
    auth_service: AuthService = Depends(get_auth_service),
):
    """Authenticate an approved account with email and password."""
    return await auth_service.login(body)


@router.post(
    "/forgot",
    response_model=MessageResponse,
    summary="Reset the password to a temporary one sent by e-mail",
)
async def forgot_password(
    body: ForgotPasswordRequest,
    auth_service: AuthService = Depends(get_auth_service),
):
    return await auth_service.forgot_password(body)


@router.get(
    "/me",
    status_code=status.HTTP_200_OK,
    summary="Get the account behind a bearer token",
)
async def get_current_user_info(current_user: CurrentUser):
    """
    Requires ``Authorization: Bearer <token>`` from ``/api/auth/login``.
    """
    return current_user.public()
