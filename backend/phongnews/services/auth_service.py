"""
Authentication service: registration drafts, admin approval, login and
password reset.
"""
import logging
from typing import Optional
from urllib.parse import urlencode

from phongnews.config import Settings
from phongnews.core.errors import (
    AuthError,
    ConflictError,
    ForbiddenError,
    NotFoundError,
    ValidationError,
)
from phongnews.core.security import (
    create_access_token,
    generate_temporary_password,
    hash_password,
    verify_password,
)
from phongnews.database.base import KVStore
from phongnews.database.keys import PENDING_KEY, USERS_KEY
from phongnews.models.user import User
from phongnews.schemas.auth import (
    ForgotPasswordRequest,
    LoginRequest,
    LoginResponse,
    MessageResponse,
    RegisterRequest,
)
from phongnews.services.mailer import Mailer, approval_email, temporary_password_email

logger = logging.getLogger(__name__)

MISSING_FIELDS = "Thiếu thông tin."
USER_NOT_FOUND = "Không tìm thấy người dùng."


class AuthService:
    """Service for authentication operations."""

    def __init__(self, store: KVStore, mailer: Mailer, settings: Settings):
        self.store = store
        self.mailer = mailer
        self.settings = settings

    # ==================== Persistence ====================

    async def read_users(self) -> list[User]:
        raw = await self.store.get(USERS_KEY) or []
        return [User.model_validate(u) for u in raw]

    async def save_users(self, users: list[User]) -> None:
        await self.store.set(USERS_KEY, [u.to_store() for u in users])

    async def read_pending(self) -> dict[str, dict]:
        return await self.store.get(PENDING_KEY) or {}

    async def save_pending(self, pending: dict[str, dict]) -> None:
        await self.store.set(PENDING_KEY, pending)

    @staticmethod
    def find_by_email(users: list[User], email: str) -> Optional[User]:
        return next((u for u in users if u.matches_email(email)), None)

    async def get_user_by_email(self, email: str) -> Optional[User]:
        return self.find_by_email(await self.read_users(), email)

    # ==================== Workflow ====================

    async def register(self, request: RegisterRequest, base_url: str) -> MessageResponse:
        """
        Store a pending draft and ask the admin to approve it.

        Only active users are checked for duplicates, so the same email can
        hold several independent drafts until one of them is approved.

        Args:
            request: Registration request with name, email and password
            base_url: Public origin used to build the approval link

        Returns:
            MessageResponse asking the user to wait for approval

        Raises:
            ValidationError: If a field is missing
            ConflictError: If an active user already has this email
        """
        if not (request.name and request.email and request.password):
            raise ValidationError(MISSING_FIELDS)

        users = await self.read_users()
        if self.find_by_email(users, request.email):
            raise ConflictError("Email đã tồn tại.")

        draft = User(
            name=request.name,
            email=request.email,
            password=hash_password(request.password),
            approved=False,
        )

        token = create_access_token(request.email)
        pending = await self.read_pending()
        pending[token] = draft.to_store()
        await self.save_pending(pending)
        logger.info("Registration draft stored for %s", request.email)

        approve_url = f"{base_url.rstrip('/')}/api/auth/approve?{urlencode({'token': token})}"
        subject, text, html_body = approval_email(request.name, request.email, approve_url)
        await self.mailer.send(self.settings.admin_email, subject, text=text, html_body=html_body)

        return MessageResponse(message="Đăng ký thành công. Vui lòng chờ duyệt.")

    async def approve(self, token: Optional[str]) -> str:
        """
        Promote the draft stored under ``token`` to an active user.

        The token is a single-use lookup key; its expiry is not checked.
        Users and pending drafts are written separately, not atomically.

        Raises:
            ValidationError: If token is missing
            NotFoundError: If no draft is stored under token
        """
        if not token:
            raise ValidationError("Thiếu token.")

        pending = await self.read_pending()
        draft = pending.get(token)
        if draft is None:
            raise NotFoundError("Token không hợp lệ.")

        user = User.model_validate(draft)
        user.approved = True

        users = await self.read_users()
        users.append(user)
        await self.save_users(users)

        del pending[token]
        await self.save_pending(pending)

        logger.info("Approved account %s", user.email)
        return "Phê duyệt thành công."

    async def login(self, request: LoginRequest) -> LoginResponse:
        """
        Authenticate user and return a signed token.

        Raises:
            ValidationError: If email or password is missing
            NotFoundError: If no active-list user has this email
            ForbiddenError: If the account is not approved
            AuthError: If the password does not match
        """
        if not (request.email and request.password):
            raise ValidationError(MISSING_FIELDS)

        user = await self.get_user_by_email(request.email)
        if user is None:
            raise NotFoundError(USER_NOT_FOUND)
        if not user.approved:
            raise ForbiddenError("Chưa được duyệt.")
        if not verify_password(request.password, user.password):
            raise AuthError("Sai mật khẩu.")

        return LoginResponse(token=create_access_token(user.email), user=user.public())

    async def forgot_password(self, request: ForgotPasswordRequest) -> MessageResponse:
        """
        Replace the password with a random temporary one and mail it.

        Approval is not checked here.

        Raises:
            ValidationError: If email is missing
            NotFoundError: If no active-list user has this email
        """
        if not request.email:
            raise ValidationError(MISSING_FIELDS)

        users = await self.read_users()
        user = self.find_by_email(users, request.email)
        if user is None:
            raise NotFoundError(USER_NOT_FOUND)

        temp_password = generate_temporary_password()
        user.password = hash_password(temp_password)
        await self.save_users(users)
        logger.info("Temporary password issued for %s", user.email)

        subject, text = temporary_password_email(temp_password)
        await self.mailer.send(request.email, subject, text=text)

        return MessageResponse(message="Đã gửi mật khẩu tạm thời.")
