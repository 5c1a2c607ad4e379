"""
Tests for AuthService.

These tests cover the account lifecycle:
unregistered -> pending (register) -> approved (approve) -> password resets.
"""

from unittest.mock import patch

import pytest

from phongnews.core.errors import (
    AuthError,
    ConflictError,
    ForbiddenError,
    MailError,
    NotFoundError,
    ValidationError,
)
from phongnews.schemas.auth import ForgotPasswordRequest, LoginRequest, RegisterRequest

BASE_URL = "https://api.example.com"


async def register(auth_service, data: dict):
    return await auth_service.register(RegisterRequest(**data), BASE_URL)


class TestRegister:
    """Tests for AuthService.register."""

    @pytest.mark.asyncio
    async def test_creates_one_draft_and_no_user(self, auth_service, store, test_user_data):
        result = await register(auth_service, test_user_data)

        assert result.message == "Đăng ký thành công. Vui lòng chờ duyệt."
        pending = await store.get("pending")
        assert len(pending) == 1
        draft = next(iter(pending.values()))
        assert draft["email"] == test_user_data["email"]
        assert draft["approved"] is False
        assert draft["password"] != test_user_data["password"]
        assert draft["createdAt"].endswith("Z")
        assert await store.get("users") is None

    @pytest.mark.asyncio
    async def test_mails_admin_an_approval_link(self, auth_service, store, mock_mailer, test_user_data):
        await register(auth_service, test_user_data)

        token = next(iter(await store.get("pending")))
        mock_mailer.send.assert_awaited_once()
        args, kwargs = mock_mailer.send.call_args
        assert args[0] == "admin@example.com"
        assert f"{BASE_URL}/api/auth/approve?token={token}" in kwargs["text"]
        assert test_user_data["email"] in kwargs["html_body"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("missing", ["name", "email", "password"])
    async def test_missing_field_is_rejected(self, auth_service, test_user_data, missing):
        data = {**test_user_data, missing: ""}

        with pytest.raises(ValidationError) as exc:
            await register(auth_service, data)
        assert exc.value.message == "Thiếu thông tin."

    @pytest.mark.asyncio
    async def test_existing_email_conflicts_case_insensitively(
        self, auth_service, seed_users, make_user, test_user_data
    ):
        await seed_users(make_user(email="TestUser@Example.com", approved=False))

        with pytest.raises(ConflictError):
            await register(auth_service, test_user_data)

    @pytest.mark.asyncio
    async def test_pending_drafts_do_not_conflict(self, auth_service, store, test_user_data):
        """A second registration before approval creates an independent draft."""
        await register(auth_service, test_user_data)
        await register(auth_service, test_user_data)

        assert len(await store.get("pending")) == 2

    @pytest.mark.asyncio
    async def test_mail_failure_propagates_after_draft_is_stored(
        self, auth_service, store, mock_mailer, test_user_data
    ):
        mock_mailer.send.side_effect = MailError("relay down")

        with pytest.raises(MailError):
            await register(auth_service, test_user_data)

        assert len(await store.get("pending")) == 1


class TestApprove:
    """Tests for AuthService.approve."""

    @pytest.mark.asyncio
    async def test_promotes_draft_and_consumes_token(self, auth_service, store, test_user_data):
        await register(auth_service, test_user_data)
        token = next(iter(await store.get("pending")))

        message = await auth_service.approve(token)

        assert message == "Phê duyệt thành công."
        users = await store.get("users")
        assert len(users) == 1
        assert users[0]["email"] == test_user_data["email"]
        assert users[0]["approved"] is True
        assert await store.get("pending") == {}

    @pytest.mark.asyncio
    async def test_second_approval_is_not_found_and_does_not_duplicate(
        self, auth_service, store, test_user_data
    ):
        await register(auth_service, test_user_data)
        token = next(iter(await store.get("pending")))
        await auth_service.approve(token)

        with pytest.raises(NotFoundError) as exc:
            await auth_service.approve(token)

        assert exc.value.message == "Token không hợp lệ."
        assert len(await store.get("users")) == 1

    @pytest.mark.asyncio
    async def test_missing_token(self, auth_service):
        with pytest.raises(ValidationError) as exc:
            await auth_service.approve(None)
        assert exc.value.message == "Thiếu token."

    @pytest.mark.asyncio
    async def test_unknown_token(self, auth_service):
        with pytest.raises(NotFoundError):
            await auth_service.approve("never-issued")


class TestLogin:
    """Tests for AuthService.login."""

    @pytest.mark.asyncio
    async def test_approved_user_gets_token_without_password(
        self, auth_service, seed_users, make_user
    ):
        from phongnews.core.security import decode_token

        await seed_users(make_user(email="guest@example.com"))

        result = await auth_service.login(
            LoginRequest(email="GUEST@example.com", password="SecurePassword123!")
        )

        assert decode_token(result.token)["email"] == "guest@example.com"
        assert "password" not in result.user
        assert result.user["email"] == "guest@example.com"
        assert result.user["createdAt"] == "2025-01-01T00:00:00.000Z"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("password", ["SecurePassword123!", "wrong"])
    async def test_unapproved_user_is_forbidden_regardless_of_password(
        self, auth_service, seed_users, make_user, password
    ):
        await seed_users(make_user(approved=False))

        with pytest.raises(ForbiddenError):
            await auth_service.login(LoginRequest(email="testuser@example.com", password=password))

    @pytest.mark.asyncio
    async def test_wrong_password_is_unauthorized(self, auth_service, seed_users, make_user):
        await seed_users(make_user())

        with pytest.raises(AuthError) as exc:
            await auth_service.login(LoginRequest(email="testuser@example.com", password="nope"))

        assert not isinstance(exc.value, ForbiddenError)
        assert exc.value.status_code == 401

    @pytest.mark.asyncio
    async def test_unknown_email_is_not_found(self, auth_service):
        with pytest.raises(NotFoundError):
            await auth_service.login(LoginRequest(email="ghost@example.com", password="x"))

    @pytest.mark.asyncio
    async def test_missing_fields(self, auth_service):
        with pytest.raises(ValidationError):
            await auth_service.login(LoginRequest(email="a@example.com"))

    @pytest.mark.asyncio
    async def test_extra_stored_fields_are_returned(self, auth_service, seed_users, make_user):
        await seed_users({**make_user(), "phone": "0900000000"})

        result = await auth_service.login(
            LoginRequest(email="testuser@example.com", password="SecurePassword123!")
        )

        assert result.user["phone"] == "0900000000"


class TestForgotPassword:
    """Tests for AuthService.forgot_password."""

    @pytest.mark.asyncio
    async def test_resets_to_mailed_temporary_password(
        self, auth_service, store, seed_users, make_user, mock_mailer
    ):
        from phongnews.core.security import verify_password

        await seed_users(make_user())

        with patch(
            "phongnews.services.auth_service.generate_temporary_password",
            return_value="abc123",
        ):
            result = await auth_service.forgot_password(
                ForgotPasswordRequest(email="testuser@example.com")
            )

        assert result.message == "Đã gửi mật khẩu tạm thời."
        stored = (await store.get("users"))[0]
        assert verify_password("abc123", stored["password"])
        assert not verify_password("SecurePassword123!", stored["password"])

        args, kwargs = mock_mailer.send.call_args
        assert args == ("testuser@example.com", "Mật khẩu tạm thời")
        assert kwargs["text"] == "Mật khẩu tạm: abc123"

    @pytest.mark.asyncio
    async def test_unapproved_user_can_still_reset(self, auth_service, seed_users, make_user):
        await seed_users(make_user(approved=False))

        result = await auth_service.forgot_password(
            ForgotPasswordRequest(email="testuser@example.com")
        )

        assert result.message == "Đã gửi mật khẩu tạm thời."

    @pytest.mark.asyncio
    async def test_unknown_email_is_not_found(self, auth_service, mock_mailer):
        with pytest.raises(NotFoundError):
            await auth_service.forgot_password(ForgotPasswordRequest(email="ghost@example.com"))

        mock_mailer.send.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_other_users_are_untouched(self, auth_service, store, seed_users, make_user):
        other = make_user(email="other@example.com")
        await seed_users(make_user(), other)

        await auth_service.forgot_password(ForgotPasswordRequest(email="testuser@example.com"))

        assert (await store.get("users"))[1] == other
