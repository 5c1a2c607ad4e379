"""
Backend-specific test fixtures and configuration.

These fixtures build the FastAPI app with the store, mailer and settings
dependencies swapped for test doubles.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio


# =============================================================================
# Service Fixtures
# =============================================================================

@pytest.fixture
def mock_mailer():
    """
    Mailer whose ``send`` is an AsyncMock.

    Configure failures with:

        mock_mailer.send.side_effect = MailError("relay down")
    """
    from phongnews.services.mailer import Mailer

    mailer = MagicMock(spec=Mailer)
    mailer.send = AsyncMock(return_value=None)
    return mailer


@pytest.fixture
def auth_service(store, mock_mailer, test_settings):
    from phongnews.services.auth_service import AuthService

    return AuthService(store, mock_mailer, test_settings)


@pytest.fixture
def record_service(store):
    from phongnews.services.record_service import RecordService

    return RecordService(store)


@pytest_asyncio.fixture
async def seed_users(store):
    """Write user documents straight into the ``users`` key."""
    async def _seed(*users: dict):
        await store.set("users", list(users))
    return _seed


# =============================================================================
# FastAPI App Fixtures
# =============================================================================

@pytest.fixture
def app(store, mock_mailer, test_settings):
    """
    FastAPI app with store, mailer and settings dependencies overridden.
    """
    from phongnews.config import get_settings
    from phongnews.database.connections import get_store
    from phongnews.dependencies.services import get_mailer
    from phongnews.main import create_app

    application = create_app(test_settings)

    async def _store():
        return store

    application.dependency_overrides[get_store] = _store
    application.dependency_overrides[get_mailer] = lambda: mock_mailer
    application.dependency_overrides[get_settings] = lambda: test_settings
    yield application
    application.dependency_overrides.clear()


@pytest_asyncio.fixture
async def async_client(app):
    """
    Async test client running on the same loop as the fakeredis store.
    """
    from httpx import ASGITransport, AsyncClient

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac


# =============================================================================
# Response Assertion Helpers
# =============================================================================

@pytest.fixture
def assert_error_response():
    """Helper to assert the ``{"message": ...}`` error structure."""
    def _assert(response, status_code: int, message: str = None):
        assert response.status_code == status_code
        data = response.json()
        assert "message" in data
        if message:
            assert data["message"] == message
    return _assert
