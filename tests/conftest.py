"""
Global test fixtures for PhongNews.

This module provides shared fixtures for all tests including:
- Isolated test settings (fast bcrypt, fixed JWT secret)
- Mock Redis (fakeredis) wrapped as the key-value store
- Test user factories
"""

import sys
from pathlib import Path

import pytest
import pytest_asyncio

# Add backend to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "backend"))


# =============================================================================
# Settings Fixtures
# =============================================================================

@pytest.fixture(autouse=True)
def test_env(monkeypatch):
    """
    Pin the environment read by ``get_settings()``.

    Security helpers read settings directly, so the cache is cleared around
    every test.
    """
    from phongnews.config import get_settings

    monkeypatch.setenv("JWT_SECRET", "test-secret")
    monkeypatch.setenv("BCRYPT_ROUNDS", "4")
    for name in (
        "KV_REST_API_URL", "KV_REST_API_TOKEN", "SMTP_HOST", "MAIL_CONSOLE", "VERCEL", "PUBLIC_BASE_URL",
    ):
        monkeypatch.delenv(name, raising=False)

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def test_settings():
    """Settings instance handed to services and dependency overrides."""
    from phongnews.config import Settings

    return Settings(
        _env_file=None,
        admin_email="admin@example.com",
        public_base_url="https://api.example.com",
    )


# =============================================================================
# Redis / Store Fixtures (fakeredis)
# =============================================================================

@pytest_asyncio.fixture
async def mock_async_redis():
    """
    Create an async mock Redis client using fakeredis, on its own server so
    tests never share data.
    """
    import fakeredis
    import fakeredis.aioredis

    redis_client = fakeredis.aioredis.FakeRedis(
        server=fakeredis.FakeServer(),
        decode_responses=True,
    )
    yield redis_client
    await redis_client.flushall()
    await redis_client.aclose()


@pytest_asyncio.fixture
async def store(mock_async_redis):
    """Key-value store backed by fakeredis."""
    from phongnews.database.redis_store import RedisStore

    return RedisStore(mock_async_redis)


# =============================================================================
# User Fixtures
# =============================================================================

@pytest.fixture
def test_user_data() -> dict:
    """Basic test user data for registration."""
    return {
        "name": "Nguyễn Văn A",
        "email": "testuser@example.com",
        "password": "SecurePassword123!",
    }


@pytest.fixture
def make_user():
    """
    Factory for stored user documents.

    Usage:
        doc = make_user(email="a@example.com", approved=True)
    """
    from phongnews.core.security import hash_password

    def _make(
        name: str = "Nguyễn Văn A",
        email: str = "testuser@example.com",
        password: str = "SecurePassword123!",
        approved: bool = True,
    ) -> dict:
        return {
            "name": name,
            "email": email,
            "password": hash_password(password),
            "createdAt": "2025-01-01T00:00:00.000Z",
            "approved": approved,
        }

    return _make
