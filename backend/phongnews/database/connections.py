"""
Store connection management.
"""
import logging
from typing import Optional

from phongnews.config import Settings, get_settings
from phongnews.database.base import KVStore
from phongnews.database.redis_store import RedisStore
from phongnews.database.upstash import UpstashStore

logger = logging.getLogger(__name__)

# Global store instance
_store: Optional[KVStore] = None


def create_store(settings: Settings) -> KVStore:
    """Build the store selected by configuration."""
    if settings.uses_rest_store:
        logger.info("Using Upstash REST store at %s", settings.kv_rest_api_url)
        return UpstashStore(
            settings.kv_rest_api_url,
            settings.kv_rest_api_token,
            timeout=settings.store_timeout_seconds,
        )
    logger.info("Using Redis store at %s", settings.redis_url)
    return RedisStore.from_url(settings.redis_url, timeout=settings.store_timeout_seconds)


async def get_store() -> KVStore:
    """Get or create the process-wide store."""
    global _store
    if _store is None:
        _store = create_store(get_settings())
    return _store


async def close_store() -> None:
    """Close the store connection."""
    global _store
    if _store is not None:
        await _store.close()
        _store = None
