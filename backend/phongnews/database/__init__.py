"""
Database module - key-value store adapters and key layout.
"""
from phongnews.database.base import KVStore
from phongnews.database.connections import close_store, create_store, get_store
from phongnews.database.keys import PENDING_KEY, USERS_KEY, data_key
from phongnews.database.redis_store import RedisStore
from phongnews.database.upstash import UpstashStore

__all__ = [
    "KVStore",
    "RedisStore",
    "UpstashStore",
    "create_store",
    "get_store",
    "close_store",
    "USERS_KEY",
    "PENDING_KEY",
    "data_key",
]
