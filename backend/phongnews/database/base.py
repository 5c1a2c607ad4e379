"""
Key-value store contract used by every service.
"""
import json
from abc import ABC, abstractmethod
from typing import Any, Optional


def encode_value(value: Any) -> str:
    """Serialize a value the way the JS Upstash client does (JSON text)."""
    return json.dumps(value, ensure_ascii=False)


def decode_value(raw: Optional[str]) -> Any:
    """Inverse of ``encode_value``; non-JSON strings come back verbatim."""
    if raw is None:
        return None
    try:
        return json.loads(raw)
    except ValueError:
        return raw


class KVStore(ABC):
    """
    Minimal async key-value store holding JSON values.

    Every write replaces the whole value under a key; there is no
    compare-and-set, so concurrent read-modify-write cycles on the same key
    can lose updates.
    """

    @abstractmethod
    async def get(self, key: str) -> Any:
        """Return the decoded value under ``key`` or None if unset."""

    @abstractmethod
    async def set(self, key: str, value: Any) -> None:
        """Replace the value under ``key``."""

    @abstractmethod
    async def ping(self) -> bool:
        """Round-trip to the backend; raises StoreError when unreachable."""

    async def close(self) -> None:
        """Release network resources."""
