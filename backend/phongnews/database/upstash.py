"""
Upstash / Vercel KV client over the Redis REST API.

Each command is a JSON array POSTed to the database URL:

    POST https://<db>.upstash.io   ["SET", "users", "[...]"]
    -> {"result": "OK"}

Failures come back as ``{"error": "..."}`` with a 4xx status.
"""
import logging
from typing import Any, Optional

import httpx

from phongnews.core.errors import StoreError
from phongnews.database.base import KVStore, decode_value, encode_value

logger = logging.getLogger(__name__)


class UpstashStore(KVStore):
    """Async KV store backed by the Upstash REST endpoint."""

    def __init__(
        self,
        url: str,
        token: str,
        timeout: float = 10.0,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.url = url.rstrip("/")
        self.token = token
        self.timeout = timeout
        self._client = client

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client with connection pooling."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(timeout=self.timeout)
        return self._client

    async def close(self) -> None:
        """Close HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def command(self, *args: Any) -> Any:
        """Run one Redis command and return its ``result`` field."""
        client = await self._get_client()
        try:
            response = await client.post(
                self.url,
                json=[str(a) for a in args],
                headers={"Authorization": f"Bearer {self.token}"},
            )
        except httpx.HTTPError as e:
            logger.error("Upstash %s failed: %s", args[0], e)
            raise StoreError(f"{args[0]} failed: {e}") from e

        try:
            payload = response.json()
        except ValueError:
            payload = {}

        if not isinstance(payload, dict):
            logger.error("Upstash %s returned an unexpected reply: %r", args[0], payload)
            raise StoreError(f"{args[0]} returned an unexpected reply")

        if response.is_error or "error" in payload:
            reason = payload.get("error") or f"HTTP {response.status_code}"
            logger.error("Upstash %s rejected: %s", args[0], reason)
            raise StoreError(f"{args[0]} rejected: {reason}")

        return payload.get("result")

    async def get(self, key: str) -> Any:
        return decode_value(await self.command("GET", key))

    async def set(self, key: str, value: Any) -> None:
        await self.command("SET", key, encode_value(value))

    async def ping(self) -> bool:
        return await self.command("PING") == "PONG"
