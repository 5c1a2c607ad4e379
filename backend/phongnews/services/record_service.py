"""
Generic record API over the whitelisted resort collections.

Each collection is one JSON list stored under ``data_<table>`` and is
rewritten as a whole on every change.
"""
import time
from typing import Any

from phongnews.core.errors import NotFoundError, ValidationError
from phongnews.database.base import KVStore
from phongnews.database.keys import data_key

ALLOWED_TABLES = ("rooms", "guests", "bookings", "invoices", "settings")

INVALID_TABLE = "Table không hợp lệ"


def now_ms() -> int:
    return int(time.time() * 1000)


def id_text(value: Any) -> str:
    """Render a stored id the way the browser client prints it into URLs."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if value is None:
        return "null"
    return str(value)


def has_id(record: Any, record_id: str) -> bool:
    return isinstance(record, dict) and id_text(record.get("id")) == record_id


class RecordService:
    """CRUD over opaque JSON records identified by a numeric ``id``."""

    def __init__(self, store: KVStore):
        self.store = store

    @staticmethod
    def check_table(table: str) -> str:
        if table not in ALLOWED_TABLES:
            raise ValidationError(INVALID_TABLE)
        return table

    @staticmethod
    def next_id(records: list[dict[str, Any]]) -> int:
        """
        Millisecond timestamp, bumped past the largest numeric id already in
        the collection so creates within one millisecond stay distinct.
        """
        candidate = now_ms()
        ids = [r.get("id") for r in records if isinstance(r, dict)]
        existing = [i for i in ids if isinstance(i, (int, float)) and not isinstance(i, bool)]
        if existing and max(existing) >= candidate:
            candidate = int(max(existing)) + 1
        return candidate

    async def _read(self, table: str) -> list[dict[str, Any]]:
        return await self.store.get(data_key(table)) or []

    async def _write(self, table: str, records: list[dict[str, Any]]) -> None:
        await self.store.set(data_key(table), records)

    async def list_records(self, table: str) -> list[dict[str, Any]]:
        self.check_table(table)
        return await self._read(table)

    async def create(self, table: str, body: dict[str, Any]) -> dict[str, Any]:
        """Append ``body`` with a fresh id; any client-sent id is overwritten."""
        self.check_table(table)
        records = await self._read(table)
        record = {**body, "id": self.next_id(records)}
        records.append(record)
        await self._write(table, records)
        return record

    async def update(self, table: str, record_id: str, patch: dict[str, Any]) -> dict[str, Any]:
        """
        Shallow-merge ``patch`` onto the first record whose id matches.

        Raises:
            NotFoundError: If no record has this id
        """
        self.check_table(table)
        records = await self._read(table)
        for index, record in enumerate(records):
            if has_id(record, record_id):
                records[index] = {**record, **patch}
                await self._write(table, records)
                return records[index]
        raise NotFoundError("Không tìm thấy mục")

    async def delete(self, table: str, record_id: str) -> int:
        """Remove every record with this id; returns how many were removed."""
        self.check_table(table)
        records = await self._read(table)
        kept = [r for r in records if not has_id(r, record_id)]
        await self._write(table, kept)
        return len(records) - len(kept)
