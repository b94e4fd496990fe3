"""SQL-backed name ledger on top of the Database port.

Blocking adapter calls run in a worker thread so the generator can await
them without stalling the event loop. Calls are serialized through a lock;
the underlying connection is not shared between concurrent statements.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence
from typing import Any

from image_namer.database.ports import Database
from image_namer.exceptions import DuplicateKeyError
from image_namer.ledger.ports import NameLedger, validate_patch
from image_namer.models import NameLedgerEntry

logger = logging.getLogger(__name__)

# Stay under SQLite's default bound-variable limit
_IN_CHUNK = 500


def _row_to_entry(row: Any) -> NameLedgerEntry:
    return NameLedgerEntry(
        name_slug=row[0],
        created_at=row[1],
        preset_id=row[2],
        locale=row[3],
        released=bool(row[4]),
    )


class SqlNameLedger(NameLedger):
    def __init__(self, db: Database):
        self.db = db
        self._lock = asyncio.Lock()

    async def _run(self, fn, *args):
        async with self._lock:
            return await asyncio.to_thread(fn, *args)

    def _get_sync(self, key: str) -> NameLedgerEntry | None:
        row = self.db.fetchone(
            """
            SELECT name_slug, created_at, preset_id, locale, released
            FROM name_ledger
            WHERE name_slug = ?
            """,
            [key],
        )
        return _row_to_entry(row) if row else None

    def _add_sync(self, entry: NameLedgerEntry) -> None:
        created_at: Any = entry.created_at
        if self.db.dialect == "sqlite":
            created_at = entry.created_at.isoformat()
        try:
            self.db.execute(
                """
                INSERT INTO name_ledger (name_slug, created_at, preset_id, locale, released)
                VALUES (?, ?, ?, ?, ?)
                """,
                [entry.name_slug, created_at, entry.preset_id, entry.locale, entry.released],
            )
            self.db.commit()
        except Exception as e:
            self.db.rollback()
            if self.db.is_unique_violation(e):
                raise DuplicateKeyError(entry.name_slug) from e
            logger.error(f"[Ledger] Failed to add {entry.name_slug}: {e}")
            raise

    def _update_sync(self, keys: list[str], patch: dict[str, Any]) -> int:
        columns = sorted(patch)
        assignments = ", ".join(f"{column} = ?" for column in columns)
        values = [patch[column] for column in columns]
        touched = 0
        try:
            for start in range(0, len(keys), _IN_CHUNK):
                chunk = keys[start:start + _IN_CHUNK]
                placeholders = ", ".join("?" for _ in chunk)
                touched += self.db.execute(
                    f"UPDATE name_ledger SET {assignments} WHERE name_slug IN ({placeholders})",
                    [*values, *chunk],
                )
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        return touched

    async def get(self, key: str) -> NameLedgerEntry | None:
        return await self._run(self._get_sync, key)

    async def add(self, entry: NameLedgerEntry) -> None:
        await self._run(self._add_sync, entry)

    async def update_where_key_in(self, keys: Sequence[str], patch: dict[str, Any]) -> int:
        validate_patch(patch)
        unique_keys = list(dict.fromkeys(keys))
        if not unique_keys or not patch:
            return 0
        return await self._run(self._update_sync, unique_keys, patch)

    async def close(self) -> None:
        await self._run(self.db.close)
