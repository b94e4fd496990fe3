"""SQLite adapter implementing the Database port."""

from __future__ import annotations

import sqlite3
from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import Any

from image_namer.database.ports import Database


class SQLiteDatabase(Database):
    dialect = "sqlite"

    def __init__(self, path: Path | str):
        if str(path) != ":memory:":
            path = Path(path)
            path.parent.mkdir(parents=True, exist_ok=True)
        # Ledger calls are dispatched to worker threads via asyncio.to_thread
        self._conn = sqlite3.connect(str(path), check_same_thread=False)
        self._conn.row_factory = sqlite3.Row

    def execute(self, query: str, params: Sequence[Any] | None = None) -> int:
        cur = self._conn.cursor()
        cur.execute(query, params or [])
        return cur.rowcount

    def executemany(self, query: str, seq_of_params: Iterable[Sequence[Any]]) -> None:
        cur = self._conn.cursor()
        cur.executemany(query, seq_of_params)

    def fetchone(self, query: str, params: Sequence[Any] | None = None) -> Any:
        cur = self._conn.cursor()
        cur.execute(query, params or [])
        return cur.fetchone()

    def fetchall(self, query: str, params: Sequence[Any] | None = None) -> list[Any]:
        cur = self._conn.cursor()
        cur.execute(query, params or [])
        return list(cur.fetchall())

    def commit(self) -> None:
        self._conn.commit()

    def rollback(self) -> None:
        self._conn.rollback()

    def close(self) -> None:
        self._conn.close()

    def is_unique_violation(self, exc: BaseException) -> bool:
        return isinstance(exc, sqlite3.IntegrityError) and "UNIQUE" in str(exc).upper()
