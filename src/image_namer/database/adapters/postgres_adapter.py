"""PostgreSQL adapter implementing the Database port.

Uses psycopg3. Expects a `postgresql://` or `postgres://` DSN in `DATABASE_URL`.
Automatically converts SQLite-style `?` placeholders into `%s` for psycopg.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

try:
    import psycopg
    from psycopg import errors as pg_errors
except Exception as e:  # pragma: no cover - optional dependency
    raise RuntimeError(
        "psycopg is required for Postgres support. Install optional group 'postgres'."
    ) from e

from image_namer.database.ports import Database


def _qmark_to_psycopg(query: str) -> str:
    """Translate SQLite `?` param style to psycopg `%s` style."""
    # naive replacement is OK when we don't mix literals with '?'
    return query.replace("?", "%s")


class PostgresDatabase(Database):
    dialect = "postgres"

    def __init__(self, dsn: str):
        self._conn = psycopg.connect(dsn)
        self._conn.autocommit = False

    def execute(self, query: str, params: Sequence[Any] | None = None) -> int:
        cur = self._conn.cursor()
        cur.execute(_qmark_to_psycopg(query), params or [])
        return cur.rowcount

    def executemany(self, query: str, seq_of_params: Iterable[Sequence[Any]]) -> None:
        cur = self._conn.cursor()
        cur.executemany(_qmark_to_psycopg(query), seq_of_params)

    def fetchone(self, query: str, params: Sequence[Any] | None = None) -> Any:
        cur = self._conn.cursor()
        cur.execute(_qmark_to_psycopg(query), params or [])
        return cur.fetchone()

    def fetchall(self, query: str, params: Sequence[Any] | None = None) -> list[Any]:
        cur = self._conn.cursor()
        cur.execute(_qmark_to_psycopg(query), params or [])
        rows = cur.fetchall()
        return list(rows) if rows is not None else []

    def commit(self) -> None:
        self._conn.commit()

    def rollback(self) -> None:
        self._conn.rollback()

    def close(self) -> None:
        self._conn.close()

    def is_unique_violation(self, exc: BaseException) -> bool:
        return isinstance(exc, pg_errors.UniqueViolation)
