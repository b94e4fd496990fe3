"""Database dependency resolver.

Selects the proper adapter based on `DATABASE_URL`.
Supported schemes:
- sqlite:///path/to.db (or sqlite:///:memory:)
- postgres://... or postgresql://...
"""

from __future__ import annotations

from pathlib import Path
from urllib.parse import urlparse

from image_namer.config import get_settings
from image_namer.database.ports import Database


def _sqlite_path_from_url(url: str) -> Path | str:
    # sqlite:///absolute/or/relative
    path = url.replace("sqlite:///", "", 1)
    if path == ":memory:":
        return path
    return Path(path)


def get_database(url: str | None = None) -> Database:
    url = url or get_settings().database_url

    parsed = urlparse(url)
    scheme = parsed.scheme.lower()

    if scheme == "sqlite":
        from image_namer.database.adapters.sqlite_adapter import SQLiteDatabase

        return SQLiteDatabase(_sqlite_path_from_url(url))
    if scheme in ("postgres", "postgresql"):
        from image_namer.database.adapters.postgres_adapter import PostgresDatabase

        return PostgresDatabase(url)

    raise ValueError(f"Unsupported DATABASE_URL scheme: {scheme}")
