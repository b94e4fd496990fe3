"""Database access for the name ledger.

Provides a DB-agnostic port, SQLite/Postgres adapters and a small SQL
migrations runner.
"""

from __future__ import annotations

from image_namer.database.di import get_database
from image_namer.database.migrator import run_migrations
from image_namer.database.ports import Database

__all__ = ["Database", "get_database", "run_migrations"]
