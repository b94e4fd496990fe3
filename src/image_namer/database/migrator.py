"""Simple SQL migrations runner (SQLite/Postgres).

Keeps a `schema_migrations` table with applied versions and executes
ordered SQL files from `image_namer/migrations/{dialect}`.
"""

from __future__ import annotations

import contextlib
import logging
from importlib.resources import files

from image_namer.database.ports import Database

logger = logging.getLogger(__name__)

_PACKAGES = {
    "sqlite": "image_namer.migrations.sqlite",
    "postgres": "image_namer.migrations.postgres",
}


def _list_migrations(package: str) -> list[str]:
    resources = files(package)
    names = [e.name for e in resources.iterdir() if e.name.endswith(".sql")]
    names.sort()
    return names


def _read_migration(package: str, name: str) -> str:
    return (files(package) / name).read_text(encoding="utf-8")


def _exec_sql_script(db: Database, sql: str) -> None:
    # naive split by ';' that are statement terminators; skip empty
    statements = [s.strip() for s in sql.split(";")]
    for stmt in statements:
        if stmt:
            db.execute(stmt)


def run_migrations(db: Database, dialect: str | None = None) -> list[str]:
    """Apply pending migrations for a dialect.

    Args:
        db: Database adapter
        dialect: "sqlite" or "postgres". Defaults to the adapter's dialect.

    Returns:
        List of applied migration filenames
    """
    dialect = dialect or db.dialect
    package = _PACKAGES.get(dialect)
    if package is None:
        raise ValueError(f"Unsupported dialect: {dialect}")

    db.execute("CREATE TABLE IF NOT EXISTS schema_migrations (version TEXT PRIMARY KEY)")
    db.commit()

    # rows may be sequences or dict-like depending on adapter
    applied = set()
    for row in db.fetchall("SELECT version FROM schema_migrations"):
        if isinstance(row, dict):
            applied.add(row.get("version"))
        else:
            with contextlib.suppress(Exception):
                applied.add(row[0])

    applied_now: list[str] = []
    for name in _list_migrations(package):
        if name in applied:
            continue
        _exec_sql_script(db, _read_migration(package, name))
        db.execute("INSERT INTO schema_migrations(version) VALUES (?)", (name,))
        db.commit()
        applied_now.append(name)
        logger.info(f"[Migrations] Applied {dialect} migration {name}")

    return applied_now
