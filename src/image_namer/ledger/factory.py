"""Ledger selection from `DATABASE_URL`."""

from __future__ import annotations

import logging

from image_namer.config import get_settings
from image_namer.database import get_database, run_migrations
from image_namer.ledger.memory import InMemoryNameLedger
from image_namer.ledger.ports import NameLedger
from image_namer.ledger.sql import SqlNameLedger

logger = logging.getLogger(__name__)


def get_ledger(url: str | None = None, migrate: bool = True) -> NameLedger:
    """Build the configured ledger.

    ``memory://`` yields an in-process ledger; sqlite and postgres URLs yield
    a `SqlNameLedger`, with pending schema migrations applied when `migrate`
    is set.
    """
    url = url or get_settings().database_url
    if url.startswith("memory:"):
        return InMemoryNameLedger()

    db = get_database(url)
    if migrate:
        applied = run_migrations(db)
        if applied:
            logger.info(f"[Ledger] Applied migrations: {', '.join(applied)}")
    return SqlNameLedger(db)
