"""In-memory name ledger for tests and development."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from image_namer.exceptions import DuplicateKeyError
from image_namer.ledger.ports import NameLedger, validate_patch
from image_namer.models import NameLedgerEntry


class InMemoryNameLedger(NameLedger):
    """Stores entries in a dictionary keyed by name slug."""

    def __init__(self, entries: Sequence[NameLedgerEntry] | None = None):
        self._entries: dict[str, NameLedgerEntry] = {}
        for entry in entries or []:
            self._entries[entry.name_slug] = entry

    async def get(self, key: str) -> NameLedgerEntry | None:
        return self._entries.get(key)

    async def add(self, entry: NameLedgerEntry) -> None:
        if entry.name_slug in self._entries:
            raise DuplicateKeyError(entry.name_slug)
        self._entries[entry.name_slug] = entry

    async def update_where_key_in(self, keys: Sequence[str], patch: dict[str, Any]) -> int:
        validate_patch(patch)
        touched = 0
        for key in set(keys):
            entry = self._entries.get(key)
            if entry is None:
                continue
            self._entries[key] = entry.model_copy(update=patch)
            touched += 1
        return touched

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: str) -> bool:
        return key in self._entries

    def entries(self) -> list[NameLedgerEntry]:
        return list(self._entries.values())
