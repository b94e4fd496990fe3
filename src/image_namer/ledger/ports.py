"""Name ledger port.

The ledger is the durable record of issued name slugs. The generator only
needs point lookups; registration and undo need insert and bulk update.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any

from image_namer.models import NameLedgerEntry

# Columns a patch passed to `update_where_key_in` may touch
PATCHABLE_FIELDS = frozenset({"released", "preset_id", "locale"})


class NameLedger(ABC):
    """Abstract async key-value store of `NameLedgerEntry` records keyed by name slug."""

    @abstractmethod
    async def get(self, key: str) -> NameLedgerEntry | None:
        """Return the entry stored under `key`, or None."""

    @abstractmethod
    async def add(self, entry: NameLedgerEntry) -> None:
        """Insert a new entry.

        Raises:
            DuplicateKeyError: An entry with the same slug already exists.
        """

    @abstractmethod
    async def update_where_key_in(self, keys: Sequence[str], patch: dict[str, Any]) -> int:
        """Apply `patch` to every entry whose slug is in `keys`; return rows touched."""

    async def is_taken(self, key: str) -> bool:
        entry = await self.get(key)
        return entry is not None and not entry.released

    async def close(self) -> None:
        return None


def validate_patch(patch: dict[str, Any]) -> None:
    unknown = set(patch) - PATCHABLE_FIELDS
    if unknown:
        raise ValueError(f"Unsupported ledger fields in patch: {sorted(unknown)}")
