"""Naming service: generate, register and release names against one ledger.

`generate` never mutates the ledger. Callers commit an accepted name with
`register` and undo it with `release`, which only flags entries as released
so the audit history survives.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from image_namer.config import Settings, get_settings
from image_namer.exceptions import DuplicateKeyError
from image_namer.generation.engine import NameGenerator
from image_namer.generation.normalize import slugify
from image_namer.ledger.factory import get_ledger
from image_namer.ledger.ports import NameLedger
from image_namer.models import GeneratedName, GenerationRequest, NameLedgerEntry

logger = logging.getLogger(__name__)


def ledger_key(name: str, extension: str | None = None) -> str:
    """Slug of `name` plus extension, the key used by the ledger."""
    return f"{slugify(name)}{extension or ''}"


class NamingService:
    def __init__(
        self,
        ledger: NameLedger,
        settings: Settings | None = None,
        generator: NameGenerator | None = None,
    ):
        self.ledger = ledger
        self.settings = settings or get_settings()
        self.generator = generator or NameGenerator(ledger, self.settings)

    async def generate(self, request: GenerationRequest) -> GeneratedName:
        return await self.generator.generate(request)

    async def register(
        self,
        name: str,
        preset_id: str | None = None,
        locale: str | None = None,
        extension: str | None = None,
    ) -> str:
        """Record `name` in the ledger.

        Registering an already registered name is a no-op. A released entry
        under the same key is reclaimed. Other ledger failures propagate.

        Returns:
            The ledger key (slug plus extension).
        """
        key = ledger_key(name, extension)
        entry = NameLedgerEntry(name_slug=key, preset_id=preset_id, locale=locale)
        try:
            await self.ledger.add(entry)
            logger.info(f"[Ledger] Registered name: {key} (preset={preset_id})")
        except DuplicateKeyError:
            existing = await self.ledger.get(key)
            if existing is not None and existing.released:
                await self.ledger.update_where_key_in(
                    [key], {"released": False, "preset_id": preset_id, "locale": locale}
                )
                logger.info(f"[Ledger] Reclaimed released name: {key} (preset={preset_id})")
            else:
                logger.debug(f"[Ledger] Name already registered: {key}")
        return key

    async def release(self, slugs: Sequence[str]) -> int:
        """Mark ledger entries as released so their names may be issued again."""
        if not slugs:
            return 0
        touched = await self.ledger.update_where_key_in(list(slugs), {"released": True})
        logger.info(f"[Ledger] Released {touched} of {len(slugs)} name(s)")
        return touched

    async def close(self) -> None:
        await self.ledger.close()


def create_naming_service(url: str | None = None) -> NamingService:
    """Create a service on the ledger configured by `DATABASE_URL`."""
    settings = get_settings()
    return NamingService(get_ledger(url or settings.database_url), settings)
