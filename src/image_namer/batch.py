"""Batch naming: one session state shared by every file of a rename run."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import PurePath

from image_namer.models import (
    GeneratedName,
    GenerationRequest,
    Preset,
    ResolutionMode,
    SessionState,
    WordBank,
)
from image_namer.service import NamingService

logger = logging.getLogger(__name__)


@dataclass
class BatchItem:
    """A file queued for renaming."""

    original_name: str
    locked: bool = False

    @property
    def extension(self) -> str:
        return PurePath(self.original_name).suffix.lower()


@dataclass
class BatchEntry:
    original_name: str
    new_name: str
    ledger_key: str | None = None
    generated: GeneratedName | None = None
    locked: bool = False


@dataclass
class BatchNamer:
    """Generate names for a batch sequentially and track them for undo.

    Generation and registration run one file at a time, which is the
    ordering the ledger check relies on.
    """

    service: NamingService
    preset: Preset
    word_banks: list[WordBank]
    locale: str | None = None
    resolution_mode: ResolutionMode | None = None
    session: SessionState = field(default_factory=SessionState)
    registered: list[str] = field(default_factory=list)

    async def name_one(self, extension: str) -> GeneratedName:
        request = GenerationRequest(
            preset=self.preset,
            word_banks=self.word_banks,
            extension=extension,
            session=self.session,
            resolution_mode=self.resolution_mode,
        )
        generated = await self.service.generate(request)
        self.session.claim(generated, extension)
        return generated

    async def run(self, items: list[BatchItem], register: bool = True) -> list[BatchEntry]:
        """Name every unlocked item; locked items keep their original name.

        With `register` set, each name is committed to the ledger right after
        it is generated.
        """
        entries: list[BatchEntry] = []
        for item in items:
            if item.locked:
                entries.append(BatchEntry(item.original_name, item.original_name, locked=True))
                continue

            generated = await self.name_one(item.extension)
            key = None
            if register:
                key = await self.service.register(
                    generated.name,
                    preset_id=self.preset.id,
                    locale=self.locale,
                    extension=item.extension,
                )
                self.registered.append(key)
            entries.append(
                BatchEntry(
                    original_name=item.original_name,
                    new_name=generated.filename(item.extension),
                    ledger_key=key,
                    generated=generated,
                )
            )

        logger.info(
            f"[Batch] Named {sum(1 for e in entries if not e.locked)} of {len(items)} file(s) "
            f"with preset={self.preset.id}"
        )
        return entries

    async def undo(self) -> int:
        """Release every name this batch registered and forget them in the session."""
        keys = list(self.registered)
        touched = await self.service.release(keys)
        self.session.used_names.difference_update(keys)
        self.registered.clear()
        return touched
