"""Tests for name registration and release."""

from unittest.mock import AsyncMock

import pytest

from image_namer.exceptions import LedgerError
from image_namer.ledger.memory import InMemoryNameLedger
from image_namer.models import GenerationRequest, NameLedgerEntry
from image_namer.service import NamingService, create_naming_service, ledger_key
from tests.conftest import make_preset


def test_ledger_key():
    assert ledger_key("Bright Sky", ".jpg") == "bright-sky.jpg"
    assert ledger_key("bright-sky") == "bright-sky"


@pytest.mark.asyncio
async def test_register_records_entry(settings):
    ledger = InMemoryNameLedger()
    service = NamingService(ledger, settings)

    key = await service.register("Bright Sky", preset_id="p1", locale="en", extension=".jpg")

    assert key == "bright-sky.jpg"
    entry = await ledger.get(key)
    assert entry.preset_id == "p1"
    assert entry.locale == "en"
    assert entry.released is False


@pytest.mark.asyncio
async def test_register_is_idempotent(settings):
    ledger = InMemoryNameLedger()
    service = NamingService(ledger, settings)

    await service.register("bright-sky", extension=".jpg")
    await service.register("bright-sky", extension=".jpg")

    assert len(ledger) == 1


@pytest.mark.asyncio
async def test_register_reclaims_released_entry(settings):
    ledger = InMemoryNameLedger([NameLedgerEntry(name_slug="bright-sky.jpg", released=True)])
    service = NamingService(ledger, settings)

    await service.register("bright-sky", preset_id="p2", extension=".jpg")

    entry = await ledger.get("bright-sky.jpg")
    assert entry.released is False
    assert entry.preset_id == "p2"


@pytest.mark.asyncio
async def test_register_propagates_other_errors(settings):
    ledger = InMemoryNameLedger()
    ledger.add = AsyncMock(side_effect=LedgerError("disk full"))
    service = NamingService(ledger, settings)

    with pytest.raises(LedgerError):
        await service.register("bright-sky", extension=".jpg")


@pytest.mark.asyncio
async def test_release_round_trip(settings, bright_sky_banks):
    ledger = InMemoryNameLedger()
    service = NamingService(ledger, settings)
    preset = make_preset()

    first = await service.generate(GenerationRequest(preset=preset, word_banks=bright_sky_banks, extension=".jpg"))
    key = await service.register(first.name, preset.id, extension=".jpg")
    assert await ledger.is_taken(key)

    assert await service.release([key]) == 1
    entry = await ledger.get(key)
    assert entry.released is True

    again = await service.generate(GenerationRequest(preset=preset, word_banks=bright_sky_banks, extension=".jpg"))
    assert again.full_slug(".jpg") == key


@pytest.mark.asyncio
async def test_release_nothing(settings):
    ledger = InMemoryNameLedger()
    ledger.update_where_key_in = AsyncMock()
    service = NamingService(ledger, settings)

    assert await service.release([]) == 0
    ledger.update_where_key_in.assert_not_called()


@pytest.mark.asyncio
async def test_release_unknown_keys(settings):
    service = NamingService(InMemoryNameLedger(), settings)
    assert await service.release(["missing.jpg"]) == 0


@pytest.mark.asyncio
async def test_memory_url_builds_in_memory_ledger():
    service = create_naming_service("memory://")
    assert isinstance(service.ledger, InMemoryNameLedger)
    await service.close()
