"""Pytest configuration and fixtures."""

import pytest

from image_namer.config import Settings
from image_namer.ledger.memory import InMemoryNameLedger
from image_namer.models import PartOfSpeech, Preset, WordBank, WordBankIds

_ENV_KEYS = (
    "APP_NAME",
    "ENVIRONMENT",
    "DATABASE_URL",
    "LOG_LEVEL",
    "MAX_FILENAME_LENGTH",
    "MAX_RETRIES",
    "COUNTER_PROBE_LIMIT",
    "HASH_FALLBACK_ATTEMPTS",
    "DEFAULT_LOCALE",
    "STRIP_DIACRITICS",
    "ASCII_ONLY",
)


@pytest.fixture
def settings(monkeypatch):
    """Settings built from defaults only."""
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    return Settings()


@pytest.fixture
def ledger():
    return InMemoryNameLedger()


def adjective_bank(bank_id: str, words: list[str], **kwargs) -> WordBank:
    return WordBank(id=bank_id, type=PartOfSpeech.ADJECTIVE, words=words, **kwargs)


def noun_bank(bank_id: str, words: list[str], **kwargs) -> WordBank:
    return WordBank(id=bank_id, type=PartOfSpeech.NOUN, words=words, **kwargs)


def make_preset(adjective_ids=("adj",), noun_ids=("noun",), **kwargs) -> Preset:
    kwargs.setdefault("id", "test-preset")
    return Preset(
        word_bank_ids=WordBankIds(adjectives=list(adjective_ids), nouns=list(noun_ids)),
        **kwargs,
    )


@pytest.fixture
def bright_sky_banks():
    """Single-word banks: only 'bright-sky' can be built from them."""
    return [adjective_bank("adj", ["bright"]), noun_bank("noun", ["sky"])]
