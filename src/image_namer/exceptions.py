"""Error taxonomy for name generation.

Configuration errors abort a generation call. Filename validation problems
are reported as `FilenameError` values and absorbed by the retry cascade.
Ledger errors other than duplicate keys propagate to the caller unchanged.
"""

from __future__ import annotations

from enum import Enum


class NamingError(Exception):
    """Base class for all image_namer errors."""


class ConfigurationError(NamingError):
    """Preset or word-bank setup cannot produce names."""


class InsufficientWordBanksError(ConfigurationError):
    def __init__(self, adjective_banks: int, noun_banks: int):
        self.adjective_banks = adjective_banks
        self.noun_banks = noun_banks
        super().__init__(
            f"Insufficient word banks (adjective banks: {adjective_banks}, noun banks: {noun_banks})"
        )


class NoWordsAvailableError(ConfigurationError):
    def __init__(self, adjective_words: int, noun_words: int):
        self.adjective_words = adjective_words
        self.noun_words = noun_words
        super().__init__(
            f"No words available in selected word banks "
            f"(adjectives: {adjective_words}, nouns: {noun_words})"
        )


class LedgerError(NamingError):
    """Failure reported by a name ledger adapter."""


class DuplicateKeyError(LedgerError):
    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Ledger entry already exists: {key}")


class FilenameError(Enum):
    """Reasons a candidate file name is rejected."""

    RESERVED_NAME = "reserved_name"
    TOO_LONG = "too_long"
    INVALID_CHARACTERS = "invalid_characters"
    INVALID_EDGES = "invalid_edges"

    @property
    def message(self) -> str:
        return {
            FilenameError.RESERVED_NAME: "Reserved Windows filename",
            FilenameError.TOO_LONG: "Filename too long",
            FilenameError.INVALID_CHARACTERS: "Contains invalid characters",
            FilenameError.INVALID_EDGES: "Invalid leading/trailing characters",
        }[self]
