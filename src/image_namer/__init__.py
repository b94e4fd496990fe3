"""Human-readable, collision-free file names for image batches.

Names are built from word-template presets, checked against the caller's
session and a persistent ledger, and fall back through cheaper strategies
when the word space is exhausted.
"""

from image_namer.batch import BatchItem, BatchNamer
from image_namer.exceptions import (
    ConfigurationError,
    DuplicateKeyError,
    FilenameError,
    InsufficientWordBanksError,
    NamingError,
    NoWordsAvailableError,
)
from image_namer.generation import NameGenerator, SeededRNG, normalize_name, slugify, validate_filename
from image_namer.ledger import InMemoryNameLedger, NameLedger, SqlNameLedger, get_ledger
from image_namer.models import (
    CaseStyle,
    GeneratedName,
    GenerationRequest,
    NameLedgerEntry,
    PartOfSpeech,
    Preset,
    ResolutionMode,
    SessionState,
    WordBank,
)
from image_namer.service import NamingService, create_naming_service

__all__ = [
    # Models
    "CaseStyle",
    "GeneratedName",
    "GenerationRequest",
    "NameLedgerEntry",
    "PartOfSpeech",
    "Preset",
    "ResolutionMode",
    "SessionState",
    "WordBank",
    # Engine
    "NameGenerator",
    "SeededRNG",
    "normalize_name",
    "slugify",
    "validate_filename",
    # Ledger
    "NameLedger",
    "InMemoryNameLedger",
    "SqlNameLedger",
    "get_ledger",
    # Service
    "NamingService",
    "create_naming_service",
    "BatchItem",
    "BatchNamer",
    # Errors
    "NamingError",
    "ConfigurationError",
    "InsufficientWordBanksError",
    "NoWordsAvailableError",
    "DuplicateKeyError",
    "FilenameError",
]
