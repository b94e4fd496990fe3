"""Name generation engine: RNG, normalization, word selection, assembly and collision resolution."""

from image_namer.generation.engine import NameGenerator
from image_namer.generation.normalize import normalize_name, slugify, validate_filename
from image_namer.generation.rng import SeededRNG
from image_namer.generation.word_banks import WordPools, banks_for_theme, resolve_word_pools

__all__ = [
    "NameGenerator",
    "SeededRNG",
    "WordPools",
    "banks_for_theme",
    "normalize_name",
    "resolve_word_pools",
    "slugify",
    "validate_filename",
]
