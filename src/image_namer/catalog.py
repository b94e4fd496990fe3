"""Built-in themes, word banks and presets.

Default presets allow every built-in bank. Callers narrow banks by theme
with `banks_for_theme`, which the word bank selector then treats as a
pre-filtered subset.
"""

from __future__ import annotations

import time
from collections.abc import Iterable

from pydantic import BaseModel, Field

from image_namer.models import CaseStyle, PartOfSpeech, Preset, WordBank, WordBankIds
from image_namer.wordlists import THEME_WORDLISTS


class Theme(BaseModel):
    id: str
    name: str
    description: str = ""


DEFAULT_THEMES: list[Theme] = [
    Theme(id="artistic", name="Artistic", description="Creative, poetic, and aesthetic names"),
    Theme(id="nature", name="Nature", description="Natural, organic, and outdoor-inspired names"),
    Theme(id="urban", name="Urban", description="Modern, architectural, and city-inspired names"),
    Theme(id="adventure", name="Adventure", description="Bold, exciting, and exploration-themed names"),
    Theme(id="scientific", name="Scientific", description="Technical, research-oriented, and analytical names"),
    Theme(id="universal", name="All", description="All words from all themes combined"),
]


def default_word_banks(locale: str = "en") -> list[WordBank]:
    banks: list[WordBank] = []
    for theme in DEFAULT_THEMES:
        adjectives, nouns = THEME_WORDLISTS[theme.id]
        banks.append(
            WordBank(
                id=f"{theme.id}-adjectives",
                theme_id=theme.id,
                type=PartOfSpeech.ADJECTIVE,
                locale=locale,
                name=f"{theme.name} Adjectives",
                words=list(adjectives),
            )
        )
        banks.append(
            WordBank(
                id=f"{theme.id}-nouns",
                theme_id=theme.id,
                type=PartOfSpeech.NOUN,
                locale=locale,
                name=f"{theme.name} Nouns",
                words=list(nouns),
            )
        )
    return banks


def _bank_ids(banks: Iterable[WordBank]) -> WordBankIds:
    banks = list(banks)
    return WordBankIds(
        adjectives=[b.id for b in banks if b.type == PartOfSpeech.ADJECTIVE],
        nouns=[b.id for b in banks if b.type == PartOfSpeech.NOUN],
    )


# (id, name, template, delimiter, case style, adjectives, overrides)
_PRESET_SPECS: list[tuple[str, str, str, str, CaseStyle, int, dict]] = [
    ("default-adjective-noun", "Simple", "{adjective} {noun}", " ", CaseStyle.TITLE, 1, {}),
    ("default-adjective-adjective-noun", "Descriptive", "{adjective}-{adjective}-{noun}", "-", CaseStyle.LOWER, 2, {}),
    (
        "default-adjective-adjective-adjective-noun", "Very descriptive",
        "{adjective}-{adjective}-{adjective}-{noun}", "-", CaseStyle.LOWER, 3, {},
    ),
    ("default-kebab", "Kebab", "{adjective}-{noun}", "-", CaseStyle.LOWER, 1, {}),
    ("default-snake", "Snake", "{adjective}_{noun}", "_", CaseStyle.LOWER, 1, {}),
    ("default-upper", "Shouting", "{adjective}_{noun}", "_", CaseStyle.UPPER, 1, {}),
    (
        "default-adjective-noun-date", "Dated", "{adjective}-{noun}-{date}", "-", CaseStyle.LOWER, 1,
        {"include_date_stamp": True},
    ),
    (
        "default-date-adjective-noun", "Date first", "{date}-{adjective}-{noun}", "-", CaseStyle.LOWER, 1,
        {"include_date_stamp": True},
    ),
    (
        "default-prefix-adjective-noun", "Prefixed", "{prefix}-{adjective}-{noun}", "-", CaseStyle.LOWER, 1,
        {"prefix": "photo"},
    ),
    (
        "default-prefix-adjective-adjective-noun", "Prefixed descriptive",
        "{prefix}-{adjective}-{adjective}-{noun}", "-", CaseStyle.LOWER, 2, {"prefix": "photo"},
    ),
    (
        "default-adjective-noun-suffix", "Suffixed", "{adjective}-{noun}-{suffix}", "-", CaseStyle.LOWER, 1,
        {"suffix": "img"},
    ),
    (
        "default-adjective-noun-suffix-counter", "Suffixed with counter",
        "{adjective}-{noun}-{suffix}-{counter}", "-", CaseStyle.LOWER, 1,
        {"suffix": "img", "use_counter": True},
    ),
    ("default-noun-adjective", "Reverse order", "{noun}-{adjective}", "-", CaseStyle.LOWER, 1, {}),
]


def default_presets(banks: Iterable[WordBank] | None = None) -> list[Preset]:
    ids = _bank_ids(banks if banks is not None else default_word_banks())
    return [
        Preset(
            id=preset_id,
            name=name,
            template=template,
            delimiter=delimiter,
            case_style=case_style,
            num_adjectives=num_adjectives,
            word_bank_ids=ids,
            **overrides,
        )
        for preset_id, name, template, delimiter, case_style, num_adjectives, overrides in _PRESET_SPECS
    ]


def get_preset(preset_id: str, presets: Iterable[Preset] | None = None) -> Preset:
    for preset in presets if presets is not None else default_presets():
        if preset.id == preset_id:
            return preset
    raise KeyError(f"Unknown preset: {preset_id}")


class WordBankImport(BaseModel):
    """Payload accepted by `import_word_bank` (JSON/CSV import)."""

    type: PartOfSpeech
    locale: str = "en"
    name: str
    words: list[str] = Field(default_factory=list)
    category: str | None = None
    nsfw: bool = False
    theme_id: str = ""


def import_word_bank(data: WordBankImport | dict, bank_id: str | None = None) -> WordBank:
    """Build a word bank from imported data, dropping blank and duplicate words."""
    if not isinstance(data, WordBankImport):
        data = WordBankImport.model_validate(data)
    words = list(dict.fromkeys(w.strip() for w in data.words if w and w.strip()))
    return WordBank(
        id=bank_id or f"{data.type.value}-{data.locale}-{int(time.time() * 1000)}",
        theme_id=data.theme_id,
        type=data.type,
        locale=data.locale,
        name=data.name,
        words=words,
        category=data.category,
        nsfw=data.nsfw,
    )


def export_word_bank(bank: WordBank) -> dict:
    return bank.model_dump(exclude={"theme_id"})
