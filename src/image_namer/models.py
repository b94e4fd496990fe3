"""
Data models for name generation.

Pydantic models describe presets, word banks and ledger entries. Structures
that the batch caller owns and mutates between calls are plain dataclasses.
"""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass, field
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class CaseStyle(str, Enum):
    """Case transform applied to an assembled name."""

    TITLE = "Title"
    SENTENCE = "Sentence"
    LOWER = "lower"
    UPPER = "upper"

    @classmethod
    def parse(cls, value: CaseStyle | str) -> CaseStyle:
        """Convert user or stored input to a case style.

        Legacy ``kebab`` and ``snake`` styles are treated as ``lower``.

        Raises:
            ValueError: The value names no known case style.
        """
        if isinstance(value, cls):
            return value
        key = str(value).strip().lower()
        try:
            return _CASE_STYLE_ALIASES[key]
        except KeyError:
            raise ValueError(f"Unknown case style: {value!r}") from None


_CASE_STYLE_ALIASES: dict[str, CaseStyle] = {
    "title": CaseStyle.TITLE,
    "sentence": CaseStyle.SENTENCE,
    "lower": CaseStyle.LOWER,
    "upper": CaseStyle.UPPER,
    # legacy styles
    "kebab": CaseStyle.LOWER,
    "snake": CaseStyle.LOWER,
}


class PartOfSpeech(str, Enum):
    ADJECTIVE = "adjective"
    NOUN = "noun"


class ResolutionMode(str, Enum):
    """How supplied word banks are narrowed to eligible words."""

    PRESET_FILTERED = "preset_filtered"
    PRE_FILTERED = "pre_filtered"


class WordBankIds(BaseModel):
    """Word bank ids a preset may draw from, split by part of speech."""

    model_config = ConfigDict(frozen=True)

    adjectives: list[str] = Field(default_factory=list)
    nouns: list[str] = Field(default_factory=list)


class Preset(BaseModel):
    """A named generation rule: template, formatting and allowed word banks."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(description="Unique preset id")
    name: str = Field(default="", description="Display name")
    template: str = Field(default="{adjective}-{noun}", description="Ordered slot template")
    delimiter: str = Field(default="-", description="Joins name segments")
    case_style: CaseStyle = Field(default=CaseStyle.LOWER, alias="caseStyle")
    num_adjectives: int = Field(default=1, ge=0, alias="numAdjectives")
    prefix: str = Field(default="", description="Literal text placed before the words")
    suffix: str = Field(default="", description="Literal text placed after the words")
    include_date_stamp: bool = Field(default=False, alias="includeDateStamp")
    date_format: str = Field(default="%Y%m%d", alias="dateFormat")
    use_counter: bool = Field(default=False, alias="useCounter")
    counter_start: int = Field(default=1, alias="counterStart")
    nsfw_filter: bool = Field(default=False, alias="nsfwFilter")
    word_bank_ids: WordBankIds = Field(default_factory=WordBankIds, alias="wordBankIds")

    @field_validator("case_style", mode="before")
    @classmethod
    def parse_case_style(cls, v) -> CaseStyle:
        return CaseStyle.parse(v)

    @field_validator("prefix", "suffix", mode="before")
    @classmethod
    def none_to_empty(cls, v) -> str:
        return v or ""


class WordBank(BaseModel):
    """A named, read-only collection of adjectives or nouns."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    theme_id: str = Field(default="", alias="themeId")
    type: PartOfSpeech
    locale: str = "en"
    name: str = ""
    words: list[str] = Field(default_factory=list)
    category: str | None = None
    nsfw: bool = False


class NameLedgerEntry(BaseModel):
    """Durable record of an issued name, keyed by slug plus extension."""

    name_slug: str = Field(description="Normalized slug including extension, e.g. 'bright-sky.jpg'")
    created_at: dt.datetime = Field(default_factory=lambda: dt.datetime.now(dt.timezone.utc))
    preset_id: str | None = None
    locale: str | None = None
    released: bool = False


class GeneratedName(BaseModel):
    """Result of a generation call."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Case-styled display name without extension")
    slug: str = Field(description="Lookup slug without extension")
    strategy: str = Field(default="words", description="Strategy that produced the name")

    def full_slug(self, extension: str) -> str:
        return f"{self.slug}{extension}"

    def filename(self, extension: str) -> str:
        return f"{self.name}{extension}"


@dataclass
class SessionState:
    """Names and words already issued within one batch run.

    Owned by the batch caller and threaded through every generation call.
    Words are stored lowercased; names are stored as full slugs with extension.
    """

    used_names: set[str] = field(default_factory=set)
    used_adjectives: set[str] = field(default_factory=set)
    used_nouns: set[str] = field(default_factory=set)

    def claim(self, generated: GeneratedName, extension: str) -> str:
        full_slug = generated.full_slug(extension)
        self.used_names.add(full_slug)
        return full_slug

    def commit_words(self, adjectives: list[str], noun: str) -> None:
        self.used_adjectives.update(adj.lower() for adj in adjectives)
        self.used_nouns.add(noun.lower())


@dataclass
class GenerationRequest:
    """Inputs for a single generation call."""

    preset: Preset
    word_banks: list[WordBank]
    extension: str = ""
    session: SessionState = field(default_factory=SessionState)
    max_length: int | None = None
    max_retries: int | None = None
    resolution_mode: ResolutionMode | None = None
    seed: float | None = None
    strip_diacritics: bool | None = None
    ascii_only: bool | None = None
