"""Name strategies tried in order by the generator.

Each strategy gets the shared `GenerationContext` and returns a
`GeneratedName` or None when it is exhausted. Later strategies are cheaper
and harder to collide; the last one is terminal and always returns a name.
"""

from __future__ import annotations

import datetime as dt
import logging
import random
import re
import string
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from image_namer.exceptions import FilenameError
from image_namer.generation.assembler import assemble_name
from image_namer.generation.normalize import (
    apply_character_filters,
    normalize_name,
    slugify,
    validate_filename,
)
from image_namer.generation.rng import SeededRNG
from image_namer.generation.word_banks import WordPools
from image_namer.ledger.ports import NameLedger
from image_namer.models import GeneratedName, GenerationRequest, Preset, SessionState

logger = logging.getLogger(__name__)

BASE36_ALPHABET = string.digits + string.ascii_lowercase
FALLBACK_BASE = "image"

_NON_ALNUM = re.compile(r"[^a-z0-9]", re.IGNORECASE)


def to_base36(value: int) -> str:
    if value < 0:
        return "-" + to_base36(-value)
    if value == 0:
        return "0"
    digits = []
    while value:
        value, rem = divmod(value, 36)
        digits.append(BASE36_ALPHABET[rem])
    return "".join(reversed(digits))


def random_base36(length: int = 6) -> str:
    return "".join(random.choices(BASE36_ALPHABET, k=length))


@dataclass
class GenerationContext:
    """Everything a strategy needs for one generation call."""

    request: GenerationRequest
    pools: WordPools
    ledger: NameLedger
    rng: SeededRNG
    max_length: int
    max_retries: int
    counter_probe_limit: int = 1000
    hash_attempts: int = 100
    strip_diacritics: bool = False
    ascii_only: bool = False
    today: dt.date = field(default_factory=dt.date.today)

    @property
    def preset(self) -> Preset:
        return self.request.preset

    @property
    def session(self) -> SessionState:
        return self.request.session

    @property
    def extension(self) -> str:
        return self.request.extension

    async def is_free(self, full_slug: str) -> bool:
        """Free in the session set and not held by an unreleased ledger entry."""
        if full_slug in self.session.used_names:
            return False
        return not await self.ledger.is_taken(full_slug)

    async def accept(self, name: str) -> GeneratedName | None:
        # Only valid candidates reach the ledger
        if validate_filename(name, self.extension, self.max_length) is not None:
            return None
        slug = slugify(name)
        if not await self.is_free(f"{slug}{self.extension}"):
            return None
        return GeneratedName(name=name, slug=slug)

    def fallback_base(self) -> str:
        return self.preset.prefix or FALLBACK_BASE


class NameStrategy(ABC):
    name: str = "strategy"
    terminal: bool = False

    @abstractmethod
    async def attempt(self, ctx: GenerationContext) -> GeneratedName | None:
        """Return a free, valid name or None when this strategy is exhausted."""


class WordTemplateStrategy(NameStrategy):
    """Draw words, assemble the template and resolve collisions with counters."""

    name = "words"

    def draw_words(self, ctx: GenerationContext) -> tuple[list[str], str]:
        count = ctx.preset.num_adjectives
        used_adj = ctx.session.used_adjectives
        used_nouns = ctx.session.used_nouns

        unused_adj = [adj for adj in ctx.pools.adjectives if adj.lower() not in used_adj]
        adjective_pool = unused_adj if len(unused_adj) >= count else ctx.pools.adjectives
        adjectives = [ctx.rng.choice(adjective_pool) for _ in range(count)]

        unused_nouns = [noun for noun in ctx.pools.nouns if noun.lower() not in used_nouns]
        noun = ctx.rng.choice(unused_nouns or ctx.pools.nouns)
        return adjectives, noun

    def build_name(self, ctx: GenerationContext, adjectives: list[str], noun: str) -> str:
        raw = assemble_name(ctx.preset, adjectives, noun, ctx.today)
        raw = apply_character_filters(raw, ctx.strip_diacritics, ctx.ascii_only)
        return normalize_name(raw, ctx.preset.case_style)

    async def probe_counters(self, ctx: GenerationContext, name: str) -> GeneratedName | None:
        preset = ctx.preset
        start = preset.counter_start
        for counter in range(start, start + ctx.counter_probe_limit):
            found = await ctx.accept(f"{name}{preset.delimiter}{counter}")
            if found is not None:
                return found
        return None

    async def attempt(self, ctx: GenerationContext) -> GeneratedName | None:
        preset = ctx.preset
        for _ in range(ctx.max_retries):
            adjectives, noun = self.draw_words(ctx)
            name = self.build_name(ctx, adjectives, noun)
            slug = slugify(name)
            full_slug = f"{slug}{ctx.extension}"

            if full_slug in ctx.session.used_names:
                continue

            if await ctx.ledger.is_taken(full_slug):
                if preset.use_counter:
                    found = await self.probe_counters(ctx, name)
                    if found is not None:
                        return found
                continue

            error = validate_filename(name, ctx.extension, ctx.max_length)
            if error is not None:
                # Counter suffixes only make a name longer
                if preset.use_counter and error is not FilenameError.TOO_LONG:
                    found = await self.probe_counters(ctx, name)
                    if found is not None:
                        return found
                continue

            ctx.session.commit_words(adjectives, noun)
            return GeneratedName(name=name, slug=slug, strategy=self.name)
        return None


class HashFallbackStrategy(NameStrategy):
    """``{prefix or image}{delimiter}{6 random base36 chars}``."""

    name = "hash"

    async def attempt(self, ctx: GenerationContext) -> GeneratedName | None:
        preset = ctx.preset
        for _ in range(ctx.hash_attempts):
            candidate = f"{ctx.fallback_base()}{preset.delimiter}{random_base36()}"
            found = await ctx.accept(normalize_name(candidate, preset.case_style))
            if found is not None:
                return found.model_copy(update={"strategy": self.name})
        return None


class TimestampFallbackStrategy(NameStrategy):
    """Base36 millisecond timestamp plus a random base36 suffix, checked once."""

    name = "timestamp"

    async def attempt(self, ctx: GenerationContext) -> GeneratedName | None:
        preset = ctx.preset
        stamp = to_base36(int(time.time() * 1000))
        candidate = f"{ctx.fallback_base()}{preset.delimiter}{stamp}-{random_base36()}"
        found = await ctx.accept(normalize_name(candidate, preset.case_style))
        if found is None:
            return None
        return found.model_copy(update={"strategy": self.name})


class AbsoluteFallbackStrategy(NameStrategy):
    """Last resort: wall clock, monotonic clock and a random fraction.

    Returned without any uniqueness check.
    """

    name = "absolute"
    terminal = True

    async def attempt(self, ctx: GenerationContext) -> GeneratedName:
        preset = ctx.preset
        raw = f"{int(time.time() * 1000)}-{time.perf_counter()}-{random.random()}"
        candidate = f"{ctx.fallback_base()}{preset.delimiter}{_NON_ALNUM.sub('-', raw)}"
        name = normalize_name(candidate, preset.case_style)
        return GeneratedName(name=name, slug=slugify(name), strategy=self.name)


def default_strategies() -> list[NameStrategy]:
    return [
        WordTemplateStrategy(),
        HashFallbackStrategy(),
        TimestampFallbackStrategy(),
        AbsoluteFallbackStrategy(),
    ]
