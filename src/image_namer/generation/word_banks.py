"""Word bank selection.

Resolves which adjectives and nouns a generation request may draw from.
Supplied banks are either the full universe (filtered by the preset's
allowed ids) or a caller-narrowed subset such as a single theme, in which
case every supplied word is used.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from image_namer.exceptions import InsufficientWordBanksError, NoWordsAvailableError
from image_namer.models import PartOfSpeech, Preset, ResolutionMode, WordBank

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WordPools:
    adjectives: list[str]
    nouns: list[str]
    mode: ResolutionMode


def banks_for_theme(banks: Iterable[WordBank], theme_id: str) -> list[WordBank]:
    return [bank for bank in banks if bank.theme_id == theme_id]


def detect_resolution_mode(
    preset: Preset,
    adjective_banks: list[WordBank],
    noun_banks: list[WordBank],
) -> ResolutionMode:
    """Infer the resolution mode from bank id sets.

    Supplied banks that are a strict subset of the preset's allowed ids were
    narrowed by the caller, so they are used as-is.
    """
    allowed_adj = set(preset.word_bank_ids.adjectives)
    allowed_noun = set(preset.word_bank_ids.nouns)
    supplied_adj = {bank.id for bank in adjective_banks}
    supplied_noun = {bank.id for bank in noun_banks}

    is_subset = supplied_adj <= allowed_adj and supplied_noun <= allowed_noun
    is_strict = len(supplied_adj) < len(allowed_adj) or len(supplied_noun) < len(allowed_noun)
    if is_subset and is_strict:
        return ResolutionMode.PRE_FILTERED
    return ResolutionMode.PRESET_FILTERED


def resolve_word_pools(
    preset: Preset,
    banks: Iterable[WordBank],
    mode: ResolutionMode | None = None,
) -> WordPools:
    """Collect eligible adjectives and nouns for a preset.

    Args:
        preset: Preset supplying allowed bank ids and the NSFW flag.
        banks: Word banks supplied by the caller.
        mode: Explicit resolution mode. Inferred from the bank ids when None.

    Returns:
        WordPools with the eligible words and the mode that was applied.

    Raises:
        InsufficientWordBanksError: No adjective or no noun bank survives the NSFW filter.
        NoWordsAvailableError: Resolution leaves no adjectives or no nouns.
    """
    eligible = [bank for bank in banks if not (preset.nsfw_filter and bank.nsfw)]
    adjective_banks = [bank for bank in eligible if bank.type == PartOfSpeech.ADJECTIVE]
    noun_banks = [bank for bank in eligible if bank.type == PartOfSpeech.NOUN]

    if not adjective_banks or not noun_banks:
        raise InsufficientWordBanksError(len(adjective_banks), len(noun_banks))

    if mode is None:
        mode = detect_resolution_mode(preset, adjective_banks, noun_banks)

    if mode is ResolutionMode.PRESET_FILTERED:
        allowed_adj = set(preset.word_bank_ids.adjectives)
        allowed_noun = set(preset.word_bank_ids.nouns)
        adjective_banks = [bank for bank in adjective_banks if bank.id in allowed_adj]
        noun_banks = [bank for bank in noun_banks if bank.id in allowed_noun]

    adjectives = [word for bank in adjective_banks for word in bank.words]
    nouns = [word for bank in noun_banks for word in bank.words]

    if not adjectives or not nouns:
        raise NoWordsAvailableError(len(adjectives), len(nouns))

    logger.debug(
        f"[WordBanks] preset={preset.id} mode={mode.value} "
        f"adjectives={len(adjectives)} nouns={len(nouns)}"
    )
    return WordPools(adjectives=adjectives, nouns=nouns, mode=mode)
