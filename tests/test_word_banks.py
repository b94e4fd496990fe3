"""Tests for word bank resolution."""

import pytest

from image_namer.exceptions import InsufficientWordBanksError, NoWordsAvailableError
from image_namer.generation.word_banks import banks_for_theme, resolve_word_pools
from image_namer.models import ResolutionMode
from tests.conftest import adjective_bank, make_preset, noun_bank


def test_strict_subset_is_pre_filtered():
    """Supplying {A} when the preset allows {A, B} uses every word in A."""
    preset = make_preset(adjective_ids=("A", "B"), noun_ids=("N",))
    banks = [adjective_bank("A", ["bright", "calm"]), noun_bank("N", ["sky"])]

    pools = resolve_word_pools(preset, banks)

    assert pools.mode is ResolutionMode.PRE_FILTERED
    assert pools.adjectives == ["bright", "calm"]
    assert pools.nouns == ["sky"]


def test_pre_filtered_keeps_banks_outside_preset():
    preset = make_preset(adjective_ids=("A", "B"), noun_ids=("N", "M"))
    banks = [adjective_bank("A", ["bright"]), noun_bank("N", ["sky"])]
    assert resolve_word_pools(preset, banks).mode is ResolutionMode.PRE_FILTERED


def test_full_universe_is_preset_filtered():
    preset = make_preset(adjective_ids=("A",), noun_ids=("N",))
    banks = [
        adjective_bank("A", ["bright"]),
        adjective_bank("X", ["hidden"]),
        noun_bank("N", ["sky"]),
    ]

    pools = resolve_word_pools(preset, banks)

    assert pools.mode is ResolutionMode.PRESET_FILTERED
    assert pools.adjectives == ["bright"]


def test_equal_sets_are_preset_filtered():
    preset = make_preset(adjective_ids=("A",), noun_ids=("N",))
    banks = [adjective_bank("A", ["bright"]), noun_bank("N", ["sky"])]
    assert resolve_word_pools(preset, banks).mode is ResolutionMode.PRESET_FILTERED


def test_explicit_mode_overrides_inference():
    preset = make_preset(adjective_ids=("A",), noun_ids=("N",))
    banks = [adjective_bank("X", ["outside"]), noun_bank("N", ["sky"])]

    pools = resolve_word_pools(preset, banks, ResolutionMode.PRE_FILTERED)

    assert pools.adjectives == ["outside"]

    with pytest.raises(NoWordsAvailableError):
        resolve_word_pools(preset, banks, ResolutionMode.PRESET_FILTERED)


def test_nsfw_banks_dropped_when_filter_on():
    preset = make_preset(adjective_ids=("A", "R"), noun_ids=("N",), nsfw_filter=True)
    banks = [
        adjective_bank("A", ["bright"]),
        adjective_bank("R", ["racy"], nsfw=True),
        noun_bank("N", ["sky"]),
    ]

    pools = resolve_word_pools(preset, banks)

    assert "racy" not in pools.adjectives


def test_nsfw_filter_can_leave_no_banks():
    preset = make_preset(nsfw_filter=True)
    banks = [adjective_bank("adj", ["bright"]), noun_bank("noun", ["sky"], nsfw=True)]

    with pytest.raises(InsufficientWordBanksError) as exc:
        resolve_word_pools(preset, banks)

    assert exc.value.adjective_banks == 1
    assert exc.value.noun_banks == 0


def test_missing_adjective_banks():
    with pytest.raises(InsufficientWordBanksError):
        resolve_word_pools(make_preset(), [noun_bank("noun", ["sky"])])


def test_empty_banks_raise_no_words():
    banks = [adjective_bank("adj", []), noun_bank("noun", ["sky"])]

    with pytest.raises(NoWordsAvailableError) as exc:
        resolve_word_pools(make_preset(), banks)

    assert exc.value.adjective_words == 0
    assert exc.value.noun_words == 1


def test_banks_for_theme():
    banks = [
        adjective_bank("a1", ["bright"], theme_id="nature"),
        adjective_bank("a2", ["neon"], theme_id="urban"),
        noun_bank("n1", ["river"], theme_id="nature"),
    ]
    assert [b.id for b in banks_for_theme(banks, "nature")] == ["a1", "n1"]
