"""Tests for name normalization and validation."""

import pytest
from pydantic import ValidationError

from image_namer.exceptions import FilenameError
from image_namer.generation.normalize import (
    apply_character_filters,
    normalize_name,
    slugify,
    strip_diacritics,
    to_ascii_only,
    validate_filename,
)
from image_namer.models import CaseStyle
from tests.conftest import make_preset


def test_lower_case_style():
    assert normalize_name("Bright Sky", CaseStyle.LOWER) == "bright sky"


def test_title_case_style():
    assert normalize_name("bright sky", CaseStyle.TITLE) == "Bright Sky"


def test_upper_case_style():
    assert normalize_name("bright-sky", CaseStyle.UPPER) == "BRIGHT-SKY"


def test_sentence_case_style():
    assert normalize_name("bRIGHT sKY", CaseStyle.SENTENCE) == "Bright sky"


def test_title_case_treats_hyphenated_run_as_one_word():
    assert normalize_name("bright-sky", CaseStyle.TITLE) == "Bright-sky"


@pytest.mark.parametrize("legacy", ["kebab", "snake"])
def test_legacy_styles_alias_to_lower(legacy):
    assert normalize_name("Bright Sky", legacy) == "bright sky"


def test_string_styles_are_parsed():
    assert normalize_name("bright sky", "UPPER") == "BRIGHT SKY"
    assert normalize_name("bright sky", "title") == "Bright Sky"


def test_unknown_case_style_is_rejected():
    with pytest.raises(ValueError):
        CaseStyle.parse("camel")
    with pytest.raises(ValueError):
        normalize_name("bright sky", "TitleCase")


def test_unsafe_characters_are_stripped():
    assert normalize_name('a<b>:c"d/e\\f|g?h*i\x01', CaseStyle.LOWER) == "abcdefghi"


def test_empty_name_is_fine():
    assert normalize_name("", CaseStyle.SENTENCE) == ""


def test_reserved_name():
    assert validate_filename("CON", ".txt", 255) is FilenameError.RESERVED_NAME


@pytest.mark.parametrize("name", ["con", "Nul", "com1", "LPT9", "aux.tar"])
def test_reserved_names_case_insensitive(name):
    assert validate_filename(name, ".jpg", 255) is FilenameError.RESERVED_NAME


def test_reserved_prefix_is_not_reserved():
    assert validate_filename("console", ".jpg", 255) is None
    assert validate_filename("con1", ".jpg", 255) is None


def test_leading_whitespace():
    assert validate_filename(" leading", ".jpg", 255) is FilenameError.INVALID_EDGES


@pytest.mark.parametrize("name", ["", "trailing ", "trailing.", ".hidden"])
def test_invalid_edges(name):
    assert validate_filename(name, ".jpg", 255) is FilenameError.INVALID_EDGES


def test_too_long():
    assert validate_filename("a" * 300, ".jpg", 255) is FilenameError.TOO_LONG


def test_length_includes_extension():
    assert validate_filename("a" * 251, ".jpg", 255) is None
    assert validate_filename("a" * 252, ".jpg", 255) is FilenameError.TOO_LONG


def test_invalid_characters():
    assert validate_filename("a|b", ".jpg", 255) is FilenameError.INVALID_CHARACTERS


def test_valid_name():
    assert validate_filename("bright-sky", ".jpg", 255) is None


def test_slugify():
    assert slugify("Bright Sky") == "bright-sky"
    assert slugify("Misty_Harbor 2") == "misty-harbor-2"
    assert slugify("BRIGHT-SKY") == "bright-sky"


def test_character_filters():
    assert strip_diacritics("Été brûlé") == "Ete brule"
    assert to_ascii_only("café☕") == "caf"
    assert apply_character_filters("Crème", strip_marks=True, ascii_only=True) == "Creme"
    assert apply_character_filters("Crème") == "Crème"


def test_filename_error_messages():
    assert FilenameError.RESERVED_NAME.message == "Reserved Windows filename"
    assert all(error.message for error in FilenameError)


def test_preset_rejects_unknown_case_style():
    with pytest.raises(ValidationError):
        make_preset(case_style="fancy")
    assert make_preset(case_style="kebab").case_style is CaseStyle.LOWER
