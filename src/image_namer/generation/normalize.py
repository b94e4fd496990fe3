"""
Name normalization and validation.

Applies case styles, strips characters that are unsafe on common
filesystems, and validates candidates against Windows reserved device names
and length limits. The rules are a portable baseline, not a per-filesystem
check.
"""

from __future__ import annotations

import re
import unicodedata

from image_namer.exceptions import FilenameError
from image_namer.models import CaseStyle

# Windows reserved device names
WINDOWS_RESERVED = frozenset(
    {
        "CON", "PRN", "AUX", "NUL",
        "COM1", "COM2", "COM3", "COM4", "COM5", "COM6", "COM7", "COM8", "COM9",
        "LPT1", "LPT2", "LPT3", "LPT4", "LPT5", "LPT6", "LPT7", "LPT8", "LPT9",
    }
)

INVALID_CHARS = re.compile(r'[<>:"/\\|?*\x00-\x1f]')

SLUG_SEPARATOR = "-"

_WORD_RUN = re.compile(r"\w\S*")
_NON_SLUG = re.compile(r"[^a-z0-9]")
_COMBINING_MARKS = re.compile("[\u0300-\u036f]")
_NON_ASCII = re.compile(r"[^\x00-\x7f]")


def _title_case(text: str) -> str:
    return _WORD_RUN.sub(lambda m: m.group(0)[0].upper() + m.group(0)[1:].lower(), text)


def _sentence_case(text: str) -> str:
    if not text:
        return text
    return text[0].upper() + text[1:].lower()


def apply_case_style(name: str, case_style: CaseStyle | str) -> str:
    style = CaseStyle.parse(case_style)
    if style is CaseStyle.TITLE:
        return _title_case(name)
    if style is CaseStyle.SENTENCE:
        return _sentence_case(name)
    if style is CaseStyle.UPPER:
        return name.upper()
    return name.lower()


def normalize_name(name: str, case_style: CaseStyle | str) -> str:
    """Apply a case style and remove filesystem-unsafe characters.

    Args:
        name: Assembled name, without extension.
        case_style: A `CaseStyle` or any string accepted by `CaseStyle.parse`.

    Returns:
        The normalized name. This function never fails.
    """
    return INVALID_CHARS.sub("", apply_case_style(name, case_style))


def slugify(name: str) -> str:
    """Lookup key for uniqueness checks: lowercase, every non-alphanumeric becomes '-'."""
    return _NON_SLUG.sub(SLUG_SEPARATOR, name.lower())


def validate_filename(name: str, extension: str, max_length: int) -> FilenameError | None:
    """Check a candidate name before it may be returned.

    Checks run in order: reserved device name, total length (name plus
    extension), invalid characters, then an empty name or leading/trailing
    whitespace or dots.

    Returns:
        The first failing `FilenameError`, or None when the name is valid.
    """
    dot = name.rfind(".")
    base_name = name[:dot] if dot > 0 else name
    if base_name.upper() in WINDOWS_RESERVED:
        return FilenameError.RESERVED_NAME

    if len(name + extension) > max_length:
        return FilenameError.TOO_LONG

    if INVALID_CHARS.search(name):
        return FilenameError.INVALID_CHARACTERS

    if not name or name.strip() != name or name.startswith(".") or name.endswith("."):
        return FilenameError.INVALID_EDGES

    return None


def strip_diacritics(text: str) -> str:
    return _COMBINING_MARKS.sub("", unicodedata.normalize("NFD", text))


def to_ascii_only(text: str) -> str:
    return _NON_ASCII.sub("", text)


def apply_character_filters(text: str, strip_marks: bool = False, ascii_only: bool = False) -> str:
    if strip_marks:
        text = strip_diacritics(text)
    if ascii_only:
        text = to_ascii_only(text)
    return text
