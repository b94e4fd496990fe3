"""Template expansion into ordered name segments."""

from __future__ import annotations

import datetime as dt
import re
from enum import Enum

from image_namer.models import Preset


class Slot(str, Enum):
    PREFIX = "prefix"
    ADJECTIVE = "adjective"
    NOUN = "noun"
    SUFFIX = "suffix"
    DATE = "date"
    COUNTER = "counter"


# Order used for slots that a template does not mention
CANONICAL_ORDER = (Slot.PREFIX, Slot.ADJECTIVE, Slot.NOUN, Slot.SUFFIX, Slot.DATE)

_TOKEN = re.compile(r"\{(\w+)\}")


def parse_template(template: str) -> list[Slot]:
    """Return slot order for a template such as ``"{date}-{adjective}-{noun}"``.

    Repeated tokens and unknown tokens are ignored. Slots missing from the
    template are inserted at their canonical position. The counter slot is
    never part of a base name.
    """
    order: list[Slot] = []
    for token in _TOKEN.findall(template or ""):
        try:
            slot = Slot(token.lower())
        except ValueError:
            continue
        if slot is not Slot.COUNTER and slot not in order:
            order.append(slot)

    for slot in CANONICAL_ORDER:
        if slot in order:
            continue
        rank = CANONICAL_ORDER.index(slot)
        position = 0
        for i, present in enumerate(order):
            if CANONICAL_ORDER.index(present) < rank:
                position = i + 1
        order.insert(position, slot)
    return order


def format_date(preset: Preset, today: dt.date | None = None) -> str:
    today = today or dt.date.today()
    return today.strftime(preset.date_format or "%Y%m%d")


def assemble_segments(
    preset: Preset,
    adjectives: list[str],
    noun: str,
    today: dt.date | None = None,
) -> list[str]:
    segments: list[str] = []
    for slot in parse_template(preset.template):
        if slot is Slot.PREFIX and preset.prefix:
            segments.append(preset.prefix)
        elif slot is Slot.ADJECTIVE:
            segments.extend(adjectives)
        elif slot is Slot.NOUN:
            segments.append(noun)
        elif slot is Slot.SUFFIX and preset.suffix:
            segments.append(preset.suffix)
        elif slot is Slot.DATE and preset.include_date_stamp:
            segments.append(format_date(preset, today))
    return segments


def assemble_name(
    preset: Preset,
    adjectives: list[str],
    noun: str,
    today: dt.date | None = None,
) -> str:
    return preset.delimiter.join(assemble_segments(preset, adjectives, noun, today))
