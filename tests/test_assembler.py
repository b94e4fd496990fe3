"""Tests for template expansion."""

import datetime as dt

from image_namer.generation.assembler import Slot, assemble_name, parse_template
from tests.conftest import make_preset

TODAY = dt.date(2024, 3, 9)


def test_default_template_order():
    assert parse_template("{adjective}-{noun}") == [
        Slot.PREFIX,
        Slot.ADJECTIVE,
        Slot.NOUN,
        Slot.SUFFIX,
        Slot.DATE,
    ]


def test_template_order_is_respected():
    assert parse_template("{date}-{adjective}-{noun}") == [
        Slot.PREFIX,
        Slot.DATE,
        Slot.ADJECTIVE,
        Slot.NOUN,
        Slot.SUFFIX,
    ]
    assert parse_template("{noun}-{adjective}")[1:3] == [Slot.NOUN, Slot.ADJECTIVE]


def test_counter_and_unknown_tokens_ignored():
    order = parse_template("{adjective}-{noun}-{mood}-{counter}")
    assert Slot.COUNTER not in order
    assert len(order) == 5


def test_empty_template_uses_canonical_order():
    assert parse_template("") == [Slot.PREFIX, Slot.ADJECTIVE, Slot.NOUN, Slot.SUFFIX, Slot.DATE]


def test_simple_name():
    preset = make_preset()
    assert assemble_name(preset, ["bright"], "sky", TODAY) == "bright-sky"


def test_prefix_suffix_and_date():
    preset = make_preset(prefix="photo", suffix="img", include_date_stamp=True)
    assert assemble_name(preset, ["bright"], "sky", TODAY) == "photo-bright-sky-img-20240309"


def test_date_first():
    preset = make_preset(template="{date}-{adjective}-{noun}", include_date_stamp=True)
    assert assemble_name(preset, ["bright"], "sky", TODAY) == "20240309-bright-sky"


def test_date_slot_without_flag_is_skipped():
    preset = make_preset(template="{date}-{adjective}-{noun}")
    assert assemble_name(preset, ["bright"], "sky", TODAY) == "bright-sky"


def test_custom_date_format():
    preset = make_preset(include_date_stamp=True, date_format="%Y-%m")
    assert assemble_name(preset, ["bright"], "sky", TODAY) == "bright-sky-2024-03"


def test_multiple_adjectives_and_delimiter():
    preset = make_preset(delimiter="_", num_adjectives=2)
    assert assemble_name(preset, ["bright", "calm"], "sky", TODAY) == "bright_calm_sky"


def test_reverse_order():
    preset = make_preset(template="{noun}-{adjective}")
    assert assemble_name(preset, ["bright"], "sky", TODAY) == "sky-bright"
