import pytest

from gritwit.wod.options import (
    SelectOption,
    find_log_id,
    phase_options,
    section_type_options,
)


def test_phase_options_values_in_order():
    assert [o.value for o in phase_options()] == [
        "warmup",
        "strength",
        "conditioning",
        "cooldown",
        "optional",
        "personal",
    ]


def test_phase_options_labels():
    assert [o.label for o in phase_options()] == [
        "Warm-Up",
        "Strength",
        "Conditioning",
        "Cool Down",
        "Optional",
        "Personal",
    ]


def test_section_type_options():
    assert section_type_options() == [
        SelectOption("fortime", "For Time"),
        SelectOption("amrap", "AMRAP"),
        SelectOption("emom", "EMOM"),
        SelectOption("strength", "Strength"),
        SelectOption("static", "Static"),
    ]


def test_options_are_fresh_lists():
    first = phase_options()
    first.clear()
    assert len(phase_options()) == 6


def test_select_option_is_immutable():
    option = section_type_options()[0]
    with pytest.raises(AttributeError):
        option.value = "other"
    assert option.value == "fortime"


def test_find_log_id_match():
    logged = [("s1", "log1"), ("s2", "log2")]
    assert find_log_id(logged, "s2") == "log2"


def test_find_log_id_first_match_wins():
    logged = [("s1", "log1"), ("s1", "log9")]
    assert find_log_id(logged, "s1") == "log1"


def test_find_log_id_missing():
    assert find_log_id([("s1", "log1")], "s3") is None
    assert find_log_id([], "s1") is None


def test_find_log_id_accepts_iterator():
    logged = iter([("a", "x"), ("b", "y")])
    assert find_log_id(logged, "b") == "y"