import pytest

from gritwit.wod.inputs import optional_float
from gritwit.wod.movements import format_weight, movement_detail, movement_edit_values


def test_whole_weight_has_no_fraction():
    assert format_weight(60.0) == "60"


def test_fractional_weight():
    assert format_weight(42.5) == "42.5"


def test_single_precision_shortest_text():
    assert format_weight(0.1) == "0.1"


@pytest.mark.parametrize("text", ["60", "42.5", "0.1", "102.5", "1.25", "33.3", "0.5"])
def test_format_round_trips_through_form_parser(text):
    value = optional_float(text)
    formatted = format_weight(value)
    assert optional_float(formatted) == value
    assert "e" not in formatted.lower()


def test_large_and_small_weights_are_plain_decimals():
    big = format_weight(1e8)
    small = format_weight(1e-7)
    assert "e" not in big and "e" not in small
    assert optional_float(big) == optional_float("1e8")
    assert optional_float(small) == optional_float("1e-7")


def test_detail_with_everything():
    detail = movement_detail("21-15-9", 43.0, 29.0)
    assert detail == "21-15-9 - " + format_weight(43.0) + "/" + format_weight(29.0)


def test_detail_only_one_weight():
    assert movement_detail(None, 43.0, None) == format_weight(43.0)
    assert movement_detail(None, None, 29.0) == format_weight(29.0)


def test_detail_rep_scheme_only():
    assert movement_detail("5x5", None, None) == "5x5"


def test_detail_empty_is_none():
    assert movement_detail(None, None, None) is None


def test_detail_keeps_empty_rep_scheme():
    assert movement_detail("", 20.0, None) == " - " + format_weight(20.0)


def test_edit_values_blank_when_unset():
    assert movement_edit_values(None, None, None, None) == ("", "", "", "")


def test_edit_values_filled():
    values = movement_edit_values("21-15-9", 42.5, 30.0, "scale as needed")
    assert values == ("21-15-9", format_weight(42.5), format_weight(30.0), "scale as needed")
    assert optional_float(values[1]) == 42.5
    assert optional_float(values[2]) == 30.0