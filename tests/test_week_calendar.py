import datetime

import pytest

from gritwit.wod.week_calendar import (
    DAY_LABELS,
    compute_week_dates,
    date_day_num,
    jdn_to_ymd,
    parse_year_month,
    parse_ymd,
    shift_date,
    today_iso,
    week_month_label,
    ymd_to_jdn,
)

SAMPLE_DATES = [
    datetime.date(1970, 1, 1),
    datetime.date(2000, 2, 29),
    datetime.date(2024, 12, 31),
    datetime.date(2026, 3, 1),
    datetime.date(1899, 7, 14),
    datetime.date(2100, 3, 1),
]


def test_today_iso_matches_local_date():
    assert today_iso() == datetime.date.today().isoformat()


def test_jdn_offset_from_ordinal_is_constant():
    offsets = {ymd_to_jdn(d.year, d.month, d.day) - d.toordinal() for d in SAMPLE_DATES}
    assert len(offsets) == 1


@pytest.mark.parametrize("day", SAMPLE_DATES)
def test_jdn_round_trip(day):
    jdn = ymd_to_jdn(day.year, day.month, day.day)
    assert jdn_to_ymd(jdn) == (day.year, day.month, day.day)


def test_consecutive_days_have_consecutive_jdn():
    assert ymd_to_jdn(2024, 3, 1) - ymd_to_jdn(2024, 2, 28) == 2
    assert ymd_to_jdn(2023, 3, 1) - ymd_to_jdn(2023, 2, 28) == 1


def test_parse_ymd_reads_parts():
    assert parse_ymd("2025-11-07") == (2025, 11, 7)


def test_parse_ymd_defaults():
    assert parse_ymd("") == (2026, 1, 1)
    assert parse_ymd("2030") == (2030, 1, 1)
    assert parse_ymd("x-y-z") == (2026, 1, 1)


def test_parse_ymd_rejects_spaces():
    assert parse_ymd(" 2025-04- 9") == (2026, 4, 1)


def test_parse_year_month_defaults():
    assert parse_year_month("") == (0, 1)
    assert parse_year_month("2024-09-15") == (2024, 9)


@pytest.mark.parametrize(
    "date, days",
    [("2026-03-01", -7), ("2024-02-28", 1), ("2024-12-31", 1), ("2025-01-05", -10), ("2023-06-15", 400)],
)
def test_shift_date_agrees_with_datetime(date, days):
    expected = (datetime.date.fromisoformat(date) + datetime.timedelta(days=days)).isoformat()
    assert shift_date(date, days) == expected


def test_shift_date_zero_is_identity():
    assert shift_date("2025-07-04", 0) == "2025-07-04"


@pytest.mark.parametrize("anchor", ["2026-03-11", "2024-02-29", "2025-12-31", "2026-01-04"])
def test_week_starts_sunday_and_contains_anchor(anchor):
    today, week = compute_week_dates(anchor, "2020-01-01")
    assert today == "2020-01-01"
    assert len(week) == len(DAY_LABELS)
    days = [datetime.date.fromisoformat(d) for d in week]
    assert days[0].isoweekday() == 7
    assert all(b - a == datetime.timedelta(days=1) for a, b in zip(days, days[1:]))
    assert anchor in week


def test_empty_anchor_uses_today():
    today, week = compute_week_dates("", "2025-05-21")
    assert today == "2025-05-21"
    assert "2025-05-21" in week


def test_empty_anchor_defaults_to_current_day():
    today, week = compute_week_dates("")
    assert today == datetime.date.today().isoformat()
    assert today in week


def test_date_day_num_strips_zeros():
    assert date_day_num("2026-03-05") == "5"
    assert date_day_num("2026-03-25") == "25"
    assert date_day_num("2026-03") == "?"


def test_week_month_label_single_month():
    assert week_month_label("2026-03-01", "2026-03-07") == "March 2026"


def test_week_month_label_two_months():
    assert week_month_label("2026-03-29", "2026-04-04") == "Mar / Apr 2026"


def test_week_month_label_two_years():
    assert week_month_label("2025-12-28", "2026-01-03") == "Dec 2025 / Jan 2026"


def test_week_month_label_bad_month():
    with pytest.raises(ValueError):
        week_month_label("2026-13-01", "2026-13-07")