"""Date arithmetic behind the weekly WOD calendar strip."""

import datetime
import re

DAY_LABELS = ("S", "M", "T", "W", "T", "F", "S")

MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

_INT_RE = re.compile(r"[+-]?[0-9]+")
_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1


def _parse_int(text):
    """Parse a signed decimal integer strictly; None if it is not one."""
    if text is None or not _INT_RE.fullmatch(text):
        return None
    value = int(text)
    if not _I64_MIN <= value <= _I64_MAX:
        return None
    return value


def _tdiv(a, b):
    """Integer division truncating toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


def _trem(a, b):
    return a - b * _tdiv(a, b)


def _format_ymd(y, m, d):
    return f"{y:04d}-{m:02d}-{d:02d}"


def _part(parts, index):
    return parts[index] if index < len(parts) else None


def _parse_or(text, default):
    value = _parse_int(text)
    return default if value is None else value


def today_iso():
    """Today's local date as YYYY-MM-DD."""
    return datetime.date.today().isoformat()


def parse_ymd(date):
    """Split a YYYY-MM-DD string, defaulting missing parts to 2026-01-01."""
    parts = date.split("-")
    return (
        _parse_or(_part(parts, 0), 2026),
        _parse_or(_part(parts, 1), 1),
        _parse_or(_part(parts, 2), 1),
    )


def parse_year_month(date):
    """Year and month of a date string, defaulting to year 0, month 1."""
    parts = date.split("-")
    return _parse_or(_part(parts, 0), 0), _parse_or(_part(parts, 1), 1)


def ymd_to_jdn(y, m, d):
    """Julian day number of a proleptic Gregorian date."""
    a = _tdiv(m - 14, 12)
    return (
        _tdiv(1461 * (y + 4800 + a), 4)
        + _tdiv(367 * (m - 2 - 12 * a), 12)
        - _tdiv(3 * _tdiv(y + 4900 + a, 100), 4)
        + d
        - 32075
    )


def jdn_to_ymd(jdn):
    """Proleptic Gregorian (year, month, day) of a Julian day number."""
    l = jdn + 68569
    n = _tdiv(4 * l, 146097)
    l = l - _tdiv(146097 * n + 3, 4)
    i = _tdiv(4000 * (l + 1), 1461001)
    l = l - _tdiv(1461 * i, 4) + 31
    j = _tdiv(80 * l, 2447)
    d = l - _tdiv(2447 * j, 80)
    l = _tdiv(j, 11)
    m = j + 2 - 12 * l
    y = 100 * (n - 49) + i + l
    return y, m, d


def compute_week_dates(anchor, today=None):
    """Return (today, [Sunday..Saturday]) for the week containing ``anchor``.

    An empty anchor means the current week.
    """
    if today is None:
        today = today_iso()
    y, m, d = parse_ymd(anchor if anchor else today)
    jdn = ymd_to_jdn(y, m, d)
    sunday = jdn - _trem(jdn + 1, 7)
    week = [_format_ymd(*jdn_to_ymd(sunday + offset)) for offset in range(7)]
    return today, week


def date_day_num(date):
    """Day-of-month part of a date string without leading zeros."""
    parts = date.split("-", 2)
    day = parts[2] if len(parts) == 3 else "?"
    return day.lstrip("0")


def _month_name(month):
    if not 1 <= month <= len(MONTH_NAMES):
        raise ValueError(f"month out of range: {month}")
    return MONTH_NAMES[month - 1]


def week_month_label(first, last):
    """Heading for a week spanning the dates ``first`` to ``last``."""
    fy, fm = parse_year_month(first)
    ly, lm = parse_year_month(last)
    first_name = _month_name(fm)
    last_name = _month_name(lm)
    if fy == ly and fm == lm:
        return f"{first_name} {fy}"
    if fy == ly:
        return f"{first_name[:3]} / {last_name[:3]} {fy}"
    return f"{first_name[:3]} {fy} / {last_name[:3]} {ly}"


def shift_date(date, days):
    """Move a YYYY-MM-DD date by a number of days."""
    y, m, d = parse_ymd(date)
    return _format_ymd(*jdn_to_ymd(ymd_to_jdn(y, m, d) + days))