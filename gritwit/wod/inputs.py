"""Parsing of the free-text form values sent by the WOD editing forms.

Blank fields mean "not set". Numbers that do not parse are dropped
rather than rejected, while identifiers must be valid UUIDs.
"""

import math
import re
import struct
import uuid

_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1

_INT_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(
    r"[+-]?(?:inf|infinity|nan|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)",
    re.IGNORECASE,
)
_HEX = "[0-9a-fA-F]"
_HYPHENATED = f"{_HEX}{{8}}-{_HEX}{{4}}-{_HEX}{{4}}-{_HEX}{{4}}-{_HEX}{{12}}"
_UUID_RE = re.compile(
    rf"{_HEX}{{32}}|{_HYPHENATED}|\{{{_HYPHENATED}\}}|urn:uuid:{_HYPHENATED}"
)


class InputError(ValueError):
    """Raised when a required form value cannot be parsed."""


def optional_text(value):
    """Return ``value``, or None when it is empty."""
    return value if value else None


def optional_int(value):
    """Parse a 32-bit signed integer; None when empty or not a valid number."""
    if not value or not _INT_RE.fullmatch(value):
        return None
    number = int(value)
    if not _I32_MIN <= number <= _I32_MAX:
        return None
    return number


def _to_single(number):
    """Round a float to single precision, overflowing to infinity."""
    if math.isnan(number) or math.isinf(number):
        return number
    try:
        return struct.unpack("f", struct.pack("f", number))[0]
    except OverflowError:
        return math.copysign(math.inf, number)


def optional_float(value):
    """Parse a single-precision float; None when empty or not a valid number."""
    if not value or not _FLOAT_RE.fullmatch(value):
        return None
    return _to_single(float(value))


def parse_uuid(value):
    """Parse a UUID in simple, hyphenated, braced or URN form."""
    if value is None or not _UUID_RE.fullmatch(value):
        raise InputError(f"invalid UUID: {value!r}")
    try:
        return uuid.UUID(value)
    except ValueError as exc:
        raise InputError(f"invalid UUID: {value!r}") from exc