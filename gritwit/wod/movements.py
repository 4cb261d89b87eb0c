"""Display and edit-form text for the movements of a WOD section."""

import math
import struct
from decimal import Decimal


def _to_single(number):
    """Round a float to single precision, overflowing to infinity."""
    if math.isnan(number) or math.isinf(number):
        return number
    try:
        return struct.unpack("f", struct.pack("f", number))[0]
    except OverflowError:
        return math.copysign(math.inf, number)


def format_weight(value):
    """Shortest plain decimal text that reads back as the same single-precision weight."""
    single = _to_single(float(value))
    if math.isnan(single):
        return "NaN"
    if math.isinf(single):
        return "inf" if single > 0 else "-inf"
    for digits in range(1, 10):
        text = f"{single:.{digits - 1}e}"
        if _to_single(float(text)) == single:
            break
    return format(Decimal(text), "f")


def movement_detail(rep_scheme, weight_male, weight_female):
    """Summary line such as "21-15-9 - 43/29", or None when nothing is set."""
    parts = []
    if rep_scheme is not None:
        parts.append(rep_scheme)
    if weight_male is not None and weight_female is not None:
        parts.append(f"{format_weight(weight_male)}/{format_weight(weight_female)}")
    elif weight_male is not None:
        parts.append(format_weight(weight_male))
    elif weight_female is not None:
        parts.append(format_weight(weight_female))
    return " - ".join(parts) if parts else None


def movement_edit_values(rep_scheme, weight_male, weight_female, notes):
    """Initial texts of the edit form: rep scheme, male and female weight, notes."""
    return (
        rep_scheme or "",
        "" if weight_male is None else format_weight(weight_male),
        "" if weight_female is None else format_weight(weight_female),
        notes or "",
    )