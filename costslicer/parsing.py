"""
Form input parsing — raw field text to the numbers the estimator takes.

Everything here is caller-side sanitization. The estimator itself never
validates; these helpers turn bad text into a single descriptive message.
"""

import math
import re

TIME_FORMAT_MESSAGE = (
    "Invalid time format. Please use the format 'XhYm', e.g., '4h30m' or '45m'."
)

# "4h30m", "4h", "45m", "4h 30m", case-insensitive
_PRINT_TIME_RE = re.compile(r"(?:(\d+)\s*h)?\s*(?:(\d+)\s*m)?", re.IGNORECASE)


class InputError(ValueError):
    """Raw form value could not be turned into a usable number."""


def _is_blank(value) -> bool:
    return value is None or str(value).strip() == ""


def parse_number(value, label: str) -> float:
    """
    Parse a numeric form value. Handles numbers and strings like '50', ' 1.36 '.
    Raises InputError naming the field for blanks or non-numeric text.
    """
    if _is_blank(value):
        raise InputError(f"Invalid {label}. Please enter a number.")
    try:
        number = float(str(value).strip())
    except (ValueError, TypeError):
        raise InputError(f"Invalid {label}. Please enter a number.")
    if not math.isfinite(number):
        raise InputError(f"Invalid {label}. Please enter a number.")
    return number


def parse_number_or_default(value, label: str, default: float) -> float:
    """Same as parse_number, but a blank field falls back to default."""
    if _is_blank(value):
        return default
    return parse_number(value, label)


def _checked_minutes(total: int) -> int:
    """Total minutes, provided it still fits in a float."""
    try:
        float(total)
    except OverflowError:
        raise InputError(TIME_FORMAT_MESSAGE)
    return total


def parse_print_time(text) -> int:
    """
    Parse 'XhYm' print time text into minutes.

    '4h30m' -> 270, '45m' -> 45, '2h' -> 120.
    Blank text, anything that is not hours and/or minutes, or a duration too
    large to compute with raises InputError.
    """
    if _is_blank(text):
        raise InputError(TIME_FORMAT_MESSAGE)
    match = _PRINT_TIME_RE.fullmatch(str(text).strip())
    if not match or (match.group(1) is None and match.group(2) is None):
        raise InputError(TIME_FORMAT_MESSAGE)
    try:
        hours = int(match.group(1) or 0)
        minutes = int(match.group(2) or 0)
    except ValueError:
        # digit strings past the int conversion limit
        raise InputError(TIME_FORMAT_MESSAGE)
    return _checked_minutes(hours * 60 + minutes)


def _entry_part(value, label: str) -> int:
    """One box of the HH / MM entry: blank is 0, truncated to int, never negative."""
    if _is_blank(value):
        return 0
    return max(0, int(parse_number(value, label)))


def minutes_from_entry(hours, minutes) -> int:
    """Structured hours + minutes entry to total minutes."""
    total = _entry_part(hours, "hours") * 60 + _entry_part(minutes, "minutes")
    return _checked_minutes(total)
