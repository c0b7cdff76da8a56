"""
Form input parsing tests.

Tests:
1-3. 'XhYm' print time text
4-5. HH / MM structured entry
6-8. Numeric field parsing and defaults
9-10. Oversized durations
"""

import pytest

from costslicer.parsing import (
    InputError,
    TIME_FORMAT_MESSAGE,
    minutes_from_entry,
    parse_number,
    parse_number_or_default,
    parse_print_time,
)


# ============================================================
# 1-3. Print time text
# ============================================================

@pytest.mark.parametrize("text,expected", [
    ("4h30m", 270),
    ("45m", 45),
    ("2h", 120),
    ("0h0m", 0),
    (" 1h 5m ", 65),
    ("3H15M", 195),
    ("90m", 90),
])
def test_parse_print_time(text, expected):
    assert parse_print_time(text) == expected


@pytest.mark.parametrize("text", ["", "   ", None, "abc", "4.5h", "30m4h", "4h30", "h", "-2h"])
def test_parse_print_time_rejects_malformed(text):
    with pytest.raises(InputError) as exc:
        parse_print_time(text)
    assert str(exc.value) == TIME_FORMAT_MESSAGE


def test_input_error_is_a_value_error():
    """Non-HTTP callers can catch plain ValueError."""
    with pytest.raises(ValueError):
        parse_print_time("soon")


# ============================================================
# 4-5. Structured entry
# ============================================================

@pytest.mark.parametrize("hours,minutes,expected", [
    (4, 30, 270),
    ("4", "30", 270),
    ("", "", 0),
    (None, 45, 45),
    (2, None, 120),
    (-3, 15, 15),          # negatives clamp to zero
    ("1.9", "0.5", 60),    # truncated to whole units
])
def test_minutes_from_entry(hours, minutes, expected):
    assert minutes_from_entry(hours, minutes) == expected


def test_minutes_from_entry_rejects_text():
    with pytest.raises(InputError, match="Invalid hours"):
        minutes_from_entry("four", 0)


# ============================================================
# 6-8. Numbers
# ============================================================

@pytest.mark.parametrize("value,expected", [
    ("50", 50.0),
    (" 1.36 ", 1.36),
    (0.2, 0.2),
    (100, 100.0),
    ("-5", -5.0),
])
def test_parse_number(value, expected):
    assert parse_number(value, "filament weight") == expected


@pytest.mark.parametrize("value", ["", None, "fifty", "12g", "nan", "inf"])
def test_parse_number_rejects_non_numeric(value):
    with pytest.raises(InputError) as exc:
        parse_number(value, "filament weight")
    assert str(exc.value) == "Invalid filament weight. Please enter a number."


def test_parse_number_or_default():
    assert parse_number_or_default("", "electricity cost", 1.36) == 1.36
    assert parse_number_or_default(None, "electricity cost", 1.36) == 1.36
    assert parse_number_or_default("0.9", "electricity cost", 1.36) == 0.9
    with pytest.raises(InputError, match="Invalid electricity cost"):
        parse_number_or_default("cheap", "electricity cost", 1.36)


# ============================================================
# 9-10. Durations too large to compute with
# ============================================================

@pytest.mark.parametrize("text", [
    "9" * 400 + "h",          # fits an int, overflows a float
    "9" * 5000 + "h",         # past the int string conversion limit
    "1h" + "9" * 400 + "m",
])
def test_parse_print_time_rejects_huge_durations(text):
    with pytest.raises(InputError) as exc:
        parse_print_time(text)
    assert str(exc.value) == TIME_FORMAT_MESSAGE


@pytest.mark.parametrize("hours,minutes", [("1e308", 0), ("1e307", "1e307"), (1e308, 1e308)])
def test_minutes_from_entry_rejects_huge_durations(hours, minutes):
    with pytest.raises(InputError) as exc:
        minutes_from_entry(hours, minutes)
    assert str(exc.value) == TIME_FORMAT_MESSAGE
