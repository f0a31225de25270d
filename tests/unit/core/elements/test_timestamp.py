"""Unit tests for core/elements/timestamp.py"""

from orgscan.core.elements.timestamp import (
    Datetime, parse_active, parse_diary, parse_inactive, parse_timestamp,
)


def test_active_date_only():
    """A bare active date has no time."""
    rest, ts = parse_active("<2003-09-16 Tue> tail")
    assert rest == " tail"
    assert ts.kind == "active"
    assert ts.start == Datetime(year=2003, month=9, day=16, dayname="Tue")
    assert ts.end is None
    assert ts.is_active()


def test_active_with_time_repeater_and_delay():
    """Time, repeater and delay are all recognised."""
    _, ts = parse_active("<2003-09-16 Tue 09:39 +1w -2d>")
    assert ts.start.hour == 9 and ts.start.minute == 39
    assert ts.repeater == "+1w"
    assert ts.delay == "-2d"


def test_inactive_without_dayname():
    """The day name is optional."""
    rest, ts = parse_inactive("[2024-02-28 17:30]")
    assert rest == ""
    assert ts.kind == "inactive"
    assert ts.start.dayname is None
    assert ts.start.hour == 17
    assert not ts.is_active()


def test_same_day_time_range():
    """A '09:00-10:30' time span becomes a range on the same day."""
    _, ts = parse_active("<2024-03-01 Fri 09:00-10:30>")
    assert ts.kind == "active_range"
    assert ts.end == Datetime(year=2024, month=3, day=1, dayname="Fri", hour=10, minute=30)


def test_date_range():
    """Two timestamps joined by '--' form a range."""
    rest, ts = parse_inactive("[2024-03-01 Fri]--[2024-03-03 Sun]!")
    assert rest == "!"
    assert ts.kind == "inactive_range"
    assert ts.start.day == 1
    assert ts.end.day == 3
    assert ts.is_range()


def test_diary():
    """Diary sexps keep their expression as value."""
    rest, ts = parse_diary("<%%(diary-float t 4 2)>")
    assert rest == ""
    assert ts.kind == "diary"
    assert ts.value == "(diary-float t 4 2)"


def test_parse_timestamp_rejects_garbage():
    """Anything that is not a timestamp is no match."""
    assert parse_timestamp("<not a date>") is None
    assert parse_timestamp("2024-03-01") is None
    assert parse_timestamp("<2024-03-01 Fri") is None
