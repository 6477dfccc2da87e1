import datetime as dt

import pytest

from gtfs_io.schemas import (
    Calendar,
    CalendarDate,
    FeedInfo,
    Route,
    Stop,
    StopTime,
    TimeOfDay,
    Trip,
    ENTITY_BY_FILE,
)
from gtfs_io.schemas.enums import ExceptionType, TimePointType


def test_time_of_day_parse_and_format():
    """Test that times parse from H:MM:SS and format as HH:MM:SS."""
    time = TimeOfDay.parse("6:05:09")
    assert time == TimeOfDay(hours=6, minutes=5, seconds=9)
    assert str(time) == "06:05:09"
    assert time.total_seconds == 6 * 3600 + 5 * 60 + 9
    assert TimeOfDay.from_total_seconds(time.total_seconds) == time


def test_time_of_day_rejects_malformed():
    for value in ("6:5:09", "6:05", "123:00:00", "ab:cd:ef", ""):
        assert TimeOfDay.parse(value) is None


def test_time_of_day_ordering():
    early = TimeOfDay(hours=8)
    late = TimeOfDay(hours=25, minutes=10)
    assert early < late
    assert late > early
    assert sorted([late, early]) == [early, late]
    assert hash(TimeOfDay(minutes=60)) == hash(TimeOfDay(hours=1))


def test_empty_string_equals_missing():
    """Test that empty strings and missing values compare equal."""
    with_empty = Stop(stop_id="S1", stop_desc="")
    without = Stop(stop_id="S1")
    assert with_empty == without
    assert hash(with_empty) == hash(without)


def test_equality_covers_every_field():
    assert Stop(stop_id="S1", stop_name="A") != Stop(stop_id="S1", stop_name="B")
    assert Route(route_id="X") != Trip(trip_id="X")


def test_from_entity_is_independent():
    original = Stop(stop_id="S1", stop_name="Main")
    copy = Stop.from_entity(original)
    assert copy == original
    copy.stop_name = "Other"
    assert original.stop_name == "Main"


def test_keys():
    assert Stop(stop_id="S1").key == "S1"
    assert StopTime(trip_id="T1").key == "T1"
    assert FeedInfo(feed_lang="en").key is None


def test_natural_ordering():
    """Test that only naturally ordered types provide a sort key."""
    first = StopTime(trip_id="A", stop_sequence=2)
    second = StopTime(trip_id="A", stop_sequence=10)
    assert first.sort_key() < second.sort_key()
    assert StopTime().timepoint == TimePointType.NONE

    dates = [
        CalendarDate(service_id="WE", date=dt.date(2007, 1, 1), exception_type=ExceptionType.ADDED),
        CalendarDate(service_id="FULLW", date=dt.date(2007, 6, 4), exception_type=ExceptionType.REMOVED),
    ]
    assert sorted(dates, key=lambda d: d.sort_key())[0].service_id == "FULLW"

    with pytest.raises(TypeError):
        Stop(stop_id="S1").sort_key()


def test_calendar_mask():
    """Test the weekday bitmask, Monday is bit 0."""
    calendar = Calendar(service_id="WE", saturday=True, sunday=True)
    assert calendar.mask == 0b1100000
    assert calendar.runs_on(5)
    assert not calendar.runs_on(0)

    calendar.mask = 0b0000001
    assert calendar.monday
    assert not calendar.sunday

    other = Calendar()
    other.copy_week_pattern_from(calendar)
    assert other.service_id == "WE"
    assert other.mask == calendar.mask


def test_entity_registry():
    assert ENTITY_BY_FILE["stops"] is Stop
    assert ENTITY_BY_FILE["feed_info"] is FeedInfo
    assert len(ENTITY_BY_FILE) == 16
