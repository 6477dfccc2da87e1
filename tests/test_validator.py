from gtfs_io.feed import GTFSFeed
from gtfs_io.schemas import Calendar, Route, Stop, StopTime, Trip
from gtfs_io.services.gtfs_validator import GTFSFeedValidator, validate_feed


def _small_feed():
    feed = GTFSFeed()
    feed.add(Stop(stop_id="S1"))
    feed.add(Stop(stop_id="S2"))
    feed.add(Route(route_id="R1"))
    feed.add(Trip(trip_id="T1", route_id="R1", service_id="WK"))
    feed.add(StopTime(trip_id="T1", stop_id="S1", stop_sequence=1))
    feed.add(StopTime(trip_id="T1", stop_id="S2", stop_sequence=2))
    return feed


def test_sample_feed_is_valid(sample_feed):
    valid, message = validate_feed(sample_feed)
    assert valid
    assert message == ""


def test_duplicate_stop():
    feed = _small_feed()
    feed.add(Stop(stop_id="S1"))
    valid, message = validate_feed(feed)
    assert not valid
    assert message == "Duplicate stop id found: S1"


def test_unknown_agency_and_route():
    feed = _small_feed()
    feed.add(Route(route_id="R2", agency_id="NOPE"))
    feed.add(Trip(trip_id="T2", route_id="R3"))
    result = GTFSFeedValidator().validate(feed)
    assert not result.is_valid()
    messages = [issue.message for issue in result.issues]
    assert "Unknown agency found in route R2: NOPE" in messages
    assert "Unknown route found in trip T2: R3" in messages


def test_stop_time_references():
    """Test stop times pointing at unknown stops and trips."""
    feed = _small_feed()
    feed.add(StopTime(trip_id="T9", stop_id="S9", stop_sequence=1))
    result = GTFSFeedValidator().validate(feed)
    fields = {issue.field for issue in result.errors}
    assert fields == {"stop_id", "trip_id"}


def test_stop_sequence_order():
    feed = _small_feed()
    feed.add(StopTime(trip_id="T1", stop_id="S1", stop_sequence=2))
    result = GTFSFeedValidator().validate(feed)
    assert result.error_count == 2
    assert result.errors[0].message == "Duplicate stop_time entry found: T1 2"
    assert result.errors[1].entity_id == "T1"
    assert result.errors[1].details == {"previous": 2, "current": 2}


def test_result_to_dict():
    feed = _small_feed()
    feed.add(Trip(trip_id="T1", route_id="R1"))
    data = GTFSFeedValidator().validate(feed).to_dict()
    assert data["valid"] is False
    assert data["error_count"] == 1
    assert data["issues"][0]["category"] == "trips"
    assert data["warning_count"] == 2
    assert data["summary"] == "Validation failed with 1 error(s) and 2 warning(s)"


def test_sample_feed_has_no_warnings(sample_feed):
    result = GTFSFeedValidator().validate(sample_feed)
    assert (result.error_count, result.warning_count, result.info_count) == (0, 0, 0)
    assert result.to_dict()["summary"] == "Validation passed with no issues"


def test_warnings_and_info_keep_feed_valid(sample_feed):
    """Test missing feed info, undefined and unused services."""
    sample_feed.set_feed_info(None)
    sample_feed.add(Calendar(service_id="UNUSED"))
    sample_feed.add(Trip(trip_id="EXTRA", route_id="AB", service_id="HOLIDAY"))

    result = GTFSFeedValidator().validate(sample_feed)
    assert result.is_valid()
    assert result.warning_count == 2
    assert result.info_count == 1
    warnings = [issue.message for issue in result.issues if issue.severity == "warning"]
    infos = [issue.message for issue in result.issues if issue.severity == "info"]
    assert warnings == [
        "Unknown service found in trip EXTRA: HOLIDAY",
        "No feed_info record found",
    ]
    assert infos == ["Service UNUSED is not used by any trip"]
    assert result.to_dict()["summary"] == "Validation passed with 2 warning(s)"
    assert validate_feed(sample_feed) == (True, "")
