import datetime as dt
import os

from gtfs_io.feed import GTFSFeed
from gtfs_io.files import GTFSMemoryTarget, GTFSStreamSource, GTFSStreamTarget
from gtfs_io.schemas import CalendarDate, Stop, Trip
from gtfs_io.schemas.enums import ExceptionType
from gtfs_io.services.gtfs_reader import GTFSReader, read_feed
from gtfs_io.services.gtfs_writer import FILE_HEADERS, GTFSWriter, write_feed


def _written(feed, **kwargs):
    target = GTFSMemoryTarget()
    GTFSWriter(**kwargs).write(feed, target)
    return {name: content.splitlines() for name, content in target.files().items()}


def test_write_routes(sample_feed):
    """Test header, ordering and value encoding of routes.txt."""
    lines = _written(sample_feed)["routes"]
    assert lines[0] == ",".join(FILE_HEADERS["routes"])
    assert len(lines) == 6
    assert lines[1] == 'AAMV,DTA,"50","Airport - Amargosa Valley",,3' + "," * 5
    assert lines[2] == 'AB,DTA,"10","Airport - Bullfrog",,3,,C4008F' + "," * 3
    assert [line.split(",")[0] for line in lines[1:]] == ["AAMV", "AB", "BFC", "CITY", "STBA"]


def test_write_stops_and_stop_times(sample_feed):
    files = _written(sample_feed)
    stops = files["stops"]
    assert stops[1].startswith('AMV,,"Amargosa Valley (Demo)",,36.641496,-116.40094,')

    stop_times = files["stop_times"]
    assert len(stop_times) == 29
    assert stop_times[1].startswith("AAMV1,08:00:00,08:00:00,BEATTY_AIRPORT,1,")
    assert stop_times[-1].startswith("STBA,06:20:00,06:20:00,BEATTY_AIRPORT,2,")


def test_only_non_empty_files_are_written(sample_feed):
    files = _written(sample_feed)
    assert "levels" not in files
    assert "pathways" not in files
    assert files["feed_info"][1] == '"Demo Transit Authority","http://google.com",en,20070101,20101231,1.0'
    assert files["calendar"][1] == "FULLW,1,1,1,1,1,1,1,20070101,20101231"


def test_calendar_dates_order():
    """Test that calendar dates are ordered by date, then exception type, then service."""
    feed = GTFSFeed()
    feed.add(CalendarDate(service_id="B", date=dt.date(2007, 6, 5), exception_type=ExceptionType.ADDED))
    feed.add(CalendarDate(service_id="B", date=dt.date(2007, 6, 4), exception_type=ExceptionType.REMOVED))
    feed.add(CalendarDate(service_id="A", date=dt.date(2007, 6, 4), exception_type=ExceptionType.REMOVED))
    feed.add(CalendarDate(service_id="C", date=dt.date(2007, 6, 4), exception_type=ExceptionType.ADDED))
    assert _written(feed)["calendar_dates"][1:] == [
        "C,20070604,1",
        "A,20070604,2",
        "B,20070604,2",
        "B,20070605,1",
    ]


def test_custom_date_formatter(sample_feed):
    files = _written(sample_feed, date_formatter=lambda d: d.isoformat())
    assert files["calendar_dates"][1] == "FULLW,2007-06-04,2"


def test_values_with_commas_and_quotes_are_quoted():
    feed = GTFSFeed()
    feed.add(Stop(stop_id="S,1", stop_name='The "Hub"', stop_lat=1.0, stop_lon=2.0))
    line = _written(feed)["stops"][1]
    assert line.startswith('"S,1",,"The ""Hub""",,1.0,2.0,')


def test_quoted_values_read_back_unchanged():
    """Test that values holding quotes or line breaks survive a write and read."""
    feed = GTFSFeed()
    feed.add(Trip(trip_id="T1", route_id="R1", service_id="S", trip_headsign='"Express" to Town'))
    feed.add(Trip(trip_id="T2", route_id="R1", service_id="S", trip_headsign="Night\nService"))
    target = GTFSMemoryTarget()
    GTFSWriter().write(feed, target)
    assert target.files()["trips"].splitlines()[1] == 'T1,R1,S,"""Express"" to Town",,,,,'

    for strict in (False, True):
        read_back = GTFSFeed()
        GTFSReader(strict=strict).read_source_file(GTFSStreamSource("trips", target.files()["trips"]), read_back)
        assert read_back.trips.get("T1").trip_headsign == '"Express" to Town'
        assert read_back.trips.get("T2").trip_headsign == "Night\nService"


def test_write_file_returns_count():
    target = GTFSStreamTarget("stops")
    writer = GTFSWriter()
    assert writer.write_file(target, "stops", []) == 0
    assert not target.exists
    assert writer.write_file(target, "stops", [Stop(stop_id="S1", stop_lat=1.0, stop_lon=2.0)]) == 1
    assert len(target.lines()) == 2


def test_round_trip_directory(sample_feed, tmp_path):
    """Test that a written feed reads back to equal entities."""
    path = str(tmp_path / "out")
    write_feed(sample_feed, path)
    feed = read_feed(path, strict=True)

    for file_name, collection in sample_feed.collections():
        assert set(feed.collection_for(file_name)) == set(collection), file_name
        assert len(feed.collection_for(file_name)) == len(collection), file_name
    assert feed.feed_info == sample_feed.feed_info


def test_round_trip_zip(sample_feed, tmp_path):
    path = str(tmp_path / "out.zip")
    write_feed(sample_feed, path)
    feed = read_feed(path)
    assert feed.summary() == sample_feed.summary()
    assert list(feed.stop_times) == list(sample_feed.stop_times)


def test_overwrite_existing_files(sample_feed, tmp_path):
    """Test that writing twice to the same directory replaces the files."""
    path = str(tmp_path / "out")
    write_feed(sample_feed, path)
    write_feed(sample_feed, path)
    with open(os.path.join(path, "stops.txt")) as f:
        assert len(f.read().splitlines()) == 10
    assert read_feed(path).summary() == sample_feed.summary()
