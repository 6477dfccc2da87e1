import pytest

from gtfs_io.db.feed_db import GTFSFeedDB, SQLFeedDB
from gtfs_io.feed import GTFSFeed


def test_memory_db_ids():
    """Test that ids are handed out in order and never reused."""
    db = GTFSFeedDB()
    assert db.add_feed() == 0
    assert db.add_feed() == 1
    assert db.get_feeds() == [0, 1]

    assert db.remove_feed(0)
    assert not db.remove_feed(0)
    assert not db.remove_feed(5)
    assert db.get_feeds() == [1]
    assert db.get_feed(0) is None
    assert db.add_feed() == 2


def test_memory_db_stores_a_copy(sample_feed):
    db = GTFSFeedDB()
    feed_id = db.add_feed(sample_feed)
    stored = db.get_feed(feed_id)
    assert stored is not sample_feed
    assert stored.summary() == sample_feed.summary()

    stored.stops.remove_all()
    assert len(sample_feed.stops) == 9
    assert len(db.get_feed(feed_id).stops) == 0


@pytest.fixture
def sql_db():
    db = SQLFeedDB("sqlite://")
    yield db
    db.engine.dispose()


def test_sql_db_round_trip(sql_db, sample_feed):
    """Test that a stored feed comes back with equal entities in the same order."""
    feed_id = sql_db.add_feed(sample_feed)
    assert sql_db.get_feeds() == [feed_id]

    loaded = sql_db.get_feed(feed_id)
    assert loaded.summary() == sample_feed.summary()
    for file_name, collection in sample_feed.collections():
        assert list(loaded.collection_for(file_name)) == list(collection), file_name
    assert loaded.feed_info == sample_feed.feed_info

    route = loaded.routes.get("AB")
    assert route.route_color == -3932017
    assert loaded.stop_times.get()[0].arrival_time == sample_feed.stop_times.get()[0].arrival_time


def test_sql_db_multiple_feeds(sql_db, sample_feed):
    first = sql_db.add_feed(sample_feed)
    second = sql_db.add_feed(GTFSFeed())
    assert sql_db.get_feeds() == [first, second]

    empty = sql_db.get_feed(second)
    assert empty.is_empty

    assert sql_db.remove_feed(first)
    assert not sql_db.remove_feed(first)
    assert sql_db.get_feed(first) is None
    assert sql_db.get_feeds() == [second]


def test_sql_db_tables(sql_db):
    assert sql_db.table_exists("gtfs_stops")
    assert sql_db.column_exists("gtfs_stops", "stop_lat")
    assert not sql_db.column_exists("gtfs_stops", "elevation")
    assert not sql_db.table_exists("stops")


def test_sql_db_file_persists(tmp_path, sample_feed):
    """Test that feeds survive reopening a file database."""
    url = f"sqlite:///{tmp_path / 'feeds.db'}"
    db = SQLFeedDB(url)
    feed_id = db.add_feed(sample_feed)
    db.engine.dispose()

    reopened = SQLFeedDB(url)
    assert reopened.get_feed(feed_id).summary() == sample_feed.summary()
    reopened.engine.dispose()
