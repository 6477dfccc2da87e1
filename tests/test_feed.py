import pytest

from gtfs_io.feed import GTFSFeed
from gtfs_io.schemas import Agency, FeedInfo, Route, Stop, StopTime


def test_add_dispatches_by_type():
    """Test that entities land in the collection of their file."""
    feed = GTFSFeed()
    assert feed.is_empty
    feed.add(Stop(stop_id="S1"))
    feed.add(StopTime(trip_id="T1", stop_id="S1", stop_sequence=1))
    feed.add(FeedInfo(feed_publisher_name="Demo", feed_lang="en"))

    assert len(feed.stops) == 1
    assert len(feed.stop_times) == 1
    assert feed.get_feed_info().feed_publisher_name == "Demo"
    assert not feed.is_empty
    assert feed.collection_for("feed_info") is None
    assert feed.collection_for("unknown") is None


def test_summary(sample_feed):
    summary = sample_feed.summary()
    assert summary["stops"] == 9
    assert summary["stop_times"] == 28
    assert summary["feed_info"] == 1
    assert summary["levels"] == 0


def test_copy_to(sample_feed):
    """Test that copying appends every entity, duplicates included."""
    target = GTFSFeed()
    sample_feed.copy_to(target)
    assert target.summary() == sample_feed.summary()

    sample_feed.copy_to(target)
    assert len(target.stops) == 18
    assert target.feed_info == sample_feed.feed_info


def test_merge_with_itself_changes_nothing(sample_feed):
    """Test that merging a feed into a copy of itself keeps the counts."""
    merged = GTFSFeed()
    sample_feed.copy_to(merged)
    merged.merge(sample_feed)
    assert merged.summary() == sample_feed.summary()


def test_merge_replaces_by_key(sample_feed):
    other = GTFSFeed()
    other.add(Agency(agency_id="DTA", agency_name="Renamed", agency_url="http://example.com",
                     agency_timezone="America/Los_Angeles"))
    other.add(Route(route_id="NEW", agency_id="DTA", route_short_name="60", route_long_name="New"))
    other.set_feed_info(FeedInfo(feed_publisher_name="Other", feed_lang="fr"))

    sample_feed.merge(other)
    assert len(sample_feed.agencies) == 1
    assert sample_feed.agencies.get("DTA").agency_name == "Renamed"
    assert len(sample_feed.routes) == 6
    assert sample_feed.feed_info.feed_lang == "fr"


def test_merge_replaces_duplicated_keys():
    """Test that merging drops every existing entity sharing the incoming key."""
    feed = GTFSFeed()
    feed.add(Agency(agency_id="DTA", agency_name="a"))
    feed.add(Agency(agency_id="DTA", agency_name="b"))
    other = GTFSFeed()
    other.add(Agency(agency_id="DTA", agency_name="new"))

    feed.merge(other)
    assert [agency.agency_name for agency in feed.agencies] == ["new"]


def test_add_unknown_entity_type():
    class Unknown(Stop):
        file_name = "unknown"

    with pytest.raises(ValueError):
        GTFSFeed().add(Unknown(stop_id="x"))
