from gtfs_io.db.collections import (
    EntityListCollection,
    StopTimeListCollection,
    TransferListCollection,
    UniqueEntityListCollection,
)
from gtfs_io.schemas import Shape, Stop, StopTime, Transfer


def test_entity_list_groups_by_key():
    """Test that many entities can share a key and are returned together."""
    shapes = EntityListCollection()
    shapes.add_range([
        Shape(shape_id="s1", shape_pt_sequence=1),
        Shape(shape_id="s2", shape_pt_sequence=1),
        Shape(shape_id="s1", shape_pt_sequence=2),
    ])
    assert len(shapes) == 3
    assert shapes.count == 3
    assert [s.shape_pt_sequence for s in shapes.get("s1")] == [1, 2]
    assert shapes.get("missing") == []

    shapes.add(Shape(shape_id="s1", shape_pt_sequence=3))
    assert len(shapes.get("s1")) == 3

    assert shapes.remove("s1")
    assert not shapes.remove("s1")
    assert [s.shape_id for s in shapes] == ["s2"]

    shapes.remove_all()
    assert len(shapes) == 0


def test_iteration_is_safe_while_removing():
    shapes = EntityListCollection([Shape(shape_id="a"), Shape(shape_id="b")])
    for shape in shapes:
        shapes.remove(shape.shape_id)
    assert len(shapes) == 0


def test_unique_list_lookup():
    """Test single-entity lookups, updates and removals by key."""
    stops = UniqueEntityListCollection()
    stops.add(Stop(stop_id="A", stop_name="First"))
    stops.add(Stop(stop_id="B", stop_name="Second"))
    stops.add(Stop(stop_id="A", stop_name="Duplicate"))

    assert stops.get("A").stop_name == "First"
    assert stops.get("C") is None
    assert len(stops.get()) == 3
    assert stops.get_at(1).stop_id == "B"
    assert Stop(stop_id="B", stop_name="Second") in stops

    assert stops.update("B", Stop(stop_id="B", stop_name="Updated"))
    assert stops.get("B").stop_name == "Updated"
    assert not stops.update("C", Stop(stop_id="C"))

    assert stops.remove("A")
    assert stops.get("A").stop_name == "Duplicate"
    assert len(stops) == 2

    assert stops.remove_all_with_key("A")
    assert stops.get("A") is None
    assert not stops.remove_all_with_key("A")


def test_stop_times_by_trip_and_stop():
    stop_times = StopTimeListCollection()
    stop_times.add_range([
        StopTime(trip_id="T1", stop_id="S1", stop_sequence=1),
        StopTime(trip_id="T1", stop_id="S2", stop_sequence=2),
        StopTime(trip_id="T2", stop_id="S2", stop_sequence=1),
    ])
    assert len(stop_times.get_for_trip("T1")) == 2
    assert [st.trip_id for st in stop_times.get_for_stop("S2")] == ["T1", "T2"]

    assert stop_times.remove_for_stop("S2")
    assert len(stop_times) == 1
    assert stop_times.remove_for_trip("T1")
    assert len(stop_times) == 0


def test_transfers_by_stop():
    transfers = TransferListCollection()
    transfers.add(Transfer(from_stop_id="A", to_stop_id="B"))
    transfers.add(Transfer(from_stop_id="B", to_stop_id="C"))
    assert len(transfers.get_for_from_stop("A")) == 1
    assert transfers.get_for_to_stop("C")[0].from_stop_id == "B"
    assert transfers.remove_for_to_stop("B")
    assert transfers.remove_for_from_stop("B")
    assert len(transfers) == 0
