import pytest

from gtfs_io.schemas import Shape
from gtfs_io.utils.geo import cumulative_distances, distance_in_meter


def test_distance_in_meter():
    assert distance_in_meter(36.88108, -116.81797, 36.88108, -116.81797) == 0
    # one degree of longitude on the equator
    assert distance_in_meter(0, 0, 0, 1) == pytest.approx(111194.93, rel=1e-6)


def test_cumulative_distances(sample_feed):
    points = sample_feed.shapes.get("shape_1")
    distances = cumulative_distances(reversed(points))
    assert distances[0] == 0
    assert distances == sorted(distances)
    assert len(distances) == 4
    assert distances[-1] == pytest.approx(
        sum(distance_in_meter(a.shape_pt_lat, a.shape_pt_lon, b.shape_pt_lat, b.shape_pt_lon)
            for a, b in zip(points, points[1:]))
    )


def test_cumulative_distances_empty():
    assert cumulative_distances([]) == []
    assert cumulative_distances([Shape(shape_id="s", shape_pt_lat=1.0, shape_pt_lon=1.0, shape_pt_sequence=1)]) == [0]
