"""Geographic helpers"""

import math
from typing import Iterable, List

from gtfs_io.schemas import Shape


def distance_in_meter(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """
    Calculate the great-circle distance between two points on Earth using the Haversine formula.

    Args:
        lat1, lon1: Latitude and longitude of the first point (in degrees)
        lat2, lon2: Latitude and longitude of the second point (in degrees)

    Returns:
        Distance in meters
    """
    # Earth's radius in meters
    R = 6371000

    lat1_rad = math.radians(lat1)
    lat2_rad = math.radians(lat2)
    delta_lat = math.radians(lat2 - lat1)
    delta_lon = math.radians(lon2 - lon1)

    a = math.sin(delta_lat / 2) ** 2 + \
        math.cos(lat1_rad) * math.cos(lat2_rad) * math.sin(delta_lon / 2) ** 2
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return R * c


def cumulative_distances(points: Iterable[Shape]) -> List[float]:
    """Distance travelled at every point of a shape, in meters, starting at 0"""
    distances: List[float] = []
    previous = None
    total = 0.0
    for point in sorted(points, key=lambda p: p.shape_pt_sequence if p.shape_pt_sequence is not None else -1):
        if previous is not None:
            total += distance_in_meter(
                previous.shape_pt_lat, previous.shape_pt_lon,
                point.shape_pt_lat, point.shape_pt_lon,
            )
        distances.append(total)
        previous = point
    return distances
