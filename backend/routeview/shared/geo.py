"""
Geographic utility functions.

This is the SINGLE SOURCE OF TRUTH for geographic calculations.
All distances are in meters.
"""
import math
from typing import Iterable, List, Tuple

# Mean Earth radius in meters (WGS84 sphere)
EARTH_RADIUS_M = 6_371_000.0


def haversine(
    lat1: float, lon1: float,
    lat2: float, lon2: float
) -> float:
    """
    Calculate great-circle distance between two points.

    Args:
        lat1, lon1: First point coordinates (degrees)
        lat2, lon2: Second point coordinates (degrees)

    Returns:
        Distance in meters
    """
    lat1_rad = math.radians(lat1)
    lat2_rad = math.radians(lat2)
    delta_lat = math.radians(lat2 - lat1)
    delta_lon = math.radians(lon2 - lon1)

    a = (
        math.sin(delta_lat / 2) ** 2 +
        math.cos(lat1_rad) * math.cos(lat2_rad) *
        math.sin(delta_lon / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return EARTH_RADIUS_M * c


def cumulative_distances(points: Iterable[Tuple[float, float]]) -> List[float]:
    """
    Running distance along a polyline.

    Args:
        points: (lat, lon) pairs in travel order

    Returns:
        One entry per point; the first is always 0.0
    """
    result: List[float] = []
    total = 0.0
    prev = None

    for lat, lon in points:
        if prev is not None:
            total += haversine(prev[0], prev[1], lat, lon)
        result.append(total)
        prev = (lat, lon)

    return result


def calculate_total_distance(points: Iterable[Tuple[float, float]]) -> float:
    """
    Calculate total distance for a route.

    Args:
        points: (lat, lon) pairs in travel order

    Returns:
        Total distance in meters
    """
    distances = cumulative_distances(points)
    return distances[-1] if distances else 0.0
