"""
Shared utilities (NOT business logic).

Usage:
    from routeview.shared import haversine, calculate_elevation_changes
    from routeview.shared.formatters import format_distance
"""
from .geo import (
    haversine,
    cumulative_distances,
    calculate_total_distance,
    EARTH_RADIUS_M,
)
from .elevation import (
    calculate_elevation_changes,
)
from .formatters import (
    format_distance,
    format_duration,
    format_elevation,
    format_speed,
    format_date,
)

__all__ = [
    # geo
    "haversine",
    "cumulative_distances",
    "calculate_total_distance",
    "EARTH_RADIUS_M",
    # elevation
    "calculate_elevation_changes",
    # formatters
    "format_distance",
    "format_duration",
    "format_elevation",
    "format_speed",
    "format_date",
]
