"""
Formatting utilities for display.

Used by the route list, route details and chart labels.
"""
from datetime import datetime


def format_distance(meters: float) -> str:
    """
    Format distance.

    Args:
        meters: Distance in meters

    Returns:
        Formatted string (e.g., '850m' or '12.35km')
    """
    if meters < 1000:
        return f"{meters:.0f}m"
    return f"{meters / 1000:.2f}km"


def format_duration(seconds: float) -> str:
    """
    Format duration as 'Xh Ym Zs', dropping leading zero units.

    Args:
        seconds: Duration in seconds

    Returns:
        Formatted string (e.g., '1h 2m 3s', '2m 3s', '3s')
    """
    if seconds < 0:
        return "-"

    total = int(seconds)
    h = total // 3600
    m = (total % 3600) // 60
    s = total % 60

    if h > 0:
        return f"{h}h {m}m {s}s"
    if m > 0:
        return f"{m}m {s}s"
    return f"{s}s"


def format_elevation(meters: float) -> str:
    """Format elevation (e.g., '105m')."""
    return f"{meters:.0f}m"


def format_speed(meters_per_second: float) -> str:
    """
    Format speed in km/h.

    Args:
        meters_per_second: Speed in m/s

    Returns:
        Formatted string (e.g., '18.0 km/h')
    """
    kmh = meters_per_second * 3.6
    return f"{kmh:.1f} km/h"


def format_date(value: datetime) -> str:
    """Format date as 'Jan 5, 2024'."""
    return f"{value:%b} {value.day}, {value.year}"
