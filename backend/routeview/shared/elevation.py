"""
Elevation processing utilities.

This is the SINGLE SOURCE OF TRUTH for elevation calculations.
"""
from typing import List, Tuple


def calculate_elevation_changes(
    elevations: List[float]
) -> Tuple[float, float]:
    """
    Calculate total elevation gain and loss.

    Only consecutive deltas are used; a zero delta counts towards neither.

    Args:
        elevations: List of elevation values

    Returns:
        Tuple of (gain_m, loss_m)
    """
    gain = 0.0
    loss = 0.0

    for i in range(1, len(elevations)):
        diff = elevations[i] - elevations[i - 1]
        if diff > 0:
            gain += diff
        elif diff < 0:
            loss += abs(diff)

    return gain, loss
