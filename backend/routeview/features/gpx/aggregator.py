"""
Route Aggregator

Rolls segment statistics up to route totals, start/end points and bounds.
"""

import logging
import math
from dataclasses import dataclass
from typing import List, Sequence

from .exceptions import NoTrackDataError
from .schemas import Bounds, Coordinate, DataQualityWarning, RouteSegment

logger = logging.getLogger(__name__)


@dataclass
class RouteTotals:
    """Route-level figures derived from its segments."""
    total_distance: float
    total_duration: float
    total_elevation_gain: float
    total_elevation_loss: float
    start_point: Coordinate
    end_point: Coordinate
    bounds: Bounds


def calculate_bounds(segments: Sequence[RouteSegment]) -> Bounds:
    """
    Minimal lat/lon rectangle containing every point.

    A single-point route gives a zero-area box at that point.
    """
    min_lat = math.inf
    max_lat = -math.inf
    min_lon = math.inf
    max_lon = -math.inf

    for segment in segments:
        for point in segment.points:
            lat = point.position.lat
            lon = point.position.lon
            min_lat = min(min_lat, lat)
            max_lat = max(max_lat, lat)
            min_lon = min(min_lon, lon)
            max_lon = max(max_lon, lon)

    return Bounds(min_lat=min_lat, max_lat=max_lat, min_lon=min_lon, max_lon=max_lon)


def aggregate_route(segments: Sequence[RouteSegment]) -> RouteTotals:
    """
    Aggregate an ordered, non-empty list of segments.

    Raises:
        NoTrackDataError: If there are no segments
    """
    if not segments:
        raise NoTrackDataError("Route has no track segments")

    first = segments[0]
    last = segments[-1]

    return RouteTotals(
        total_distance=sum(s.distance for s in segments),
        total_duration=sum(s.duration for s in segments),
        total_elevation_gain=sum(s.elevation_gain for s in segments),
        total_elevation_loss=sum(s.elevation_loss for s in segments),
        start_point=first.points[0].position,
        end_point=last.points[-1].position,
        bounds=calculate_bounds(segments),
    )


def check_segment_order(segments: Sequence[RouteSegment]) -> List[DataQualityWarning]:
    """Warn when a segment starts before the previous one ends."""
    warnings = []
    for i in range(1, len(segments)):
        prev_end = segments[i - 1].points[-1].position.time
        curr_start = segments[i].points[0].position.time
        if curr_start < prev_end:
            warnings.append(DataQualityWarning(
                code="segment_overlap",
                message=(
                    f"Segment {i + 1} starts "
                    f"{(prev_end - curr_start).total_seconds():g}s before "
                    f"segment {i} ends"
                ),
                segment_index=i,
                point_index=0,
            ))
    for warning in warnings:
        logger.warning(warning.message)
    return warnings
