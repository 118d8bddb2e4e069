"""
Segment Aggregator

Reduces the ordered points of one GPX track into a RouteSegment with
elevation gain/loss, speed statistics, duration and distance.
"""

import logging
from typing import List, Optional, Sequence

from routeview.shared.elevation import calculate_elevation_changes
from routeview.shared.geo import calculate_total_distance

from .schemas import DataQualityWarning, RoutePoint, RouteSegment

logger = logging.getLogger(__name__)


class SegmentAggregator:
    """
    Builds RouteSegment statistics from normalized points.

    Speed statistics follow the historical arithmetic of the route viewer
    so stored routes keep their numbers:

    - max_speed and the speed sum only look at points 1..N-1; point 0 is
      never inspected.
    - avg_speed divides that sum by N (all points), not N-1.

    The divisor looks like an off-by-one. It is kept until the intended
    semantics are confirmed.
    """

    @classmethod
    def aggregate(
        cls,
        points: Sequence[RoutePoint],
        distance: Optional[float] = None
    ) -> RouteSegment:
        """
        Aggregate a non-empty point sequence.

        Args:
            points: Normalized points in travel order
            distance: Track length in meters from an external source.
                When None, cumulative haversine distance is used.

        Returns:
            RouteSegment

        Raises:
            ValueError: If points is empty
        """
        if not points:
            raise ValueError("Segment needs at least one point")

        elevation_gain, elevation_loss = calculate_elevation_changes(
            [p.position.ele for p in points]
        )

        max_speed = 0.0
        total_speed = 0.0
        for curr in points[1:]:
            if curr.speed:
                total_speed += curr.speed
                max_speed = max(max_speed, curr.speed)

        avg_speed = total_speed / len(points)

        duration = (
            points[-1].position.time - points[0].position.time
        ).total_seconds()

        if distance is None:
            distance = calculate_total_distance(
                (p.position.lat, p.position.lon) for p in points
            )

        return RouteSegment(
            points=list(points),
            distance=distance,
            duration=duration,
            elevation_gain=elevation_gain,
            elevation_loss=elevation_loss,
            max_speed=max_speed,
            avg_speed=avg_speed,
        )

    @classmethod
    def check_timestamps(
        cls,
        segment: RouteSegment,
        segment_index: int = 0
    ) -> List[DataQualityWarning]:
        """
        Report timestamps that run backward inside a segment.

        Durations are never clamped; callers attach these warnings to the
        route instead.
        """
        warnings: List[DataQualityWarning] = []
        points = segment.points

        for i in range(1, len(points)):
            prev_time = points[i - 1].position.time
            curr_time = points[i].position.time
            if curr_time < prev_time:
                warnings.append(DataQualityWarning(
                    code="temporal_inversion",
                    message=(
                        f"Point {i + 1} is {(prev_time - curr_time).total_seconds():g}s "
                        f"earlier than point {i}"
                    ),
                    segment_index=segment_index,
                    point_index=i,
                ))

        if segment.duration < 0:
            warnings.append(DataQualityWarning(
                code="negative_duration",
                message=f"Segment duration is negative ({segment.duration:g}s)",
                segment_index=segment_index,
            ))

        for warning in warnings:
            logger.warning(f"Segment {segment_index + 1}: {warning.message}")

        return warnings
