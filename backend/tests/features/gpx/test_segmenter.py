"""
Tests for SegmentAggregator.

Covers elevation gain/loss, the speed statistics (including the
point-0 / divisor asymmetry), duration and distance.
"""

from datetime import datetime, timedelta, timezone

import pytest

from routeview.features.gpx import Coordinate, RoutePoint, SegmentAggregator
from routeview.shared.geo import haversine

START = datetime(2024, 5, 1, 8, 0, tzinfo=timezone.utc)


def make_point(lat=43.0, lon=76.0, ele=0.0, seconds=0, speed=None, heart_rate=None):
    return RoutePoint(
        position=Coordinate(
            lat=lat, lon=lon, ele=ele, time=START + timedelta(seconds=seconds)
        ),
        speed=speed,
        heart_rate=heart_rate,
    )


# =============================================================================
# Elevation
# =============================================================================

class TestElevation:
    """Tests for elevation gain/loss."""

    def test_descent(self):
        """Elevations [100, 95] -> gain 0, loss 5."""
        segment = SegmentAggregator.aggregate([
            make_point(ele=100, seconds=0),
            make_point(ele=95, seconds=10),
        ])
        assert segment.elevation_gain == 0
        assert segment.elevation_loss == 5

    def test_flat(self):
        """Flat segment has neither gain nor loss."""
        segment = SegmentAggregator.aggregate([
            make_point(ele=50, seconds=i) for i in range(4)
        ])
        assert segment.elevation_gain == 0
        assert segment.elevation_loss == 0

    def test_mixed(self):
        """Up 10, down 5, up 20."""
        segment = SegmentAggregator.aggregate([
            make_point(ele=e, seconds=i) for i, e in enumerate([100, 110, 105, 125])
        ])
        assert segment.elevation_gain == 30
        assert segment.elevation_loss == 5


# =============================================================================
# Single point
# =============================================================================

class TestSinglePoint:
    """A one-point segment is valid and degenerate."""

    def test_all_zero(self):
        segment = SegmentAggregator.aggregate([make_point(ele=1000, speed=3.0)])
        assert segment.duration == 0
        assert segment.elevation_gain == 0
        assert segment.elevation_loss == 0
        assert segment.distance == 0
        # Point 0 is never inspected
        assert segment.max_speed == 0
        assert segment.avg_speed == 0

    def test_empty_rejected(self):
        with pytest.raises(ValueError):
            SegmentAggregator.aggregate([])


# =============================================================================
# Speed
# =============================================================================

class TestSpeed:
    """Tests for max/avg speed arithmetic."""

    def test_no_speed_data(self):
        """No readings -> zeros."""
        segment = SegmentAggregator.aggregate([
            make_point(seconds=i) for i in range(3)
        ])
        assert segment.max_speed == 0
        assert segment.avg_speed == 0

    def test_point_zero_excluded_from_sum_and_max(self):
        """Speeds [10, 2, 4]: max 4, avg (2 + 4) / 3."""
        segment = SegmentAggregator.aggregate([
            make_point(seconds=0, speed=10.0),
            make_point(seconds=1, speed=2.0),
            make_point(seconds=2, speed=4.0),
        ])
        assert segment.max_speed == 4.0
        assert segment.avg_speed == pytest.approx(2.0)

    def test_divisor_is_full_point_count(self):
        """Missing readings count as 0 but still count in the divisor."""
        segment = SegmentAggregator.aggregate([
            make_point(seconds=0),
            make_point(seconds=1, speed=3.0),
            make_point(seconds=2),
            make_point(seconds=3, speed=5.0),
        ])
        assert segment.avg_speed == pytest.approx(8.0 / 4)
        assert segment.max_speed == 5.0


# =============================================================================
# Duration & distance
# =============================================================================

class TestDurationDistance:
    """Tests for duration and distance."""

    def test_duration_first_to_last(self):
        segment = SegmentAggregator.aggregate([
            make_point(seconds=0), make_point(seconds=7), make_point(seconds=20),
        ])
        assert segment.duration == 20

    def test_same_timestamp(self):
        """All points at one instant -> zero duration."""
        segment = SegmentAggregator.aggregate([
            make_point(lat=43.0, seconds=5), make_point(lat=43.001, seconds=5),
        ])
        assert segment.duration == 0

    def test_backward_time_not_clamped(self):
        """Out-of-order times give a negative duration."""
        segment = SegmentAggregator.aggregate([
            make_point(seconds=30), make_point(seconds=10),
        ])
        assert segment.duration == -20

    def test_haversine_distance(self):
        """Without an external figure, distance is haversine over pairs."""
        segment = SegmentAggregator.aggregate([
            make_point(lat=43.0, seconds=0),
            make_point(lat=43.001, seconds=10),
            make_point(lat=43.002, seconds=20),
        ])
        expected = (
            haversine(43.0, 76.0, 43.001, 76.0)
            + haversine(43.001, 76.0, 43.002, 76.0)
        )
        assert segment.distance == pytest.approx(expected)

    def test_external_distance_wins(self):
        """A supplied track length is used as-is."""
        segment = SegmentAggregator.aggregate(
            [make_point(lat=43.0), make_point(lat=43.1, seconds=60)],
            distance=1234.5,
        )
        assert segment.distance == 1234.5


# =============================================================================
# Timestamp checks
# =============================================================================

class TestCheckTimestamps:
    """Tests for SegmentAggregator.check_timestamps."""

    def test_ordered_times_clean(self):
        segment = SegmentAggregator.aggregate([
            make_point(seconds=0), make_point(seconds=10),
        ])
        assert SegmentAggregator.check_timestamps(segment) == []

    def test_inversion_flagged(self):
        """Backward step and negative duration are both reported."""
        segment = SegmentAggregator.aggregate([
            make_point(seconds=30), make_point(seconds=10),
        ])
        warnings = SegmentAggregator.check_timestamps(segment, segment_index=2)

        codes = [w.code for w in warnings]
        assert codes == ["temporal_inversion", "negative_duration"]
        assert warnings[0].point_index == 1
        assert all(w.segment_index == 2 for w in warnings)

    def test_inner_inversion_with_positive_duration(self):
        """A backward jump inside an otherwise forward segment."""
        segment = SegmentAggregator.aggregate([
            make_point(seconds=0), make_point(seconds=20),
            make_point(seconds=15), make_point(seconds=30),
        ])
        warnings = SegmentAggregator.check_timestamps(segment)
        assert [w.code for w in warnings] == ["temporal_inversion"]
        assert warnings[0].point_index == 2
        assert segment.duration == 30
