"""
Tests for display formatters.
"""

from datetime import datetime

from routeview.shared.formatters import (
    format_distance,
    format_duration,
    format_elevation,
    format_speed,
    format_date,
)


class TestFormatDistance:
    """Tests for format_distance function."""

    def test_meters(self):
        assert format_distance(850) == "850m"

    def test_kilometers(self):
        assert format_distance(12346) == "12.35km"

    def test_boundary(self):
        """1000m switches to kilometers."""
        assert format_distance(1000) == "1.00km"


class TestFormatDuration:
    """Tests for format_duration function."""

    def test_hours(self):
        assert format_duration(3723) == "1h 2m 3s"

    def test_minutes(self):
        assert format_duration(123) == "2m 3s"

    def test_seconds(self):
        assert format_duration(3) == "3s"

    def test_fraction_dropped(self):
        assert format_duration(59.9) == "59s"

    def test_negative(self):
        """Negative durations come from bad timestamps; show a dash."""
        assert format_duration(-20) == "-"


class TestOtherFormatters:
    """Tests for elevation, speed and date formatting."""

    def test_elevation(self):
        assert format_elevation(104.6) == "105m"

    def test_speed(self):
        """5 m/s = 18 km/h."""
        assert format_speed(5) == "18.0 km/h"

    def test_date(self):
        assert format_date(datetime(2024, 1, 5, 8, 30)) == "Jan 5, 2024"
