"""
GPX ingestion module.

Usage:
    from routeview.features.gpx import GPXRouteParser, parse_gpx
    from routeview.features.gpx import Route, NoTrackDataError

Components:
- GPXRouteParser: Parse GPX documents and assemble Route records
- SegmentAggregator: Per-track statistics (elevation, speed, duration)
- aggregate_route: Route totals, start/end points, bounds
- annotate_extensions: Merge waypoint extensions with comment readings
- build_chart_series: Sampled series for the metrics chart
- Route, RouteSegment, RoutePoint, ...: Pydantic schemas
"""

from .aggregator import RouteTotals, aggregate_route, calculate_bounds
from .exceptions import (
    GPXParseError,
    MalformedDocumentError,
    MissingTimestampError,
    NoTrackDataError,
)
from .metrics import ChartSeries, build_chart_series
from .normalizer import normalize_point, normalize_track
from .parser import GPXRouteParser, parse_gpx
from .schemas import (
    Bounds,
    Coordinate,
    DataQualityWarning,
    Route,
    RoutePoint,
    RouteSegment,
    Waypoint,
)
from .segmenter import SegmentAggregator
from .waypoints import annotate_extensions, build_waypoint, parse_comment

__all__ = [
    # Services
    "GPXRouteParser",
    "parse_gpx",
    "SegmentAggregator",
    "RouteTotals",
    "aggregate_route",
    "calculate_bounds",
    "normalize_point",
    "normalize_track",
    "annotate_extensions",
    "parse_comment",
    "build_waypoint",
    "ChartSeries",
    "build_chart_series",
    # Errors
    "GPXParseError",
    "MalformedDocumentError",
    "MissingTimestampError",
    "NoTrackDataError",
    # Schemas
    "Bounds",
    "Coordinate",
    "DataQualityWarning",
    "Route",
    "RoutePoint",
    "RouteSegment",
    "Waypoint",
]
