"""
GPX Route Parser

Parses GPX documents and assembles the Route record: one segment per
track, route totals, bounds and annotated waypoints.
"""

import logging
import re
import time
import uuid
from datetime import datetime, timezone
from pathlib import PurePath
from typing import List, Optional, Union

import gpxpy
import gpxpy.gpx

from routeview.config import Settings, settings as default_settings

from .aggregator import aggregate_route, check_segment_order
from .exceptions import GPXParseError, MalformedDocumentError, NoTrackDataError
from .normalizer import normalize_track
from .schemas import DataQualityWarning, Route, RouteSegment
from .segmenter import SegmentAggregator
from .waypoints import build_waypoint

logger = logging.getLogger(__name__)

_EXTENSION = re.compile(r"\.[^.]*$")


class GPXRouteParser:
    """
    Assembles Route records from GPX documents.

    Holds no per-parse state, so one instance can serve concurrent
    uploads.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or default_settings

    def parse(self, content: Union[str, bytes], filename: str = "") -> Route:
        """
        Parse GPX content into a Route.

        Args:
            content: GPX document as text or UTF-8 bytes
            filename: Original file name, used for the route name

        Returns:
            Route with segments, totals, bounds, waypoints and warnings

        Raises:
            MalformedDocumentError: If the document is not valid GPX
            NoTrackDataError: If the document has no track points
            MissingTimestampError: If a track point has no time
        """
        gpx = self.load_document(content)

        segments: List[RouteSegment] = []
        warnings: List[DataQualityWarning] = []

        for track_index, track in enumerate(gpx.tracks):
            try:
                points = normalize_track(track, track_index)
            except GPXParseError as e:
                logger.error(f"Rejecting GPX {filename!r}: {e}")
                raise

            if not points:
                logger.warning(f"Skipping track {track_index + 1}: no points")
                continue

            segment = SegmentAggregator.aggregate(points)
            warnings.extend(
                SegmentAggregator.check_timestamps(segment, len(segments))
            )
            segments.append(segment)

        if not segments:
            logger.error(
                f"GPX has no track data ({len(gpx.waypoints)} waypoints): {filename!r}"
            )
            raise NoTrackDataError("No tracks found in GPX file")

        warnings.extend(check_segment_order(segments))

        totals = aggregate_route(segments)

        route = Route(
            id=self.generate_id(),
            name=self.route_name(filename),
            description=gpx.description or "",
            date=gpx.time or datetime.now(timezone.utc),
            segments=segments,
            total_distance=totals.total_distance,
            total_duration=totals.total_duration,
            total_elevation_gain=totals.total_elevation_gain,
            total_elevation_loss=totals.total_elevation_loss,
            start_point=totals.start_point,
            end_point=totals.end_point,
            bounds=totals.bounds,
            waypoints=[build_waypoint(w) for w in gpx.waypoints],
            warnings=warnings,
        )

        logger.info(
            f"Parsed route {route.id} ({route.name!r}): "
            f"{len(segments)} segments, {route.total_distance:.0f}m, "
            f"{len(route.waypoints)} waypoints, {len(warnings)} warnings"
        )
        return route

    @staticmethod
    def load_document(content: Union[str, bytes]) -> gpxpy.gpx.GPX:
        """
        Parse raw GPX text with gpxpy.

        Raises:
            MalformedDocumentError: If the text is not valid GPX
        """
        if isinstance(content, bytes):
            try:
                content = content.decode("utf-8-sig")
            except UnicodeDecodeError as e:
                logger.error(f"Failed to decode GPX: {e}")
                raise MalformedDocumentError(f"GPX file is not UTF-8: {e}") from e

        content = content.lstrip("\ufeff")
        if not content.strip():
            raise MalformedDocumentError("GPX file is empty")

        try:
            return gpxpy.parse(content)
        except Exception as e:
            logger.error(f"Failed to parse GPX: {e}")
            raise MalformedDocumentError(f"Invalid GPX file: {e}") from e

    def route_name(self, filename: Optional[str]) -> str:
        """'tracks/Morning Ride.gpx' -> 'Morning Ride'."""
        base = PurePath(filename or "").name
        name = _EXTENSION.sub("", base).strip()
        return name or self.settings.default_route_name

    def generate_id(self) -> str:
        """Millisecond timestamp plus a random suffix, unique per call."""
        return (
            f"{self.settings.route_id_prefix}_"
            f"{int(time.time() * 1000)}_{uuid.uuid4().hex[:8]}"
        )


def parse_gpx(content: Union[str, bytes], filename: str = "") -> Route:
    """Parse with default settings."""
    return GPXRouteParser().parse(content, filename)
