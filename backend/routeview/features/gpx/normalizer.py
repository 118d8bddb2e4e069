"""
Point normalization.

Maps gpxpy track points onto RoutePoint. Sensor readings are passed
through unchanged: speed in m/s, heart rate in bpm, cadence in rpm.
"""

from datetime import timezone
from typing import List, Optional

import gpxpy.gpx

from .exceptions import MalformedDocumentError, MissingTimestampError
from .extensions import find_number
from .schemas import Coordinate, RoutePoint

SPEED_TAGS = ("speed",)
HEART_RATE_TAGS = ("hr", "heartrate")
CADENCE_TAGS = ("cad", "cadence")


def normalize_point(
    point: gpxpy.gpx.GPXTrackPoint,
    track_index: int = 0,
    point_index: int = 0,
) -> RoutePoint:
    """
    Convert one raw track point.

    Args:
        point: gpxpy track point
        track_index: Position of the owning track (for error messages)
        point_index: Position of the point inside the track

    Returns:
        RoutePoint with elevation defaulted to 0

    Raises:
        MalformedDocumentError: If latitude or longitude is missing
        MissingTimestampError: If the point has no readable time
    """
    if point.latitude is None or point.longitude is None:
        raise MalformedDocumentError(
            f"Track {track_index + 1}, point {point_index + 1} has no coordinates"
        )
    if point.time is None:
        raise MissingTimestampError(track_index, point_index)

    # Offset-less times are read as UTC so one document never mixes naive
    # and aware datetimes.
    time = point.time
    if time.tzinfo is None:
        time = time.replace(tzinfo=timezone.utc)

    extensions = point.extensions

    speed: Optional[float] = point.speed
    if speed is None:
        speed = find_number(extensions, *SPEED_TAGS)

    return RoutePoint(
        position=Coordinate(
            lat=point.latitude,
            lon=point.longitude,
            ele=point.elevation if point.elevation is not None else 0.0,
            time=time,
        ),
        speed=speed,
        heart_rate=find_number(extensions, *HEART_RATE_TAGS),
        cadence=find_number(extensions, *CADENCE_TAGS),
    )


def normalize_track(track: gpxpy.gpx.GPXTrack, track_index: int = 0) -> List[RoutePoint]:
    """All points of a track, its <trkseg> elements concatenated in order."""
    points = []
    for segment in track.segments:
        for point in segment.points:
            points.append(normalize_point(point, track_index, len(points)))
    return points
