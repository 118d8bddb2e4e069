"""
GPX ingestion errors.

All fatal conditions abort the parse; no partial Route is returned.
"""


class GPXParseError(ValueError):
    """Base GPX ingestion error."""
    pass


class MalformedDocumentError(GPXParseError):
    """Input is not valid GPX or point coordinates are missing."""
    pass


class NoTrackDataError(GPXParseError):
    """Document is valid GPX but has no track points (e.g. waypoints only)."""
    pass


class MissingTimestampError(GPXParseError):
    """A track point has no usable <time>; duration and speed need it."""

    def __init__(self, track_index: int, point_index: int):
        self.track_index = track_index
        self.point_index = point_index
        super().__init__(
            f"Track {track_index + 1}, point {point_index + 1} "
            f"has a missing or unreadable timestamp"
        )
