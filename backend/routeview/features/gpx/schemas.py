"""
Route schemas.

Pydantic models for the parsed route record. All models are frozen:
a Route is built once per parse and updated downstream only through
copies (``route.model_copy(update=...)``).
"""

from datetime import datetime
from typing import Dict, Iterator, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


ExtensionValue = Union[float, str]

TEMPORAL_WARNING_CODES = frozenset({
    "temporal_inversion",
    "negative_duration",
    "segment_overlap",
})


class FrozenModel(BaseModel):
    model_config = ConfigDict(frozen=True)


class Coordinate(FrozenModel):
    """A single geodetic sample."""

    lat: float
    lon: float
    ele: float = 0.0  # meters
    time: datetime


class RoutePoint(FrozenModel):
    """
    Track sample with optional sensor readings.

    None means "not recorded", which is different from a reading of 0.
    """

    position: Coordinate
    speed: Optional[float] = None  # m/s
    heart_rate: Optional[float] = None  # bpm
    cadence: Optional[float] = None  # rpm


class RouteSegment(FrozenModel):
    """One GPX track reduced to its statistics."""

    points: List[RoutePoint] = Field(min_length=1)

    # Metrics
    distance: float  # meters
    duration: float  # seconds, negative when timestamps run backward
    elevation_gain: float
    elevation_loss: float
    max_speed: float
    avg_speed: float


class Bounds(FrozenModel):
    """Axis-aligned lat/lon rectangle."""

    min_lat: float
    max_lat: float
    min_lon: float
    max_lon: float

    def contains(self, lat: float, lon: float) -> bool:
        return (
            self.min_lat <= lat <= self.max_lat
            and self.min_lon <= lon <= self.max_lon
        )


class Waypoint(FrozenModel):
    """Annotated waypoint."""

    lat: float
    lon: float
    ele: Optional[float] = None
    time: Optional[datetime] = None
    name: Optional[str] = None
    description: Optional[str] = None
    comment: Optional[str] = None

    # label -> value, plus "<label>_unit" -> unit
    extensions: Dict[str, ExtensionValue] = Field(default_factory=dict)


class DataQualityWarning(FrozenModel):
    """Non-fatal data problem found while deriving metrics."""

    code: str
    message: str
    segment_index: int
    point_index: Optional[int] = None


class Route(FrozenModel):
    """Fully derived route record."""

    id: str
    name: str
    description: str = ""
    date: datetime

    segments: List[RouteSegment] = Field(min_length=1)

    # Totals (exact sums over segments)
    total_distance: float
    total_duration: float
    total_elevation_gain: float
    total_elevation_loss: float

    # Geometry
    start_point: Coordinate
    end_point: Coordinate
    bounds: Bounds

    waypoints: List[Waypoint] = Field(default_factory=list)
    warnings: List[DataQualityWarning] = Field(default_factory=list)

    @property
    def points(self) -> Iterator[RoutePoint]:
        """Every point of every segment, in order."""
        for segment in self.segments:
            yield from segment.points

    @property
    def has_temporal_inversion(self) -> bool:
        return any(w.code in TEMPORAL_WARNING_CODES for w in self.warnings)
