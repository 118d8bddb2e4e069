"""
Waypoint Annotator

Turns waypoint extensions and free-text comments into one flat mapping
of sensor readings, e.g. the comment "Temp(C): 21.5, Humidity: 60" gives
{"temp": 21.5, "temp_unit": "C", "humidity": 60.0}.

Comment parsing is best effort: fragments that don't look like
"label: number" are dropped.
"""

import logging
import re
from typing import Dict, Iterable, Mapping, Optional

import gpxpy.gpx

from .extensions import iter_leaf_values, to_float
from .schemas import ExtensionValue, Waypoint

logger = logging.getLogger(__name__)

_NUMBER = r"(?P<value>[-+]?(?:\d+\.?\d*|\.\d+))"

# "Temp(C): 21.5"
LABEL_UNIT_VALUE = re.compile(
    r"^\s*(?P<label>[^():]+?)\s*\(\s*(?P<unit>[^()]+?)\s*\)\s*:\s*" + _NUMBER + r"\s*$"
)
# "Humidity: 60"
LABEL_VALUE = re.compile(
    r"^\s*(?P<label>[^():]+?)\s*:\s*" + _NUMBER + r"\s*$"
)

FRAGMENT_SEPARATORS = re.compile(r"[\n,]")


def label_key(label: str) -> str:
    """'Wind  Speed' -> 'wind_speed'."""
    return re.sub(r"\s+", "_", label.strip().lower())


def parse_comment(comment: Optional[str]) -> Dict[str, ExtensionValue]:
    """
    Extract readings from a free-text waypoint comment.

    Args:
        comment: Comment text, fragments separated by newlines or commas

    Returns:
        Mapping of label key to value, plus "<key>_unit" entries
    """
    result: Dict[str, ExtensionValue] = {}
    if not comment:
        return result

    for fragment in FRAGMENT_SEPARATORS.split(comment):
        match = LABEL_UNIT_VALUE.match(fragment)
        if match:
            key = label_key(match.group("label"))
            result[key] = float(match.group("value"))
            result[f"{key}_unit"] = match.group("unit")
            continue

        match = LABEL_VALUE.match(fragment)
        if match:
            result[label_key(match.group("label"))] = float(match.group("value"))
            continue

        if fragment.strip():
            logger.debug(f"Skipping unparseable comment fragment: {fragment.strip()!r}")

    return result


def structured_extensions(elements: Iterable) -> Dict[str, ExtensionValue]:
    """Numeric leaf values of <extensions>, keyed by lower-cased tag name."""
    result: Dict[str, ExtensionValue] = {}
    for name, text in iter_leaf_values(elements):
        value = to_float(text)
        if value is not None:
            result[name] = value
    return result


def annotate_extensions(
    structured: Optional[Mapping[str, ExtensionValue]],
    comment: Optional[str]
) -> Dict[str, ExtensionValue]:
    """
    Merge structured extensions with comment-derived readings.

    Comment-derived keys win on collision.
    """
    merged: Dict[str, ExtensionValue] = dict(structured or {})
    merged.update(parse_comment(comment))
    return merged


def build_waypoint(waypoint: gpxpy.gpx.GPXWaypoint) -> Waypoint:
    """Convert a gpxpy waypoint into an annotated Waypoint."""
    return Waypoint(
        lat=waypoint.latitude,
        lon=waypoint.longitude,
        ele=waypoint.elevation,
        time=waypoint.time,
        name=waypoint.name,
        description=waypoint.description,
        comment=waypoint.comment,
        extensions=annotate_extensions(
            structured_extensions(waypoint.extensions),
            waypoint.comment,
        ),
    )
