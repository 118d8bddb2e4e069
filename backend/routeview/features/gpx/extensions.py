"""
Helpers for GPX <extensions> elements.

gpxpy exposes extensions as a list of ElementTree (or lxml) elements.
Vendors nest their values differently (Garmin wraps hr/cad in
TrackPointExtension), so values are read from leaf elements at any depth
and matched by local tag name, ignoring namespaces.
"""

from typing import Iterable, Iterator, Optional, Tuple


def local_name(tag) -> Optional[str]:
    """'{ns}HeartRate' -> 'heartrate'. Comments/PIs have non-str tags."""
    if not isinstance(tag, str):
        return None
    return tag.rsplit('}', 1)[-1].lower()


def to_float(text: Optional[str]) -> Optional[float]:
    """Parse element text as a number; None when absent or not numeric."""
    if text is None:
        return None
    try:
        return float(text.strip())
    except ValueError:
        return None


def iter_leaf_values(elements: Iterable) -> Iterator[Tuple[str, str]]:
    """Yield (local_name, text) for every leaf element, depth-first."""
    for element in elements or ():
        for node in element.iter():
            name = local_name(node.tag)
            if name is None or len(node) > 0:
                continue
            if node.text is not None and node.text.strip():
                yield name, node.text.strip()


def find_number(elements: Iterable, *names: str) -> Optional[float]:
    """First numeric leaf value whose local name is one of ``names``."""
    for name, text in iter_leaf_values(elements):
        if name in names:
            value = to_float(text)
            if value is not None:
                return value
    return None
