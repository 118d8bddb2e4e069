"""
Chart series for the route metrics chart.

Samples the route down to roughly ``max_samples`` points and derives
cumulative distance, speed, heart rate and elevation per sample.
"""

from dataclasses import dataclass, field
from typing import List

from routeview.shared.geo import cumulative_distances
from routeview.shared.formatters import format_distance

from .schemas import Route

MS_TO_KMH = 3.6


@dataclass
class ChartSeries:
    """Parallel per-sample series."""
    distances: List[float] = field(default_factory=list)  # meters
    speeds_kmh: List[float] = field(default_factory=list)
    heart_rates: List[float] = field(default_factory=list)
    elevations: List[float] = field(default_factory=list)

    @property
    def has_heart_rate(self) -> bool:
        return any(hr > 0 for hr in self.heart_rates)

    @property
    def labels(self) -> List[str]:
        return [format_distance(d) for d in self.distances]


def build_chart_series(route: Route, max_samples: int = 100) -> ChartSeries:
    """
    Build chart series for a route.

    Every ``max(1, N // max_samples)``-th point is kept. Distance is
    measured between kept samples, so heavy sampling shortens it slightly.
    Missing speed or heart rate is charted as 0.

    Args:
        route: Parsed route
        max_samples: Target number of samples

    Returns:
        ChartSeries
    """
    points = list(route.points)
    step = max(1, len(points) // max(1, max_samples))
    sampled = points[::step]

    return ChartSeries(
        distances=cumulative_distances(
            (p.position.lat, p.position.lon) for p in sampled
        ),
        speeds_kmh=[p.speed * MS_TO_KMH if p.speed else 0.0 for p in sampled],
        heart_rates=[p.heart_rate or 0.0 for p in sampled],
        elevations=[p.position.ele for p in sampled],
    )
