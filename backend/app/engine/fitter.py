"""CircleFitter — diameter-based circle estimate with a containment quality score.

The circle is taken from the two points that are farthest apart: their
midpoint is the center and half their separation is the radius. Interior
points do not move the estimate; they only feed the quality score.

Quality:
    100 when every point lies inside or on the circle. Otherwise the stroke is
    treated as a closed polygon and the distance from the center to each edge
    is summed:  quality = (1 - total / radius / n) * 100.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from app.engine.config import ScoringConfig
from app.engine.errors import DegenerateFitError
from app.engine.point import Point, points_to_array
from app.utils.geometry import (
    distance,
    distance_to_segment,
    farthest_pair,
    max_line_deviation,
    midpoint,
)


@dataclass(frozen=True)
class CircleFit:
    center: Point
    radius: float
    quality: float
    is_poor_fit: bool


class CircleFitter:
    """Stateless: the same point sequence always yields the same CircleFit."""

    def __init__(self, config: ScoringConfig | None = None) -> None:
        self.config = config or ScoringConfig()

    def fit(self, points: Sequence[Point]) -> CircleFit:
        n = len(points)
        if n < 2:
            raise DegenerateFitError(f"Need at least 2 points to fit a circle, got {n}")

        arr = points_to_array(points)
        i, j = farthest_pair(arr)
        p1, p2 = points[i], points[j]
        center = Point(*midpoint(p1, p2))
        radius = distance(p1, p2) / 2

        if radius == 0:
            raise DegenerateFitError("All points coincide; circle has zero radius")
        if n >= 3 and max_line_deviation(arr, p1, p2) <= self.config.collinear_tolerance * radius:
            raise DegenerateFitError("Points are collinear; no circle through them")

        quality = self.containment_quality(points, center, radius)
        return CircleFit(
            center=center,
            radius=radius,
            quality=quality,
            is_poor_fit=quality < self.config.poor_fit_quality,
        )

    @staticmethod
    def containment_quality(points: Sequence[Point], center: Point, radius: float) -> float:
        if all(distance(p, center) <= radius for p in points):
            return 100.0

        n = len(points)
        total = 0.0
        for k in range(n):
            total += distance_to_segment(center, points[k], points[(k + 1) % n])
        return (1 - total / radius / n) * 100


def fit_circle(points: Sequence[Point], config: ScoringConfig | None = None) -> CircleFit:
    """Convenience wrapper around CircleFitter.fit."""
    return CircleFitter(config).fit(points)
