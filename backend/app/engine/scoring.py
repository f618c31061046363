"""Radial deviation score and quality classes for a fitted stroke.

This is a different number from CircleFit.quality: the fitter's score decides
whether a circle is usable at all, this one decides how it is displayed.
"""

from __future__ import annotations

import enum
from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

from app.engine.config import ScoringConfig
from app.engine.point import Point, points_to_array
from app.utils.geometry import radial_distances


class QualityClass(str, enum.Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @property
    def color(self) -> str:
        return _COLORS[self]


_COLORS = {
    QualityClass.HIGH: "green",
    QualityClass.MEDIUM: "orange",
    QualityClass.LOW: "red",
}


@dataclass(frozen=True)
class FitResult:
    center: Point
    radius: float
    quality_percent: float
    quality_class: QualityClass
    is_red_flag: bool

    @property
    def color(self) -> str:
        return self.quality_class.color


def radial_deviation_percent(points: Sequence[Point], center: Point, radius: float) -> float:
    """100 - mean(|dist(p, center) - radius|) * 100. Unclamped."""
    arr = points_to_array(points)
    deviation = np.abs(radial_distances(arr, center) - radius)
    return 100 - (float(np.sum(deviation)) / len(points)) * 100


def classify_quality(percent: float, config: ScoringConfig | None = None) -> QualityClass:
    config = config or ScoringConfig()
    if percent >= config.high_quality_percent:
        return QualityClass.HIGH
    if percent >= config.medium_quality_percent:
        return QualityClass.MEDIUM
    return QualityClass.LOW


def score_fit(
    points: Sequence[Point],
    center: Point,
    radius: float,
    config: ScoringConfig | None = None,
) -> FitResult:
    percent = radial_deviation_percent(points, center, radius)
    quality_class = classify_quality(percent, config)
    return FitResult(
        center=center,
        radius=radius,
        quality_percent=min(100.0, max(0.0, percent)),
        quality_class=quality_class,
        is_red_flag=quality_class is QualityClass.LOW,
    )
