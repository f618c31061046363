"""Scoring configuration — stroke gate and quality thresholds."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ScoringConfig:
    """Tunables for the stroke gate, the circle fitter and the quality classes."""

    # Stroke gate
    min_point_spacing: float = 10.0  # canvas units
    max_point_interval_ms: int = 100

    # Fitting
    min_fit_points: int = 3
    poor_fit_quality: float = 50.0  # fits are usable only below this containment quality
    collinear_tolerance: float = 1e-9  # relative to radius

    # Quality classes (radial deviation percent)
    high_quality_percent: float = 95.0
    medium_quality_percent: float = 90.0
