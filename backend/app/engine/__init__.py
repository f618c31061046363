"""Perfect-circle scoring engine."""

from app.engine.config import ScoringConfig
from app.engine.errors import DegenerateFitError, ErrorKind, StrokeError
from app.engine.fitter import CircleFit, CircleFitter, fit_circle
from app.engine.point import Point
from app.engine.scoring import FitResult, QualityClass, classify_quality
from app.engine.session import StrokeSession, UpdateResult

__all__ = [
    "ScoringConfig",
    "DegenerateFitError",
    "ErrorKind",
    "StrokeError",
    "CircleFit",
    "CircleFitter",
    "fit_circle",
    "Point",
    "FitResult",
    "QualityClass",
    "classify_quality",
    "StrokeSession",
    "UpdateResult",
]
