"""StrokeSession — spacing/pacing gate and accepted-point buffer for one drawing attempt."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass

from app.engine.config import ScoringConfig
from app.engine.errors import DegenerateFitError, ErrorKind, StrokeError
from app.engine.fitter import CircleFitter
from app.engine.point import ORIGIN, Point
from app.engine.scoring import FitResult, score_fit
from app.utils.geometry import distance

logger = logging.getLogger(__name__)

TOO_CLOSE_MESSAGE = "Too close to last point"
TOO_SLOW_MESSAGE = "Draw faster"


@dataclass(frozen=True)
class UpdateResult:
    """Outcome of a single update() call.

    ``error`` is set only when the point was rejected. ``fit_error`` explains a
    missing ``fit`` on an accepted point (degenerate or unusable geometry).
    """

    accepted: bool
    fit: FitResult | None = None
    error: StrokeError | None = None
    fit_error: StrokeError | None = None


class StrokeSession:
    """Owned by a single caller; calls must be serialized."""

    def __init__(
        self,
        config: ScoringConfig | None = None,
        clock: Callable[[], int] = time.monotonic_ns,
    ) -> None:
        self.config = config or ScoringConfig()
        self.fitter = CircleFitter(self.config)
        self._clock = clock
        self.start()

    def start(self) -> None:
        """Reset to an empty stroke. Safe to call at any time."""
        self.points: list[Point] = []
        self.last_point: Point = ORIGIN
        self.last_accepted_at: int | None = None

    @property
    def point_count(self) -> int:
        return len(self.points)

    def update(self, x: float, y: float) -> UpdateResult:
        now = self._clock()
        point = Point(float(x), float(y))

        if distance(point, self.last_point) < self.config.min_point_spacing:
            logger.debug("Rejected (%.1f, %.1f): too close", x, y)
            return UpdateResult(accepted=False, error=StrokeError(ErrorKind.TOO_CLOSE, TOO_CLOSE_MESSAGE))

        if self.last_accepted_at is not None:
            elapsed_ns = now - self.last_accepted_at
            if elapsed_ns > self.config.max_point_interval_ms * 1_000_000:
                logger.debug("Rejected (%.1f, %.1f): %.1fms since last point", x, y, elapsed_ns / 1e6)
                return UpdateResult(accepted=False, error=StrokeError(ErrorKind.TOO_SLOW, TOO_SLOW_MESSAGE))

        self.points.append(point)
        self.last_point = point
        self.last_accepted_at = now

        if len(self.points) < self.config.min_fit_points:
            return UpdateResult(accepted=True)

        fit, fit_error = self.evaluate()
        return UpdateResult(accepted=True, fit=fit, fit_error=fit_error)

    def evaluate(self) -> tuple[FitResult | None, StrokeError | None]:
        """Fit and score the current buffer without touching session state."""
        try:
            circle = self.fitter.fit(self.points)
        except DegenerateFitError as e:
            logger.debug("No usable fit on %d points: %s", len(self.points), e)
            return None, e.to_stroke_error()

        # Usable only when the stroke winds around the center: every edge stays
        # far from it, which drives the containment quality below the threshold.
        if not circle.is_poor_fit:
            return None, StrokeError(
                ErrorKind.UNUSABLE_FIT,
                f"Stroke does not loop around its center yet (containment quality {circle.quality:.1f})",
            )

        result = score_fit(self.points, circle.center, circle.radius, self.config)
        logger.debug(
            "Fit %d points: center=(%.1f, %.1f) r=%.1f %.1f%% %s",
            len(self.points),
            result.center.x,
            result.center.y,
            result.radius,
            result.quality_percent,
            result.quality_class.value,
        )
        return result, None
