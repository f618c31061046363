"""Shared test fixtures."""

from __future__ import annotations

import pytest

from app.engine.config import ScoringConfig
from app.engine.point import Point
from app.engine.session import StrokeSession


class FakeClock:
    """Monotonic nanosecond clock the test advances by hand."""

    def __init__(self, start_ns: int = 1_000_000_000_000) -> None:
        self.now = start_ns

    def __call__(self) -> int:
        return self.now

    def advance_ms(self, ms: float) -> None:
        self.now += int(ms * 1_000_000)



# Four points on a circle of radius 50 centered at (100, 100)
CIRCLE_POINTS = [
    Point(150.0, 100.0),
    Point(100.0, 150.0),
    Point(50.0, 100.0),
    Point(100.0, 50.0),
]

SQUARE_POINTS = [
    Point(5.0, 5.0),
    Point(-5.0, 5.0),
    Point(-5.0, -5.0),
    Point(5.0, -5.0),
]

# Base 100 is the longest side; the apex lies outside the base-diameter circle
TRIANGLE_POINTS = [
    Point(200.0, 200.0),
    Point(300.0, 200.0),
    Point(250.0, 280.0),
]


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def config() -> ScoringConfig:
    return ScoringConfig()


@pytest.fixture
def session(config: ScoringConfig, clock: FakeClock) -> StrokeSession:
    return StrokeSession(config, clock=clock)


def feed(session: StrokeSession, clock: FakeClock, points, gap_ms: float = 20.0):
    """Submit points gap_ms apart; returns the list of UpdateResults."""
    results = []
    for i, p in enumerate(points):
        if i:
            clock.advance_ms(gap_ms)
        results.append(session.update(p.x, p.y))
    return results


def ring_points(bottom: float = 99.9) -> list[Point]:
    """Twelve points around (200, 200), radius 100, in drawing order.

    (300, 200)-(100, 200) is the first farthest pair, so the fitted circle is
    centered at (200, 200) with radius 100. The top point sits 0.03 outside it;
    the bottom point sits at distance ``bottom`` from the center.
    """
    offsets = [
        (100.0, 0.0), (80.0, 60.0), (60.0, 80.0), (0.0, 100.03),
        (-60.0, 80.0), (-80.0, 60.0), (-100.0, 0.0), (-80.0, -60.0),
        (-60.0, -80.0), (0.0, -bottom), (60.0, -80.0), (80.0, -60.0),
    ]
    return [Point(200.0 + dx, 200.0 + dy) for dx, dy in offsets]
