"""Tests for the diameter-based circle fitter."""

from __future__ import annotations

import math

import pytest

from app.engine.errors import DegenerateFitError
from app.engine.fitter import CircleFitter, fit_circle
from app.engine.point import Point
from app.utils.geometry import distance
from tests.conftest import CIRCLE_POINTS, SQUARE_POINTS, TRIANGLE_POINTS


def test_square_diagonal_defines_circle():
    fit = fit_circle(SQUARE_POINTS)
    assert fit.center == Point(0.0, 0.0)
    assert fit.radius == pytest.approx(math.sqrt(50))


def test_square_corners_sit_on_circle_so_containment_holds():
    fit = fit_circle(SQUARE_POINTS)
    for p in SQUARE_POINTS:
        assert distance(p, fit.center) <= fit.radius
    assert fit.quality == 100.0
    assert not fit.is_poor_fit


def test_point_outside_circle_uses_segment_penalty():
    fit = fit_circle(TRIANGLE_POINTS)
    assert fit.center == Point(250.0, 200.0)
    assert fit.radius == pytest.approx(50.0)
    # The base passes through the center; each slanted edge is 4000/|edge| away
    edge_distance = 4000 / math.sqrt(50**2 + 80**2)
    expected = (1 - (2 * edge_distance) / 50 / 3) * 100
    assert fit.quality == pytest.approx(expected)
    assert fit.quality < 50
    assert fit.is_poor_fit


def test_points_on_circle():
    fit = fit_circle(CIRCLE_POINTS)
    assert fit.center == Point(100.0, 100.0)
    assert fit.radius == 50.0
    assert fit.quality == 100.0


def test_tie_breaks_on_first_pair():
    # |p0 p1| == |p1 p2| == 100, so the first pair wins
    pts = [Point(0.0, 0.0), Point(100.0, 0.0), Point(40.0, 80.0)]
    fit = fit_circle(pts)
    assert fit.center == Point(50.0, 0.0)
    assert fit.radius == 50.0


def test_two_points():
    fit = fit_circle([Point(0.0, 0.0), Point(10.0, 0.0)])
    assert fit.center == Point(5.0, 0.0)
    assert fit.radius == 5.0
    assert fit.quality == 100.0


def test_collinear_points_are_degenerate():
    with pytest.raises(DegenerateFitError):
        fit_circle([Point(0.0, 0.0), Point(10.0, 0.0), Point(20.0, 0.0)])


def test_coincident_points_are_degenerate():
    with pytest.raises(DegenerateFitError):
        fit_circle([Point(3.0, 3.0), Point(3.0, 3.0), Point(3.0, 3.0)])


def test_single_point_is_degenerate():
    with pytest.raises(DegenerateFitError):
        fit_circle([Point(1.0, 2.0)])


def test_degenerate_error_converts_to_stroke_error():
    with pytest.raises(DegenerateFitError) as exc_info:
        fit_circle([])
    err = exc_info.value.to_stroke_error()
    assert err.kind.value == "degenerate_fit"
    assert err.message


def test_fit_is_deterministic():
    fitter = CircleFitter()
    assert fitter.fit(TRIANGLE_POINTS) == fitter.fit(TRIANGLE_POINTS)


def test_poor_fit_threshold_is_configurable(config):
    config.poor_fit_quality = 40.0
    fit = CircleFitter(config).fit(TRIANGLE_POINTS)
    assert not fit.is_poor_fit
