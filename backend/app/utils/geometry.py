"""Leaf-node geometry helpers. No engine imports."""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import NDArray
from scipy.spatial.distance import pdist

Coord = tuple[float, float]


def distance_squared(a: Coord, b: Coord) -> float:
    dx = b[0] - a[0]
    dy = b[1] - a[1]
    return dx * dx + dy * dy


def distance(a: Coord, b: Coord) -> float:
    """Euclidean distance between two points."""
    return math.sqrt(distance_squared(a, b))


def midpoint(a: Coord, b: Coord) -> Coord:
    return ((a[0] + b[0]) / 2, (a[1] + b[1]) / 2)


def distance_to_segment(p: Coord, v: Coord, w: Coord) -> float:
    """Minimum distance from p to the segment v-w.

    The projection parameter is clamped to the segment endpoints. A
    zero-length segment falls back to the distance from p to v.
    """
    l2 = distance_squared(v, w)
    if l2 == 0:
        return distance(p, v)
    t = ((p[0] - v[0]) * (w[0] - v[0]) + (p[1] - v[1]) * (w[1] - v[1])) / l2
    if t < 0:
        return distance(p, v)
    if t > 1:
        return distance(p, w)
    projection = (v[0] + t * (w[0] - v[0]), v[1] + t * (w[1] - v[1]))
    return distance(p, projection)


def farthest_pair(points: NDArray[np.float64]) -> tuple[int, int]:
    """Indices (i, j), i < j, of the two points with the largest separation.

    Ties resolve to the first pair in row-major (i, then j) order.
    """
    n = len(points)
    if n < 2:
        raise ValueError(f"farthest_pair needs at least 2 points, got {n}")
    dists = pdist(points)
    k = int(np.argmax(dists))
    rows, cols = np.triu_indices(n, k=1)
    return int(rows[k]), int(cols[k])


def max_line_deviation(points: NDArray[np.float64], a: Coord, b: Coord) -> float:
    """Largest perpendicular distance from any point to the infinite line a-b."""
    length = distance(a, b)
    if length == 0:
        return 0.0
    dx = b[0] - a[0]
    dy = b[1] - a[1]
    cross = dx * (points[:, 1] - a[1]) - dy * (points[:, 0] - a[0])
    return float(np.max(np.abs(cross)) / length)


def radial_distances(points: NDArray[np.float64], center: Coord) -> NDArray[np.float64]:
    """Distance from center to each point."""
    dx = points[:, 0] - center[0]
    dy = points[:, 1] - center[1]
    return np.sqrt(dx * dx + dy * dy)
