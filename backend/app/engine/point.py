"""Point — a single canvas sample."""

from __future__ import annotations

from collections.abc import Sequence
from typing import NamedTuple

import numpy as np
from numpy.typing import NDArray


class Point(NamedTuple):
    x: float
    y: float


ORIGIN = Point(0.0, 0.0)


def points_to_array(points: Sequence[Point]) -> NDArray[np.float64]:
    """Nx2 float array of (x, y), in drawing order."""
    if not points:
        return np.empty((0, 2))
    return np.asarray(points, dtype=np.float64)
