"""Stroke conditions reported back to the caller."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class ErrorKind(str, enum.Enum):
    TOO_CLOSE = "too_close"
    TOO_SLOW = "too_slow"
    DEGENERATE_FIT = "degenerate_fit"
    UNUSABLE_FIT = "unusable_fit"


@dataclass(frozen=True)
class StrokeError:
    """A recoverable condition: the kind for programs, the message for people."""

    kind: ErrorKind
    message: str


class DegenerateFitError(ValueError):
    """The point set does not define a usable circle (too few points, zero radius, collinear)."""

    def to_stroke_error(self) -> StrokeError:
        return StrokeError(ErrorKind.DEGENERATE_FIT, str(self))
