"""
Geometric Primitives for the explainer layout.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING
import math

import numpy as np

if TYPE_CHECKING:
    import numpy.typing as npt


@dataclass(frozen=True)
class Point:
    """A point in 2D viewport coordinates (y grows downwards)."""
    x: float
    y: float

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Point:
        return Point(self.x * scalar, self.y * scalar)

    @property
    def magnitude(self) -> float:
        return math.hypot(self.x, self.y)

    def distance_to(self, other: Point) -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    def lerp(self, other: Point, t: float) -> Point:
        """Linear interpolation: t=0 gives self, t=1 gives other."""
        return Point(self.x + (other.x - self.x) * t, self.y + (other.y - self.y) * t)

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array([self.x, self.y], dtype=np.float64)

    @classmethod
    def from_array(cls, arr: npt.ArrayLike) -> Point:
        x, y = np.asarray(arr, dtype=np.float64)[:2]
        return cls(float(x), float(y))


ORIGIN = Point(0.0, 0.0)


@dataclass(frozen=True)
class Viewport:
    """
    Size of the interactive surface.

    Negative sizes are clamped to zero. A viewport with no area is degenerate:
    layouts collapse every node onto the origin instead of failing.
    """
    width: float = 0.0
    height: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "width", max(0.0, float(self.width)))
        object.__setattr__(self, "height", max(0.0, float(self.height)))

    @property
    def is_degenerate(self) -> bool:
        return self.width <= 0.0 or self.height <= 0.0

    @property
    def center_y(self) -> float:
        return self.height / 2.0

    def clamp(self, point: Point, margin: float) -> Point:
        """
        Clamp a point into the interior of the viewport, keeping `margin`
        away from each edge. When the viewport is narrower than two margins
        the axis collapses to its midpoint.
        """
        return Point(
            _clamp_axis(point.x, margin, self.width - margin),
            _clamp_axis(point.y, margin, self.height - margin),
        )


def _clamp_axis(value: float, lo: float, hi: float) -> float:
    if hi < lo:
        return (lo + hi) / 2.0
    return max(lo, min(hi, value))
