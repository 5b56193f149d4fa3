"""
Geometric Primitives for the star outline.
"""
from __future__ import annotations
from dataclasses import dataclass
import math


@dataclass(frozen=True)
class Point2D:
    """
    A point in the XY plane of the pad.

    Transforms of whole outlines live in `geometry_utils`, which works on
    (n, 2) arrays; this type is what a `Star` hands out point by point.
    """
    x: float
    y: float

    def __sub__(self, other: Point2D) -> Point2D:
        return Point2D(self.x - other.x, self.y - other.y)

    @property
    def radius(self) -> float:
        """Distance from the pad centre."""
        return math.hypot(self.x, self.y)

    @property
    def angle(self) -> float:
        """Polar angle in radians, in (-pi, pi]."""
        return math.atan2(self.y, self.x)

    def distance_to(self, other: Point2D) -> float:
        return (self - other).radius

    def is_close(self, other: Point2D, tol: float = 1e-9) -> bool:
        return self.distance_to(other) <= tol
