"""Immutable 2D vectors used for positions (m) and velocities (m/s)."""
import math
from typing import NamedTuple, Optional

from doppler_sim.constants import EPSILON


class Point2(NamedTuple):
    x: float
    y: float

    def scaled(self, k: float) -> "Point2":
        return Point2(self.x * k, self.y * k)

    def offset(self, other: "Point2") -> "Point2":
        return Point2(self.x + other.x, self.y + other.y)


ZERO = Point2(0.0, 0.0)


def sub(a: Point2, b: Point2) -> Point2:
    return Point2(a.x - b.x, a.y - b.y)


def dot(a: Point2, b: Point2) -> float:
    return a.x * b.x + a.y * b.y


def norm(a: Point2) -> float:
    return math.hypot(a.x, a.y)


def distance(a: Point2, b: Point2) -> float:
    return math.hypot(a.x - b.x, a.y - b.y)


def unit(a: Point2) -> Optional[Point2]:
    """Return `a` normalized, or None when it is (numerically) zero-length."""
    n = norm(a)
    if n < EPSILON:
        return None
    return Point2(a.x / n, a.y / n)
