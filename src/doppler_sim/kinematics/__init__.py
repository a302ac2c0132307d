"""Positions, velocities and the motion of draggable bodies."""

from .point import Point2, ZERO, distance, dot, norm, sub, unit
from .body import Body

__all__ = ["Point2", "ZERO", "distance", "dot", "norm", "sub", "unit", "Body"]
