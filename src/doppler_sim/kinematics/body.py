"""Kinematics of a draggable point body (source or observer).

A body is in one of four modes:

- idle: at rest
- dragging: eases toward a target point, velocity derived from displacement / dt
- scripted: moves at a constant velocity (scenario presets)
- released: a drag just ended; the body coasts while its velocity decays
  exponentially toward zero

The velocity after a drag is released decays with a half-life of
``DRAG_RELEASE_HALF_LIFE`` seconds of simulation time and snaps to zero once it
falls under ``MIN_VELOCITY_MAG``.
"""
import logging

from doppler_sim.constants import (
    DRAG_RELEASE_HALF_LIFE,
    DRAG_SMOOTHING,
    MIN_VELOCITY_MAG,
    MOVE_STEP,
    PICK_RADIUS,
)
from .point import Point2, ZERO, distance, norm, sub

logger = logging.getLogger(__name__)

IDLE = "idle"
DRAGGING = "dragging"
SCRIPTED = "scripted"
RELEASED = "released"


class Body:
    def __init__(self, name: str, pos: Point2, vel: Point2 = ZERO):
        self.name = name
        self.pos = Point2(*pos)
        self.vel = Point2(*vel)
        self.mode = IDLE
        self._target = self.pos

    def place(self, pos: Point2, vel: Point2 = ZERO) -> None:
        """Teleport the body and stop any motion."""
        self.pos = Point2(*pos)
        self.vel = Point2(*vel)
        self._target = self.pos
        self.mode = IDLE

    def grab(self, point: Point2, radius: float = PICK_RADIUS) -> bool:
        """Start dragging if `point` is within `radius` of the body."""
        if distance(Point2(*point), self.pos) >= radius:
            return False
        self.mode = DRAGGING
        self._target = Point2(*point)
        logger.debug(f"{self.name}: grabbed at {self.pos}")
        return True

    @property
    def is_dragging(self) -> bool:
        return self.mode == DRAGGING

    def drag_to(self, target: Point2) -> None:
        if self.mode == DRAGGING:
            self._target = Point2(*target)

    def release(self) -> None:
        if self.mode == DRAGGING:
            self.mode = RELEASED
            logger.debug(f"{self.name}: released with velocity {self.vel}")

    def set_scripted_velocity(self, vel: Point2) -> None:
        self.vel = Point2(*vel)
        self.mode = SCRIPTED

    def nudge(self, dx: float, dy: float, dt: float) -> None:
        """Keyboard motion at MOVE_STEP m/s along the sign of (dx, dy)."""
        if dt <= 0.0 or self.mode == DRAGGING:
            return
        vx = MOVE_STEP * _sign(dx)
        vy = MOVE_STEP * _sign(dy)
        self.vel = Point2(vx, vy)
        self.pos = self.pos.offset(self.vel.scaled(dt))
        self._target = self.pos
        self.mode = IDLE

    def step(self, dt: float) -> None:
        if dt <= 0.0:
            return

        if self.mode == DRAGGING:
            prev = self.pos
            delta = sub(self._target, self.pos)
            self.pos = self.pos.offset(delta.scaled(DRAG_SMOOTHING))
            self.vel = sub(self.pos, prev).scaled(1.0 / dt)
        elif self.mode == SCRIPTED:
            if norm(self.vel) < MIN_VELOCITY_MAG:
                self.vel = ZERO
                self.mode = IDLE
                return
            self.pos = self.pos.offset(self.vel.scaled(dt))
        elif self.mode == RELEASED:
            self.pos = self.pos.offset(self.vel.scaled(dt))
            self.vel = self.vel.scaled(0.5 ** (dt / DRAG_RELEASE_HALF_LIFE))
            if norm(self.vel) < MIN_VELOCITY_MAG:
                self.vel = ZERO
                self.mode = IDLE


def _sign(v: float) -> float:
    if v > 0:
        return 1.0
    if v < 0:
        return -1.0
    return 0.0
