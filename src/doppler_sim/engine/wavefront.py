"""Wavefront records, the emitter that stamps them and the registry that ages them."""
import logging
import math
from dataclasses import dataclass
from typing import Iterator, Optional, Tuple

from doppler_sim.constants import FIELD_HEIGHT, FIELD_WIDTH, MAX_AGE
from doppler_sim.kinematics import Point2

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Wavefront:
    """An expanding circular front emitted by the source at `birth_time`.

    All fields are a snapshot taken at emission. The radius is not stored; it is
    derived from age and the current speed of sound.
    """

    origin: Point2
    source_velocity: Point2
    emitted_frequency: float
    phase_at_emission: float
    birth_time: float

    def age(self, now: float) -> float:
        return now - self.birth_time

    def radius_at(self, now: float, sound_speed: float) -> float:
        return self.age(now) * sound_speed


class WavefrontEmitter:
    """Stamps a new wavefront once per emission interval (1 / emitted frequency).

    Emissions are scheduled on the ideal grid (last emission + interval) so a coarse
    time step delays a wavefront by less than one step without lowering the rate.
    If the schedule falls more than one interval behind (a frequency drop, a stall),
    it restarts from the current time instead of emitting a burst.
    """

    def __init__(self):
        self.last_emission_time = 0.0

    def reset(self) -> None:
        self.last_emission_time = 0.0

    def maybe_emit(self, now: float, emitted_frequency: float, source_pos: Point2,
                   source_vel: Point2, emitted_phase: float) -> Optional[Wavefront]:
        interval = 1.0 / emitted_frequency
        if now - self.last_emission_time <= interval:
            return None
        self.last_emission_time += interval
        if now - self.last_emission_time > interval:
            self.last_emission_time = now
        # Point2 is immutable, so rebuilding it is enough to detach the snapshot
        wf = Wavefront(
            origin=Point2(float(source_pos[0]), float(source_pos[1])),
            source_velocity=Point2(float(source_vel[0]), float(source_vel[1])),
            emitted_frequency=float(emitted_frequency),
            phase_at_emission=float(emitted_phase),
            birth_time=float(now),
        )
        logger.debug(f"Emitted wavefront at t={now:.3f}s from ({wf.origin.x:.1f}, {wf.origin.y:.1f})")
        return wf


class WavefrontRegistry:
    """Ordered set of live wavefronts, oldest first.

    `advance` records the time and speed of sound of the step so radii can be read
    back consistently with what the expiry check used.
    """

    def __init__(self, field_width: float = FIELD_WIDTH, field_height: float = FIELD_HEIGHT,
                 max_age: float = MAX_AGE):
        self.max_age = float(max_age)
        self.max_radius = math.hypot(field_width, field_height)
        self.now = 0.0
        self.sound_speed = 0.0
        self._waves = []

    def __len__(self) -> int:
        return len(self._waves)

    def __iter__(self) -> Iterator[Wavefront]:
        return iter(tuple(self._waves))

    def snapshot(self) -> Tuple[Wavefront, ...]:
        return tuple(self._waves)

    def add(self, wave: Wavefront) -> None:
        self._waves.append(wave)

    def clear(self) -> None:
        self._waves.clear()
        self.now = 0.0

    def radius(self, wave: Wavefront) -> float:
        return wave.radius_at(self.now, self.sound_speed)

    def advance(self, now: float, sound_speed: float) -> int:
        """Age every wavefront to `now` and drop expired ones; returns how many were dropped."""
        self.now = now
        self.sound_speed = sound_speed
        alive = [
            w for w in self._waves
            if w.age(now) <= self.max_age and w.radius_at(now, sound_speed) <= self.max_radius
        ]
        dropped = len(self._waves) - len(alive)
        self._waves = alive
        return dropped
