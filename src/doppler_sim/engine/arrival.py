"""Detect which wavefront is currently being heard at the observer."""
from typing import NamedTuple, Optional, Sequence

import numpy as np

from doppler_sim.kinematics import Point2

from .wavefront import Wavefront


class Arrival(NamedTuple):
    wave: Wavefront
    arrival_time: float
    distance: float


def detect_arrival(waves: Sequence[Wavefront], observer_pos: Point2, now: float,
                   sound_speed: float) -> Optional[Arrival]:
    """Return the most recently arrived wavefront at `observer_pos`, or None for silence.

    A wavefront has arrived once its radius at `now` reaches the observer. Its arrival time is
    the moment the front geometrically reached the observer (birth + d / c), not the
    current time. Among arrived wavefronts the latest arrival wins; exact ties go to
    the oldest wavefront.
    """
    if not waves:
        return None

    origins = np.array([(w.origin.x, w.origin.y) for w in waves], dtype=np.float64)
    births = np.array([w.birth_time for w in waves], dtype=np.float64)
    radii = (now - births) * sound_speed

    d = np.hypot(origins[:, 0] - observer_pos[0], origins[:, 1] - observer_pos[1])
    arrived = radii >= d
    if not np.any(arrived):
        return None

    arrival_times = np.where(arrived, births + d / sound_speed, -np.inf)
    i = int(np.argmax(arrival_times))
    return Arrival(waves[i], float(arrival_times[i]), float(d[i]))
