"""Doppler frequency calculations for a wavefront heard by a moving observer.

Two related formulas are used on purpose:

- the apparent frequency reflects source motion only and drives the observed phase,
  so the plotted waveform is compressed/stretched by the source's motion;
- the full Doppler frequency reflects both source and observer motion and is the
  value shown to the user.

Both are clamped to [FREQ_MIN, f * FREQ_MAX_FACTOR]. The clamp is a numerical
stability guard for (c - v_s.u) -> 0 and for supersonic sources, not physics.
"""
import logging
import math
from enum import Enum
from typing import NamedTuple, Optional

from doppler_sim.constants import (
    EPSILON,
    FREQ_CHANGE_THRESHOLD,
    FREQ_MAX_FACTOR,
    FREQ_MIN,
    SOUND_SPEED_MIN,
)
from doppler_sim.kinematics import Point2, dot, sub, unit

from .wavefront import Wavefront

logger = logging.getLogger(__name__)

TWO_PI = 2.0 * math.pi


class Shift(Enum):
    NONE = "none"
    BLUESHIFT = "blueshift"
    REDSHIFT = "redshift"


class Resolution(NamedTuple):
    apparent_hz: float
    doppler_hz: float
    phase: float


def positive_frequency(freq_hz: float) -> float:
    return max(float(freq_hz), FREQ_MIN)


def positive_sound_speed(speed_m_s: float) -> float:
    return max(float(speed_m_s), SOUND_SPEED_MIN)


def clamp_frequency(freq_hz: float, emitted_hz: float) -> float:
    """Clamp `freq_hz` to [FREQ_MIN, emitted_hz * FREQ_MAX_FACTOR]."""
    upper = max(emitted_hz * FREQ_MAX_FACTOR, FREQ_MIN)
    return min(max(freq_hz, FREQ_MIN), upper)


def _shifted(emitted_hz: float, numerator: float, denominator: float) -> float:
    emitted_hz = positive_frequency(emitted_hz)
    if abs(denominator) <= EPSILON:
        # source moving at the speed of sound along the line of sight
        return clamp_frequency(math.inf if numerator > 0 else -math.inf, emitted_hz)
    return clamp_frequency(emitted_hz * numerator / denominator, emitted_hz)


def line_of_sight(origin: Point2, observer_pos: Point2) -> Optional[Point2]:
    """Unit vector from `origin` to `observer_pos`, or None if they coincide."""
    return unit(sub(observer_pos, origin))


def apparent_frequency(emitted_hz: float, source_vel: Point2, direction: Point2,
                       sound_speed: float) -> float:
    """Frequency heard from a moving source by a stationary observer.

    f' = f * c / (c - v_s.u)
    """
    c = positive_sound_speed(sound_speed)
    return _shifted(emitted_hz, c, c - dot(source_vel, direction))


def doppler_frequency(emitted_hz: float, source_vel: Point2, observer_vel: Point2,
                      direction: Point2, sound_speed: float) -> float:
    """Full Doppler-shifted frequency with both parties moving.

    f' = f * (c - v_o.u) / (c - v_s.u)

    direction: unit vector from the emission point toward the observer
    """
    c = positive_sound_speed(sound_speed)
    return _shifted(emitted_hz, c - dot(observer_vel, direction), c - dot(source_vel, direction))


def classify_shift(observed_hz: float, emitted_hz: float,
                   threshold: float = FREQ_CHANGE_THRESHOLD) -> Shift:
    if observed_hz > emitted_hz + threshold:
        return Shift.BLUESHIFT
    if observed_hz < emitted_hz - threshold:
        return Shift.REDSHIFT
    return Shift.NONE


def resolve(wave: Wavefront, arrival_time: float, now: float, observer_pos: Point2,
            observer_vel: Point2, sound_speed: float) -> Optional[Resolution]:
    """Resolve both frequencies and the observed phase for the current wavefront.

    Returns None when the observer sits on the wavefront origin, in which case the
    caller keeps its previous frequency and phase.
    """
    direction = line_of_sight(wave.origin, observer_pos)
    if direction is None:
        logger.debug("Observer coincides with wavefront origin; holding previous frequency")
        return None

    f_apparent = apparent_frequency(wave.emitted_frequency, wave.source_velocity,
                                    direction, sound_speed)
    f_doppler = doppler_frequency(wave.emitted_frequency, wave.source_velocity,
                                  observer_vel, direction, sound_speed)
    phase = wave.phase_at_emission + (now - arrival_time) * f_apparent * TWO_PI
    return Resolution(f_apparent, f_doppler, phase)
