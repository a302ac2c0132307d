"""Step-driven Doppler simulation engine.

The host loop calls :meth:`DopplerEngine.update` once per frame with a `dt` it has
already scaled and clamped (see :mod:`doppler_sim.clock`). Kinematics are pushed in
by collaborators through ``set_source_kinematics`` / ``set_observer_kinematics``;
renderers read :meth:`DopplerEngine.get_observable_state`.
"""
import logging
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

import numpy as np

from doppler_sim.config import config_float
from doppler_sim.constants import (
    AMPLITUDE,
    EMITTED_FREQ,
    FIELD_HEIGHT,
    FIELD_WIDTH,
    HISTORY_LENGTH,
    MAX_AGE,
    SOUND_SPEED,
)
from doppler_sim.kinematics import Point2, ZERO

from .arrival import detect_arrival
from .doppler import Shift, classify_shift, positive_frequency, positive_sound_speed, resolve
from .signal import PhaseIntegrator
from .wavefront import WavefrontEmitter, WavefrontRegistry

logger = logging.getLogger(__name__)


@dataclass
class EngineSettings:
    emitted_frequency: float = EMITTED_FREQ
    sound_speed: float = SOUND_SPEED
    field_width: float = FIELD_WIDTH
    field_height: float = FIELD_HEIGHT
    max_age: float = MAX_AGE
    history_length: int = HISTORY_LENGTH
    amplitude: float = AMPLITUDE

    @classmethod
    def from_config(cls, cfg: Dict) -> "EngineSettings":
        """Build settings from a persisted config dict (see doppler_sim.config)."""
        s = cls()
        s.emitted_frequency = config_float(cfg, "emitted_frequency_hz", s.emitted_frequency)
        s.sound_speed = config_float(cfg, "sound_speed_m_s", s.sound_speed)
        s.field_width = config_float(cfg, "field_width_m", s.field_width)
        s.field_height = config_float(cfg, "field_height_m", s.field_height)
        return s


@dataclass(frozen=True)
class WavefrontView:
    origin: Point2
    radius: float
    age: float
    opacity: float  # 1.0 when fresh, 0.0 at max age


@dataclass(frozen=True)
class ObservableState:
    wavefronts: Tuple[WavefrontView, ...]
    source_pos: Point2
    source_vel: Point2
    observer_pos: Point2
    observer_vel: Point2
    emitted_signal: np.ndarray
    observed_signal: np.ndarray
    emitted_frequency: float
    observed_frequency: float
    shift: Shift
    simulation_time: float
    is_paused: bool


class DopplerEngine:
    """Owns all simulation state for one source and one observer."""

    def __init__(self, settings: Optional[EngineSettings] = None):
        self.settings = settings or EngineSettings()
        s = self.settings
        self._emitter = WavefrontEmitter()
        self._registry = WavefrontRegistry(s.field_width, s.field_height, s.max_age)
        self._integrator = PhaseIntegrator(s.history_length, s.amplitude)

        self._initial_source = Point2(s.field_width / 4.0, s.field_height / 2.0)
        self._initial_observer = Point2(3.0 * s.field_width / 4.0, s.field_height / 2.0)
        self.initialize(self._initial_source, self._initial_observer)

    # ---------------- lifecycle ----------------

    def initialize(self, source_pos: Point2, observer_pos: Point2) -> None:
        """Place source and observer at rest and start from time zero."""
        self._initial_source = Point2(*source_pos)
        self._initial_observer = Point2(*observer_pos)
        self.source_pos = self._initial_source
        self.observer_pos = self._initial_observer
        self.source_vel = ZERO
        self.observer_vel = ZERO

        self._emitted_frequency = positive_frequency(self.settings.emitted_frequency)
        self._sound_speed = positive_sound_speed(self.settings.sound_speed)
        self._simulation_time = 0.0
        self._emitter.reset()
        self._registry.clear()
        self._integrator.reset()
        self._observed_frequency = self._emitted_frequency
        self._heard = False
        self._paused = False
        logger.info(f"Engine initialized: source={self.source_pos} observer={self.observer_pos}")

    def reset(self) -> None:
        self.initialize(self._initial_source, self._initial_observer)

    def toggle_pause(self) -> bool:
        self._paused = not self._paused
        logger.info("Engine paused" if self._paused else "Engine resumed")
        return self._paused

    # ---------------- inputs ----------------

    def set_source_kinematics(self, pos: Point2, vel: Point2) -> None:
        self.source_pos = Point2(*pos)
        self.source_vel = Point2(*vel)

    def set_observer_kinematics(self, pos: Point2, vel: Point2) -> None:
        self.observer_pos = Point2(*pos)
        self.observer_vel = Point2(*vel)

    def set_emitted_frequency(self, freq_hz: float) -> float:
        f = positive_frequency(freq_hz)
        if f != freq_hz:
            logger.warning(f"Emitted frequency {freq_hz} Hz clamped to {f} Hz")
        self._emitted_frequency = f
        return f

    def set_sound_speed(self, speed_m_s: float) -> float:
        c = positive_sound_speed(speed_m_s)
        if c != speed_m_s:
            logger.warning(f"Sound speed {speed_m_s} m/s clamped to {c} m/s")
        self._sound_speed = c
        return c

    # ---------------- read-only properties ----------------

    @property
    def emitted_frequency(self) -> float:
        return self._emitted_frequency

    @property
    def sound_speed(self) -> float:
        return self._sound_speed

    @property
    def observed_frequency(self) -> float:
        return self._observed_frequency

    @property
    def simulation_time(self) -> float:
        return self._simulation_time

    @property
    def last_emission_time(self) -> float:
        return self._emitter.last_emission_time

    @property
    def emitted_phase(self) -> float:
        return self._integrator.emitted_phase

    @property
    def observed_phase(self) -> float:
        return self._integrator.observed_phase

    @property
    def is_paused(self) -> bool:
        return self._paused

    @property
    def wavefronts(self):
        return self._registry.snapshot()

    # ---------------- stepping ----------------

    def update(self, dt: float) -> None:
        """Advance the simulation by `dt` seconds; does nothing while paused."""
        if self._paused:
            return
        if dt < 0.0:
            logger.warning(f"Negative time step {dt} ignored")
            dt = 0.0

        self._simulation_time += dt
        now = self._simulation_time
        f = self._emitted_frequency
        c = self._sound_speed

        wave = self._emitter.maybe_emit(now, f, self.source_pos, self.source_vel,
                                        self._integrator.emitted_phase)
        if wave is not None:
            self._registry.add(wave)
        self._registry.advance(now, c)

        self._integrator.advance_emitted(f, dt)

        arrival = detect_arrival(self._registry.snapshot(), self.observer_pos, now, c)
        if arrival is None:
            if not self._heard:
                self._observed_frequency = f
            self._integrator.sample(silent=True)
            return

        res = resolve(arrival.wave, arrival.arrival_time, now, self.observer_pos,
                      self.observer_vel, c)
        if res is not None:
            self._integrator.observed_phase = res.phase
            self._observed_frequency = res.doppler_hz
            self._heard = True
        self._integrator.sample(silent=False)

    # ---------------- output ----------------

    def get_observable_state(self) -> ObservableState:
        now = self._simulation_time
        max_age = self._registry.max_age
        views = tuple(
            WavefrontView(
                origin=w.origin,
                radius=self._registry.radius(w),
                age=w.age(now),
                opacity=min(max(1.0 - w.age(now) / max_age, 0.0), 1.0),
            )
            for w in self._registry
        )
        return ObservableState(
            wavefronts=views,
            source_pos=self.source_pos,
            source_vel=self.source_vel,
            observer_pos=self.observer_pos,
            observer_vel=self.observer_vel,
            emitted_signal=self._integrator.emitted.to_array(),
            observed_signal=self._integrator.observed.to_array(),
            emitted_frequency=self._emitted_frequency,
            observed_frequency=self._observed_frequency,
            shift=classify_shift(self._observed_frequency, self._emitted_frequency),
            simulation_time=now,
            is_paused=self._paused,
        )
