"""Phase accumulation and the scrolling amplitude buffers shown in the waveform plots."""
import math
from collections import deque

import numpy as np

from doppler_sim.constants import AMPLITUDE, HISTORY_LENGTH

TWO_PI = 2.0 * math.pi


class SignalHistory:
    """Fixed-length FIFO of amplitude samples; appending drops the oldest."""

    def __init__(self, length: int = HISTORY_LENGTH):
        self.length = int(length)
        self._samples = deque([0.0] * self.length, maxlen=self.length)

    def __len__(self) -> int:
        return len(self._samples)

    def append(self, value: float) -> None:
        self._samples.append(float(value))

    def clear(self) -> None:
        self._samples.extend([0.0] * self.length)

    def latest(self) -> float:
        return self._samples[-1]

    def to_array(self) -> np.ndarray:
        arr = np.fromiter(self._samples, dtype=np.float64, count=self.length)
        arr.flags.writeable = False
        return arr


class PhaseIntegrator:
    """Accumulates emitted and observed phase and samples them into histories.

    The accumulators are never wrapped; reduction modulo 2*pi happens only when a
    sample is taken.
    """

    def __init__(self, history_length: int = HISTORY_LENGTH, amplitude: float = AMPLITUDE):
        self.amplitude = float(amplitude)
        self.emitted_phase = 0.0
        self.observed_phase = 0.0
        self.emitted = SignalHistory(history_length)
        self.observed = SignalHistory(history_length)

    def reset(self) -> None:
        self.emitted_phase = 0.0
        self.observed_phase = 0.0
        self.emitted.clear()
        self.observed.clear()

    def advance_emitted(self, emitted_hz: float, dt: float) -> None:
        self.emitted_phase += emitted_hz * dt * TWO_PI

    def sample(self, silent: bool) -> None:
        self.emitted.append(self._amplitude_at(self.emitted_phase))
        self.observed.append(0.0 if silent else self._amplitude_at(self.observed_phase))

    def _amplitude_at(self, phase: float) -> float:
        return math.sin(math.fmod(phase, TWO_PI)) * self.amplitude
