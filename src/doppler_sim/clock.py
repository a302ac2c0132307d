"""Frame clock turning wall-clock frame times into simulation time steps."""
import time
from typing import Callable, Optional

from doppler_sim.constants import REAL_TIME_FACTOR, TIME_STEP_MAX


class FrameClock:
    """Scales elapsed wall time by `real_time_factor` and clamps it to `max_step`.

    The clamp keeps a stalled frame (window hidden, debugger break) from turning into
    one huge step that would skip emissions.
    """

    def __init__(self, real_time_factor: float = REAL_TIME_FACTOR, max_step: float = TIME_STEP_MAX,
                 time_source: Callable[[], float] = time.monotonic):
        self.real_time_factor = float(real_time_factor)
        self.max_step = float(max_step)
        self._time_source = time_source
        self._last: Optional[float] = None

    def restart(self) -> None:
        self._last = None

    def tick(self, now: Optional[float] = None) -> float:
        if now is None:
            now = self._time_source()
        if self._last is None:
            self._last = now
            return 0.0
        dt = (now - self._last) * self.real_time_factor
        self._last = now
        return min(max(dt, 0.0), self.max_step)
