"""Wave-propagation and frequency-reconstruction engine."""

from .wavefront import Wavefront, WavefrontEmitter, WavefrontRegistry
from .arrival import Arrival, detect_arrival
from .doppler import Shift, apparent_frequency, doppler_frequency, resolve
from .signal import PhaseIntegrator, SignalHistory
from .simulation import DopplerEngine, EngineSettings, ObservableState, WavefrontView

__all__ = [
    "Wavefront",
    "WavefrontEmitter",
    "WavefrontRegistry",
    "Arrival",
    "detect_arrival",
    "Shift",
    "apparent_frequency",
    "doppler_frequency",
    "resolve",
    "PhaseIntegrator",
    "SignalHistory",
    "DopplerEngine",
    "EngineSettings",
    "ObservableState",
    "WavefrontView",
]
