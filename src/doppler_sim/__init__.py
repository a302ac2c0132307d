"""Doppler effect simulation for a point source and a point observer in 2D.

The simulation core lives in :mod:`doppler_sim.engine`. GUI widgets are imported
explicitly from :mod:`doppler_sim.gui` so the core stays importable without Qt.
"""

from doppler_sim.engine import DopplerEngine, EngineSettings, ObservableState
from doppler_sim.kinematics import Point2

__all__ = ["DopplerEngine", "EngineSettings", "ObservableState", "Point2"]
