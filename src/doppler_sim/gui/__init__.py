"""GUI package for the Doppler simulator.

Note: widgets are not imported at package import time so the simulation core and
its tests do not need a display. Import them explicitly where needed, e.g.:

	from doppler_sim.gui.main_window import DopplerWindow

"""

__all__ = []
