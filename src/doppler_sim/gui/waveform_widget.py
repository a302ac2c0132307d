import numpy as np
import pyqtgraph as pg
from PyQt6 import QtWidgets

from doppler_sim.constants import AMPLITUDE


class WaveformWidget(QtWidgets.QWidget):
    """
    Scrolling amplitude trace:
    - newest sample on the right
    - fixed Y range of +/- amplitude so the two plots are comparable
    - frequency readout in the title
    """

    def __init__(self, title: str, color=(0, 0, 255), parent=None):
        super().__init__(parent)
        self.title = title

        self.plot = pg.PlotWidget()
        self.plot.setBackground((250, 250, 250))
        self.plot.showGrid(x=True, y=True, alpha=0.2)
        self.plot.setMouseEnabled(x=False, y=False)
        self.plot.hideButtons()

        self.curve = self.plot.plot(pen=pg.mkPen(color, width=2))

        layout = QtWidgets.QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(self.plot)

        lim = AMPLITUDE * 1.1
        self.plot.setYRange(-lim, lim, padding=0.0)
        self.plot.setLabel("left", "Amplitude")
        self.plot.setLabel("bottom", "Sample")
        self.plot.setTitle(title)

    def update_samples(self, samples: np.ndarray, freq_hz: float):
        y = np.asarray(samples, dtype=np.float64)
        self.curve.setData(np.arange(len(y)), y)
        self.plot.setXRange(0, max(len(y) - 1, 1), padding=0.0)
        self.plot.setTitle(f"{self.title}: {freq_hz:.2f} Hz")
