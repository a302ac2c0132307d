"""Plan view of the simulation field: wavefront circles, source, observer, velocity arrows."""
import numpy as np
import pyqtgraph as pg
from PyQt6 import QtCore

from doppler_sim.constants import FIELD_HEIGHT, FIELD_WIDTH
from doppler_sim.kinematics import Point2

SOURCE_COLOR = (255, 0, 0)
OBSERVER_COLOR = (0, 128, 0)
WAVE_COLOR = (0, 0, 255)
LINE_COLOR = (100, 100, 100)
WAVE_OPACITY_MAX = 150
VECTOR_SCALE = 5.0  # arrow length in m per m/s
MARKER_SIZE = 20

_THETA = np.linspace(0.0, 2.0 * np.pi, 97)
_COS = np.cos(_THETA)
_SIN = np.sin(_THETA)


class FieldView(pg.PlotWidget):
    """Renders an ObservableState and reports mouse interaction in field meters."""

    pressed = QtCore.pyqtSignal(object)
    moved = QtCore.pyqtSignal(object)
    released = QtCore.pyqtSignal(object)

    def __init__(self, width: float = FIELD_WIDTH, height: float = FIELD_HEIGHT, parent=None):
        super().__init__(parent)
        self.setBackground((240, 240, 240))
        self.setAspectLocked(True)
        self.setMouseEnabled(x=False, y=False)
        self.hideButtons()
        self.getViewBox().invertY(True)  # screen convention: y grows downward
        self.setXRange(0.0, width, padding=0.0)
        self.setYRange(0.0, height, padding=0.0)
        self.setLabel("bottom", "x", units="m")
        self.setLabel("left", "y", units="m")

        self._wave_items = []

        self.los_line = self.plot([], [], pen=pg.mkPen(LINE_COLOR, width=1))
        self.source_arrow = self.plot([], [], pen=pg.mkPen(SOURCE_COLOR, width=2), connect="finite")
        self.observer_arrow = self.plot([], [], pen=pg.mkPen(OBSERVER_COLOR, width=2), connect="finite")
        self.markers = pg.ScatterPlotItem(size=MARKER_SIZE, pen=pg.mkPen(None))
        self.addItem(self.markers)

    # ---------------- rendering ----------------

    def _wave_item(self, i: int) -> pg.PlotCurveItem:
        while len(self._wave_items) <= i:
            item = pg.PlotCurveItem()
            self.addItem(item)
            self._wave_items.append(item)
        return self._wave_items[i]

    def render_state(self, state) -> None:
        for i, w in enumerate(state.wavefronts):
            item = self._wave_item(i)
            alpha = int(WAVE_OPACITY_MAX * w.opacity)
            item.setPen(pg.mkPen((*WAVE_COLOR, alpha), width=2))
            item.setData(w.origin.x + w.radius * _COS, w.origin.y + w.radius * _SIN)
            item.setVisible(True)
        for item in self._wave_items[len(state.wavefronts):]:
            item.setVisible(False)

        sp, op = state.source_pos, state.observer_pos
        self.los_line.setData([sp.x, op.x], [sp.y, op.y])
        self.source_arrow.setData(*_arrow(sp, state.source_vel))
        self.observer_arrow.setData(*_arrow(op, state.observer_vel))
        self.markers.setData(
            [sp.x, op.x], [sp.y, op.y],
            brush=[pg.mkBrush(SOURCE_COLOR), pg.mkBrush(OBSERVER_COLOR)],
        )

    # ---------------- mouse ----------------

    def _to_field(self, event) -> Point2:
        scene_pt = self.mapToScene(event.position().toPoint())
        p = self.getViewBox().mapSceneToView(scene_pt)
        return Point2(p.x(), p.y())

    def mousePressEvent(self, event):
        if event.button() == QtCore.Qt.MouseButton.LeftButton:
            self.pressed.emit(self._to_field(event))
        event.accept()

    def mouseMoveEvent(self, event):
        self.moved.emit(self._to_field(event))
        event.accept()

    def mouseReleaseEvent(self, event):
        if event.button() == QtCore.Qt.MouseButton.LeftButton:
            self.released.emit(self._to_field(event))
        event.accept()


def _arrow(pos: Point2, vel: Point2):
    """Line from `pos` along `vel` with a small two-stroke head; NaN separates strokes."""
    tip_x = pos.x + vel.x * VECTOR_SCALE
    tip_y = pos.y + vel.y * VECTOR_SCALE
    length = np.hypot(tip_x - pos.x, tip_y - pos.y)
    if length < 1e-6:
        return [], []
    ux, uy = (tip_x - pos.x) / length, (tip_y - pos.y) / length
    head = min(10.0, length / 2.0)
    lx = tip_x - head * (ux + 0.5 * uy)
    ly = tip_y - head * (uy - 0.5 * ux)
    rx = tip_x - head * (ux - 0.5 * uy)
    ry = tip_y - head * (uy + 0.5 * ux)
    xs = [pos.x, tip_x, np.nan, lx, tip_x, rx]
    ys = [pos.y, tip_y, np.nan, ly, tip_y, ry]
    return np.array(xs), np.array(ys)
