from PyQt6 import QtWidgets, QtCore

from doppler_sim.clock import FrameClock
from doppler_sim.config import config_float, load_config, save_config
from doppler_sim.constants import (
    EMITTED_FREQ_STEP,
    REAL_TIME_FACTOR,
    SOUND_SPEED_STEP,
)
from doppler_sim.engine import DopplerEngine, EngineSettings, Shift
from doppler_sim.kinematics import Body
from doppler_sim.scenarios import SCENARIOS, apply_scenario

from .field_view import FieldView
from .waveform_widget import WaveformWidget

HELP_TEXT = (
    "Drag the source (red) or observer (green) with the mouse.\n"
    "S / O: select source / observer, arrow keys: move selection\n"
    "+ / -: emitted frequency, . / ,: speed of sound\n"
    "Space: pause, R: reset, 1-4: scenarios, H: toggle help"
)

_SCENARIO_KEYS = {
    QtCore.Qt.Key.Key_1: 1,
    QtCore.Qt.Key.Key_2: 2,
    QtCore.Qt.Key.Key_3: 3,
    QtCore.Qt.Key.Key_4: 4,
}

_ARROW_KEYS = (
    QtCore.Qt.Key.Key_Left,
    QtCore.Qt.Key.Key_Right,
    QtCore.Qt.Key.Key_Up,
    QtCore.Qt.Key.Key_Down,
)

_SHIFT_STYLE = {
    Shift.BLUESHIFT: ("Blueshift (approaching)", "color: rgb(0, 0, 255);"),
    Shift.REDSHIFT: ("Redshift (receding)", "color: rgb(255, 0, 0);"),
    Shift.NONE: ("No shift", "color: black;"),
}


class DopplerWindow(QtWidgets.QMainWindow):
    """
    Host for one DopplerEngine:
      - a QTimer drives the frame loop; FrameClock turns wall time into a clamped dt
      - Body objects own drag/scripted/keyboard motion and push kinematics to the engine
      - the engine's ObservableState is rendered into the field view and waveform plots
    """

    def __init__(self, config_path=None):
        super().__init__()
        self._config_path = config_path

        self.setWindowTitle("Doppler Effect Simulator")
        self.resize(1300, 800)

        # --- Settings (persisted) ---
        cfg = load_config(self._config_path)
        settings = EngineSettings.from_config(cfg)
        self.engine = DopplerEngine(settings)
        self.clock = FrameClock(real_time_factor=config_float(cfg, "real_time_factor", REAL_TIME_FACTOR))

        st = self.engine.get_observable_state()
        self.source = Body("source", st.source_pos)
        self.observer = Body("observer", st.observer_pos)
        self.selected = self.observer
        self._held_keys = set()

        central = QtWidgets.QWidget()
        central_layout = QtWidgets.QVBoxLayout(central)
        central_layout.setContentsMargins(2, 2, 2, 2)
        central_layout.setSpacing(4)

        splitter = QtWidgets.QSplitter(QtCore.Qt.Orientation.Horizontal)

        # left/center: field + waveforms
        left = QtWidgets.QWidget()
        left_layout = QtWidgets.QVBoxLayout(left)
        left_layout.setContentsMargins(0, 0, 0, 0)

        self.field = FieldView(settings.field_width, settings.field_height)
        self.field.pressed.connect(self._on_field_pressed)
        self.field.moved.connect(self._on_field_moved)
        self.field.released.connect(self._on_field_released)
        left_layout.addWidget(self.field, 3)

        waves = QtWidgets.QHBoxLayout()
        self.emitted_plot = WaveformWidget("Emitted", color=(255, 0, 0))
        self.observed_plot = WaveformWidget("Observed", color=(0, 128, 0))
        waves.addWidget(self.emitted_plot)
        waves.addWidget(self.observed_plot)
        left_layout.addLayout(waves, 1)
        splitter.addWidget(left)

        # right: controls
        controls = QtWidgets.QWidget()
        controls_layout = QtWidgets.QVBoxLayout(controls)
        controls_layout.setContentsMargins(6, 6, 6, 6)
        controls.setMinimumWidth(280)

        self.emitted_label = QtWidgets.QLabel()
        self.observed_label = QtWidgets.QLabel()
        self.interval_label = QtWidgets.QLabel()
        self.shift_label = QtWidgets.QLabel()
        self.sound_label = QtWidgets.QLabel()
        self.time_label = QtWidgets.QLabel()
        self.selected_label = QtWidgets.QLabel()
        for w in (self.emitted_label, self.interval_label, self.observed_label, self.shift_label,
                  self.sound_label, self.time_label, self.selected_label):
            controls_layout.addWidget(w)

        self.pause_btn = QtWidgets.QPushButton("Pause")
        self.pause_btn.setCheckable(True)
        self.pause_btn.toggled.connect(self._on_pause_toggled)
        controls_layout.addWidget(self.pause_btn)

        self.reset_btn = QtWidgets.QPushButton("Reset")
        self.reset_btn.clicked.connect(self.reset)
        controls_layout.addWidget(self.reset_btn)

        self.scenario_buttons = {}
        for number, scenario in SCENARIOS.items():
            btn = QtWidgets.QPushButton(f"{number}: {scenario.title}")
            btn.clicked.connect(lambda _checked=False, n=number: self.load_scenario(n))
            controls_layout.addWidget(btn)
            self.scenario_buttons[number] = btn

        self.help_label = QtWidgets.QLabel(HELP_TEXT)
        self.help_label.setWordWrap(True)
        controls_layout.addWidget(self.help_label)
        controls_layout.addStretch(1)
        splitter.addWidget(controls)

        splitter.setStretchFactor(0, 3)
        splitter.setStretchFactor(1, 0)
        central_layout.addWidget(splitter)
        self.setCentralWidget(central)

        self.setFocusPolicy(QtCore.Qt.FocusPolicy.StrongFocus)

        # frame timer
        self._timer = QtCore.QTimer(self)
        self._timer.setInterval(16)
        self._timer.timeout.connect(self._on_frame)
        self._timer.start()

        self.statusBar().showMessage("Running")
        self._render()

    # ---------------- frame loop ----------------

    def _on_frame(self):
        self.step(self.clock.tick())

    def step(self, dt: float):
        """Advance bodies and engine by `dt` and redraw."""
        if not self.engine.is_paused:
            self._apply_held_keys(dt)
            self.source.step(dt)
            self.observer.step(dt)
            self.engine.set_source_kinematics(self.source.pos, self.source.vel)
            self.engine.set_observer_kinematics(self.observer.pos, self.observer.vel)
        self.engine.update(dt)
        self._render()

    def _render(self):
        st = self.engine.get_observable_state()
        self.field.render_state(st)
        self.emitted_plot.update_samples(st.emitted_signal, st.emitted_frequency)
        self.observed_plot.update_samples(st.observed_signal, st.observed_frequency)

        text, style = _SHIFT_STYLE[st.shift]
        self.emitted_label.setText(f"Emitted freq.: {st.emitted_frequency:.2f} Hz")
        self.interval_label.setText(f"Wave interval: {1000.0 / st.emitted_frequency:.0f} ms")
        self.observed_label.setText(f"Observed freq.: {st.observed_frequency:.2f} Hz")
        self.shift_label.setText(text)
        self.shift_label.setStyleSheet(style)
        self.sound_label.setText(f"Speed of sound: {self.engine.sound_speed:.1f} m/s")
        self.time_label.setText(f"Time: {st.simulation_time:.2f} s")
        self.selected_label.setText(f"Selected: {self.selected.name}")

    # ---------------- commands ----------------

    def reset(self):
        self.engine.reset()
        st = self.engine.get_observable_state()
        self.source.place(st.source_pos)
        self.observer.place(st.observer_pos)
        self.pause_btn.setChecked(False)
        self.clock.restart()
        self.statusBar().showMessage("Reset")
        self._render()

    def load_scenario(self, number: int):
        scenario = apply_scenario(self.engine, self.source, self.observer, number)
        self.pause_btn.setChecked(False)
        self.clock.restart()
        self.statusBar().showMessage(f"Scenario {number}: {scenario.title}")
        self._render()

    def _on_pause_toggled(self, checked: bool):
        if checked != self.engine.is_paused:
            self.engine.toggle_pause()
        self.pause_btn.setText("Resume" if checked else "Pause")
        self.statusBar().showMessage("Paused" if checked else "Running")

    # ---------------- mouse ----------------

    def _on_field_pressed(self, point):
        if not self.source.grab(point):
            self.observer.grab(point)

    def _on_field_moved(self, point):
        self.source.drag_to(point)
        self.observer.drag_to(point)

    def _on_field_released(self, point):
        self.source.release()
        self.observer.release()

    # ---------------- keyboard ----------------

    def keyPressEvent(self, event):
        key = event.key()
        Key = QtCore.Qt.Key
        if key == Key.Key_Space:
            self.pause_btn.toggle()
        elif key == Key.Key_R:
            self.reset()
        elif key == Key.Key_S:
            self.selected = self.source
        elif key == Key.Key_O:
            self.selected = self.observer
        elif key == Key.Key_H:
            self.help_label.setVisible(not self.help_label.isVisible())
        elif key in _SCENARIO_KEYS:
            self.load_scenario(_SCENARIO_KEYS[key])
        elif key in (Key.Key_Plus, Key.Key_Equal):
            self.engine.set_emitted_frequency(self.engine.emitted_frequency + EMITTED_FREQ_STEP)
        elif key == Key.Key_Minus:
            f = max(EMITTED_FREQ_STEP, self.engine.emitted_frequency - EMITTED_FREQ_STEP)
            self.engine.set_emitted_frequency(f)
        elif key == Key.Key_Period:
            self.engine.set_sound_speed(self.engine.sound_speed + SOUND_SPEED_STEP)
        elif key == Key.Key_Comma:
            c = max(SOUND_SPEED_STEP, self.engine.sound_speed - SOUND_SPEED_STEP)
            self.engine.set_sound_speed(c)
        elif key in _ARROW_KEYS:
            self._held_keys.add(key)
        else:
            super().keyPressEvent(event)
            return
        self._render()

    def keyReleaseEvent(self, event):
        if not event.isAutoRepeat() and event.key() in self._held_keys:
            self._held_keys.discard(event.key())
            # arrow keys move at a fixed speed; letting go stops the body
            if not self._held_keys and not self.selected.is_dragging:
                self.selected.place(self.selected.pos)
        super().keyReleaseEvent(event)

    def _apply_held_keys(self, dt: float):
        if not self._held_keys:
            return
        Key = QtCore.Qt.Key
        dx = (Key.Key_Right in self._held_keys) - (Key.Key_Left in self._held_keys)
        dy = (Key.Key_Down in self._held_keys) - (Key.Key_Up in self._held_keys)
        self.selected.nudge(dx, dy, dt)

    # ---------------- persistence ----------------

    def closeEvent(self, event):
        self._timer.stop()
        cfg = load_config(self._config_path)
        cfg["emitted_frequency_hz"] = float(self.engine.emitted_frequency)
        cfg["sound_speed_m_s"] = float(self.engine.sound_speed)
        cfg["real_time_factor"] = float(self.clock.real_time_factor)
        save_config(cfg, self._config_path)
        super().closeEvent(event)
