import json

import pytest

# Skip GUI tests if PyQt6 is not available
pytest.importorskip("PyQt6")
pytest.importorskip("pyqtgraph")
from PyQt6 import QtCore

from doppler_sim.kinematics import Point2


@pytest.fixture
def window(qtbot, tmp_path):
    from doppler_sim.gui.main_window import DopplerWindow
    mw = DopplerWindow(config_path=str(tmp_path / "cfg.json"))
    qtbot.addWidget(mw)
    mw._timer.stop()
    return mw


def test_step_advances_engine_and_plots(window):
    for _ in range(40):
        window.step(0.05)
    assert abs(window.engine.simulation_time - 2.0) < 1e-9
    assert "Hz" in window.observed_label.text()
    assert len(window.engine.wavefronts) > 0


def test_space_toggles_pause(window, qtbot):
    window.step(0.05)
    qtbot.keyClick(window, QtCore.Qt.Key.Key_Space)
    assert window.engine.is_paused
    t = window.engine.simulation_time
    window.step(0.05)
    assert window.engine.simulation_time == t
    qtbot.keyClick(window, QtCore.Qt.Key.Key_Space)
    assert not window.engine.is_paused


def test_number_key_loads_scenario(window, qtbot):
    qtbot.keyClick(window, QtCore.Qt.Key.Key_1)
    assert window.source.vel.x == 5.0
    assert window.engine.simulation_time == 0.0


def test_frequency_and_sound_speed_keys(window, qtbot):
    f = window.engine.emitted_frequency
    c = window.engine.sound_speed
    qtbot.keyClick(window, QtCore.Qt.Key.Key_Plus)
    qtbot.keyClick(window, QtCore.Qt.Key.Key_Comma)
    assert abs(window.engine.emitted_frequency - (f + 0.01)) < 1e-9
    assert window.engine.sound_speed == c - 1.0


def test_drag_moves_source(window):
    start = window.source.pos
    window._on_field_pressed(start)
    window._on_field_moved(Point2(start.x + 100.0, start.y))
    window.step(0.05)
    assert window.source.pos.x > start.x
    assert window.engine.get_observable_state().source_vel.x > 0.0
    window._on_field_released(window.source.pos)
    assert not window.source.is_dragging


def test_reset_button_restores_layout(window):
    window.load_scenario(1)
    for _ in range(10):
        window.step(0.05)
    window.reset_btn.click()
    st = window.engine.get_observable_state()
    assert st.simulation_time == 0.0
    assert window.source.pos == st.source_pos


def test_close_persists_settings(window, tmp_path):
    window.engine.set_emitted_frequency(5.0)
    window.close()
    cfg = json.loads((tmp_path / "cfg.json").read_text())
    assert cfg["emitted_frequency_hz"] == 5.0
    assert cfg["sound_speed_m_s"] == window.engine.sound_speed


def test_interval_label_shows_emission_period(window):
    window.step(0.05)
    assert "Wave interval: 250 ms" in window.interval_label.text()
    window.engine.set_emitted_frequency(5.0)
    window.step(0.05)
    assert "200 ms" in window.interval_label.text()


def test_window_starts_with_non_numeric_config(qtbot, tmp_path):
    from doppler_sim.gui.main_window import DopplerWindow
    path = tmp_path / "cfg.json"
    path.write_text(json.dumps({"emitted_frequency_hz": "fast", "real_time_factor": "x"}))
    mw = DopplerWindow(config_path=str(path))
    qtbot.addWidget(mw)
    mw._timer.stop()
    assert mw.engine.emitted_frequency == 4.0
    mw.step(0.05)
    assert mw.engine.simulation_time > 0.0
