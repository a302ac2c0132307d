import pytest

from doppler_sim.engine import DopplerEngine, Shift
from doppler_sim.kinematics import Body, Point2, ZERO
from doppler_sim.scenarios import apply_scenario

C = 343.0
F = 4.0


def _setup():
    engine = DopplerEngine()
    st = engine.get_observable_state()
    return engine, Body("source", st.source_pos), Body("observer", st.observer_pos)


def _run(engine, source, observer, seconds, dt=0.01):
    for _ in range(int(round(seconds / dt))):
        source.step(dt)
        observer.step(dt)
        engine.set_source_kinematics(source.pos, source.vel)
        engine.set_observer_kinematics(observer.pos, observer.vel)
        engine.update(dt)


def test_scenario_1_source_approaching():
    engine, source, observer = _setup()
    apply_scenario(engine, source, observer, 1)
    assert engine.get_observable_state().source_vel == Point2(5.0, 0.0)
    _run(engine, source, observer, 3.0)
    st = engine.get_observable_state()
    assert st.shift is Shift.BLUESHIFT
    assert abs(st.observed_frequency - F * C / (C - 5.0)) < 1e-9
    assert st.source_pos.x > 200.0


def test_scenario_2_observer_approaching():
    engine, source, observer = _setup()
    apply_scenario(engine, source, observer, 2)
    _run(engine, source, observer, 3.0)
    st = engine.get_observable_state()
    assert st.shift is Shift.BLUESHIFT
    assert abs(st.observed_frequency - F * (C + 5.0) / C) < 1e-9


def test_scenario_3_receding():
    engine, source, observer = _setup()
    apply_scenario(engine, source, observer, 3)
    _run(engine, source, observer, 3.0)
    assert engine.get_observable_state().shift is Shift.REDSHIFT


def test_scenario_resets_engine_and_bodies():
    engine, source, observer = _setup()
    engine.set_emitted_frequency(9.0)
    source.place(Point2(10.0, 10.0))
    _run(engine, source, observer, 0.5)
    apply_scenario(engine, source, observer, 4)
    st = engine.get_observable_state()
    assert st.simulation_time == 0.0
    assert st.wavefronts == ()
    assert st.emitted_frequency == F
    assert source.pos == Point2(200.0, 300.0)
    assert observer.vel == Point2(0.0, -3.0)


def test_unknown_scenario_raises():
    engine, source, observer = _setup()
    with pytest.raises(ValueError):
        apply_scenario(engine, source, observer, 9)
    assert source.vel == ZERO
