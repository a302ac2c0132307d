import dataclasses

import pytest

from doppler_sim.engine.wavefront import Wavefront, WavefrontEmitter, WavefrontRegistry
from doppler_sim.kinematics import Point2, ZERO


def test_emitter_waits_for_a_full_interval():
    em = WavefrontEmitter()
    assert em.maybe_emit(0.25, 4.0, ZERO, ZERO, 0.0) is None
    wf = em.maybe_emit(0.26, 4.0, ZERO, ZERO, 1.5)
    assert wf is not None
    # the schedule stays on the 0.25 s grid even though the step landed late
    assert em.last_emission_time == 0.25
    assert wf.birth_time == 0.26
    assert wf.phase_at_emission == 1.5
    assert em.maybe_emit(0.4, 4.0, ZERO, ZERO, 0.0) is None


def test_emitted_wavefront_is_a_snapshot():
    em = WavefrontEmitter()
    pos = [10.0, 20.0]
    vel = [5.0, 0.0]
    wf = em.maybe_emit(1.0, 4.0, pos, vel, 0.0)
    pos[0] = 99.0
    vel[0] = -1.0
    assert wf.origin == Point2(10.0, 20.0)
    assert wf.source_velocity == Point2(5.0, 0.0)
    assert wf.emitted_frequency == 4.0


def test_registry_radius_tracks_age():
    reg = WavefrontRegistry(field_width=10000.0, field_height=10000.0)
    reg.add(Wavefront(ZERO, ZERO, 4.0, 0.0, birth_time=1.0))
    reg.advance(3.0, 343.0)
    (wf,) = list(reg)
    assert abs(reg.radius(wf) - 686.0) < 1e-9


def test_registry_expires_by_age():
    reg = WavefrontRegistry(field_width=1e6, field_height=1e6, max_age=10.0)
    reg.add(Wavefront(ZERO, ZERO, 4.0, 0.0, birth_time=0.0))
    reg.add(Wavefront(ZERO, ZERO, 4.0, 0.0, birth_time=5.0))
    dropped = reg.advance(10.5, 1.0)
    assert dropped == 1
    assert [w.birth_time for w in reg] == [5.0]


def test_registry_expires_by_field_diagonal():
    reg = WavefrontRegistry(field_width=30.0, field_height=40.0)
    reg.add(Wavefront(ZERO, ZERO, 4.0, 0.0, birth_time=0.0))
    reg.advance(0.1, 343.0)  # radius 34.3 < 50
    assert len(reg) == 1
    reg.advance(0.2, 343.0)  # radius 68.6 > 50
    assert len(reg) == 0


def test_registry_iteration_does_not_expose_storage():
    reg = WavefrontRegistry()
    reg.add(Wavefront(ZERO, ZERO, 4.0, 0.0, 0.0))
    waves = list(reg)
    waves.clear()
    snap = reg.snapshot()
    assert isinstance(snap, tuple)
    assert len(reg) == 1


def test_emitter_restarts_schedule_after_a_stall():
    em = WavefrontEmitter()
    wf = em.maybe_emit(1.0, 4.0, ZERO, ZERO, 0.0)
    assert wf is not None
    assert em.last_emission_time == 1.0
    assert em.maybe_emit(1.1, 4.0, ZERO, ZERO, 0.0) is None


def test_wavefront_fields_cannot_be_changed():
    wf = Wavefront(Point2(1.0, 2.0), ZERO, 4.0, 0.0, 0.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        wf.origin = Point2(0.0, 0.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        wf.emitted_frequency = 8.0
