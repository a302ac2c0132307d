from doppler_sim.constants import MOVE_STEP
from doppler_sim.kinematics import Body, Point2, ZERO, unit
from doppler_sim.kinematics.body import DRAGGING, IDLE, RELEASED, SCRIPTED


def test_unit_of_zero_vector_is_none():
    assert unit(ZERO) is None
    assert unit(Point2(0.0, 2.0)) == Point2(0.0, 1.0)


def test_grab_only_within_pick_radius():
    b = Body("source", Point2(100.0, 100.0))
    assert not b.grab(Point2(150.0, 100.0))
    assert b.mode == IDLE
    assert b.grab(Point2(105.0, 100.0))
    assert b.mode == DRAGGING


def test_drag_eases_toward_target_and_derives_velocity():
    b = Body("source", ZERO)
    assert b.grab(Point2(1.0, 0.0))
    b.drag_to(Point2(10.0, 0.0))
    b.step(0.1)
    assert abs(b.pos.x - 2.0) < 1e-9
    assert abs(b.vel.x - 20.0) < 1e-9


def test_release_coasts_and_decays_to_rest():
    b = Body("source", ZERO)
    b.grab(ZERO)
    b.drag_to(Point2(10.0, 0.0))
    b.step(0.1)
    b.release()
    assert b.mode == RELEASED
    b.step(0.01)  # one half-life
    assert abs(b.pos.x - 2.2) < 1e-9
    assert abs(b.vel.x - 10.0) < 1e-9
    for _ in range(50):
        b.step(0.01)
    assert b.vel == ZERO
    assert b.mode == IDLE


def test_scripted_motion_is_constant_velocity():
    b = Body("observer", ZERO)
    b.set_scripted_velocity(Point2(5.0, -1.0))
    assert b.mode == SCRIPTED
    b.step(2.0)
    assert abs(b.pos.x - 10.0) < 1e-9
    assert abs(b.pos.y + 2.0) < 1e-9
    assert b.vel == Point2(5.0, -1.0)


def test_nudge_moves_at_keyboard_speed():
    b = Body("observer", ZERO)
    b.nudge(1, -1, 0.5)
    assert b.vel == Point2(MOVE_STEP, -MOVE_STEP)
    assert abs(b.pos.x - MOVE_STEP * 0.5) < 1e-9
    assert abs(b.pos.y + MOVE_STEP * 0.5) < 1e-9


def test_step_with_zero_dt_is_noop():
    b = Body("source", ZERO)
    b.grab(ZERO)
    b.drag_to(Point2(10.0, 0.0))
    b.step(0.0)
    assert b.pos == ZERO
    assert b.vel == ZERO


def test_place_stops_motion():
    b = Body("source", ZERO)
    b.set_scripted_velocity(Point2(5.0, 0.0))
    b.place(Point2(3.0, 4.0))
    assert b.pos == Point2(3.0, 4.0)
    assert b.vel == ZERO
    assert b.mode == IDLE
