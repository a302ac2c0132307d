"""Preset motion scenarios (keys 1-4 in the GUI)."""
import logging
from typing import Dict, NamedTuple

from doppler_sim.kinematics import Body, Point2, ZERO

logger = logging.getLogger(__name__)


class Scenario(NamedTuple):
    title: str
    source_vel: Point2
    observer_vel: Point2


SCENARIOS: Dict[int, Scenario] = {
    1: Scenario("Source approaching observer", Point2(5.0, 0.0), ZERO),
    2: Scenario("Observer approaching source", ZERO, Point2(-5.0, 0.0)),
    3: Scenario("Source and observer receding", Point2(-5.0, 0.0), Point2(5.0, 0.0)),
    4: Scenario("Perpendicular motion", Point2(0.0, 3.0), Point2(0.0, -3.0)),
}


def apply_scenario(engine, source: Body, observer: Body, number: int) -> Scenario:
    """Reset `engine` and start the preset's scripted motion on both bodies.

    Bodies are placed at the engine's initial positions so that the scenario always
    starts from the default layout (source left, observer right).
    """
    try:
        scenario = SCENARIOS[number]
    except KeyError:
        raise ValueError(f"Unknown scenario {number}; expected one of {sorted(SCENARIOS)}") from None

    engine.reset()
    st = engine.get_observable_state()
    source.place(st.source_pos)
    observer.place(st.observer_pos)
    if scenario.source_vel != ZERO:
        source.set_scripted_velocity(scenario.source_vel)
    if scenario.observer_vel != ZERO:
        observer.set_scripted_velocity(scenario.observer_vel)
    engine.set_source_kinematics(source.pos, source.vel)
    engine.set_observer_kinematics(observer.pos, observer.vel)
    logger.info(f"Scenario {number}: {scenario.title}")
    return scenario
