"""Run a preset scenario headless and print the observed frequency over time."""
import argparse

from doppler_sim.constants import TIME_STEP_MAX
from doppler_sim.engine import DopplerEngine
from doppler_sim.kinematics import Body
from doppler_sim.scenarios import SCENARIOS, apply_scenario


def main():
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("scenario", type=int, choices=sorted(SCENARIOS))
    parser.add_argument("--seconds", type=float, default=10.0)
    parser.add_argument("--report-every", type=float, default=0.5)
    args = parser.parse_args()

    engine = DopplerEngine()
    st = engine.get_observable_state()
    source = Body("source", st.source_pos)
    observer = Body("observer", st.observer_pos)
    scenario = apply_scenario(engine, source, observer, args.scenario)
    print(f"Scenario {args.scenario}: {scenario.title}")

    dt = TIME_STEP_MAX
    next_report = 0.0
    while engine.simulation_time < args.seconds:
        source.step(dt)
        observer.step(dt)
        engine.set_source_kinematics(source.pos, source.vel)
        engine.set_observer_kinematics(observer.pos, observer.vel)
        engine.update(dt)
        if engine.simulation_time >= next_report:
            st = engine.get_observable_state()
            print(f"t={st.simulation_time:6.2f}s  waves={len(st.wavefronts):3d}  "
                  f"observed={st.observed_frequency:7.4f} Hz  ({st.shift.value})")
            next_report += args.report_every


if __name__ == "__main__":
    main()
