import sys
from pathlib import Path

import matplotlib

matplotlib.use("Agg")

from asset_risk.preprocessing.loaders import load_scenario
from asset_risk.simulation.rng import DEFAULT_SEED, Mulberry32
from asset_risk.simulation.schedules import (
    CYCLE_COST_FRACTION,
    cycle_schedule,
    failure_schedule,
    intervention_schedule,
)
from asset_risk.visualization.results_plots import plot_lof_curve


def main() -> None:
    if len(sys.argv) > 1:
        scenario_path = Path(sys.argv[1]).resolve()
    else:
        scenario_path = Path("data/scenario.json").resolve()
    params = load_scenario(scenario_path)

    out_dir = Path("outputs/scenario_analysis")
    out_dir.mkdir(parents=True, exist_ok=True)

    lifespan = params.lifespan_years
    cost = params.replacement_cost

    print("\n=== SCENARIO OVERVIEW ===")
    print(f"Lifespan (years): {lifespan}")
    print(f"Replacement cost / COF: {cost:,.0f}")
    print(f"Samples: {params.points}")

    # --------------------------------------------------
    # Fix on Fail: failure schedule
    # --------------------------------------------------
    failures = failure_schedule(Mulberry32(DEFAULT_SEED), lifespan, cost)

    print(f"\nFailure schedule (seed={DEFAULT_SEED}):")
    for i, event in enumerate(failures, start=1):
        print(f"  #{i}: t = {event.time:6.2f} y | repair = {event.repair_cost:,.0f}")
    print(f"  total repairs = {sum(e.repair_cost for e in failures):,.0f}")

    # --------------------------------------------------
    # Fix on Risk: interventions
    # --------------------------------------------------
    interventions = intervention_schedule(lifespan, cost)

    print("\nRisk-driven interventions:")
    for intervention in interventions:
        print(f"  t = {intervention.time:6.2f} y | cost = {intervention.cost:,.0f}")

    # --------------------------------------------------
    # Fix in Plan: maintenance cycles
    # --------------------------------------------------
    cycles = cycle_schedule(lifespan, params.cycle_length_years)

    print("\nPlanned maintenance:")
    print(f"  cycle length = {params.cycle_length_years} years")
    print(f"  number of cycles = {len(cycles)}")
    print(f"  cost per cycle = {CYCLE_COST_FRACTION * cost:,.0f}")

    # --------------------------------------------------
    # LOF curve + failure overlay
    # --------------------------------------------------
    print("\nLOF model (logistic, midpoint 0.7):")
    print(f"  alpha = {params.risk_alpha}")
    print(f"  min LOF = {params.min_lof}")

    path = plot_lof_curve(
        params.risk_alpha,
        params.min_lof,
        out_dir,
        failure_times=[e.time for e in failures],
        lifespan=lifespan,
    )
    print(f"\nSaved plot: {path.resolve()}")


if __name__ == "__main__":
    main()
