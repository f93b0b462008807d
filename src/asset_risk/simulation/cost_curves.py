from __future__ import annotations

from typing import Optional, Tuple

from asset_risk.preprocessing.schema import CurvePoint
from asset_risk.simulation.rng import DEFAULT_SEED, Mulberry32
from asset_risk.simulation.schedules import (
    CYCLE_COST_FRACTION,
    cycle_schedule,
    failure_schedule,
    intervention_schedule,
)

# Baseline upkeep over the full lifespan, as a fraction of replacement cost
BASELINE_NO_FIX = 0.05
BASELINE_FIX_IN_PLAN = 0.02
BASELINE_FIX_ON_FAIL = 0.01
BASELINE_FIX_ON_RISK = 0.02

CATASTROPHIC_FAILURE_AT = 0.9


def generate_cost_curves(
        lifespan: float,
        cost_curve_alpha: float,
        replacement_cost: float,
        cycle_length: float,
        points: int,
        rng: Optional[Mulberry32] = None,
) -> Tuple[CurvePoint, ...]:
    """
    Cumulative cost per strategy at `points` evenly spaced times over [0, T].

    Strategies:
      - No Fix:      small upkeep, full replacement once t >= 0.9T
      - Fix in Plan: upkeep + 15% of replacement per completed cycle
      - Fix on Fail: minimal upkeep + emergency repair at each failure
      - Fix on Risk: monitoring + 20% of replacement per intervention

    Failure and intervention schedules are drawn once up front; each sample is
    then recomputed in closed form from them.

    cost_curve_alpha has no effect on the cost model.
    """
    if rng is None:
        rng = Mulberry32(DEFAULT_SEED)

    failures = failure_schedule(rng, lifespan, replacement_cost)
    interventions = intervention_schedule(lifespan, replacement_cost)
    cycles = cycle_schedule(lifespan, cycle_length)
    cycle_cost = CYCLE_COST_FRACTION * replacement_cost

    rate_no_fix = BASELINE_NO_FIX * replacement_cost
    rate_fix_in_plan = BASELINE_FIX_IN_PLAN * replacement_cost
    rate_fix_on_fail = BASELINE_FIX_ON_FAIL * replacement_cost
    rate_fix_on_risk = BASELINE_FIX_ON_RISK * replacement_cost

    result = []
    for i in range(points):
        x = i / (points - 1)
        t = x * lifespan

        # No Fix
        catastrophic = replacement_cost if t >= CATASTROPHIC_FAILURE_AT * lifespan else 0.0
        no_fix = rate_no_fix * t / lifespan + catastrophic

        # Fix in Plan
        planned = 0.0
        for t_cycle in cycles:
            if t >= t_cycle:
                planned += cycle_cost
        fix_in_plan = rate_fix_in_plan * t / lifespan + planned

        # Fix on Fail
        emergency = 0.0
        for event in failures:
            if t >= event.time:
                emergency += event.repair_cost
        fix_on_fail = rate_fix_on_fail * t / lifespan + emergency

        # Fix on Risk
        intervened = 0.0
        for intervention in interventions:
            if t >= intervention.time:
                intervened += intervention.cost
        fix_on_risk = rate_fix_on_risk * t / lifespan + intervened

        result.append(CurvePoint(
            t=t,
            x=x,
            no_fix=no_fix,
            fix_in_plan=fix_in_plan,
            fix_on_fail=fix_on_fail,
            fix_on_risk=fix_on_risk,
        ))

    return tuple(result)
