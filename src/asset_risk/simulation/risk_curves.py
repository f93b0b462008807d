from __future__ import annotations

import math
from typing import NamedTuple, Optional, Sequence, Tuple

from asset_risk.preprocessing.schema import CurvePoint
from asset_risk.simulation.lof import calculate_lof, logistic_curve
from asset_risk.simulation.rng import DEFAULT_SEED, Mulberry32
from asset_risk.simulation.schedules import failure_schedule

# Fix in Plan
PLAN_PEAK_LOF = 0.3
PLAN_PEAK_AGING = 0.5

# Fix on Fail
FAIL_LOF_CEILING = 0.9
FAIL_LOF_CAP = 0.999
FAIL_MIDPOINT = 0.6

# Fix on Risk
RISK_RESET_FACTOR = 1.5
RISK_GROWTH = 0.001


class FailState(NamedTuple):
    """Fix on Fail carry: next failure to pass and the time of the last one passed."""
    index: int = 0
    last_failure_time: float = 0.0


def fix_in_plan_lof(t: float, x: float, cycle_length: float, min_lof: float) -> float:
    """
    LOF oscillates within each maintenance cycle, peaking mid-cycle.
    The peak drifts up by 50% over the lifespan.
    """
    cycle_position = math.fmod(t, cycle_length) / cycle_length
    wave = (1.0 - math.cos(2.0 * math.pi * cycle_position)) / 2.0
    peak_lof = min_lof + (PLAN_PEAK_LOF - min_lof) * (1.0 + PLAN_PEAK_AGING * x)
    return min_lof + (peak_lof - min_lof) * wave


def fix_on_fail_step(
        state: FailState,
        t: float,
        failure_times: Sequence[float],
        lifespan: float,
        risk_alpha: float,
        min_lof: float,
) -> Tuple[FailState, float]:
    """
    Advance the reactive pattern to time t. Must be called in time order.

    LOF restarts from the baseline after every failure passed and grows along a
    logistic towards 0.9 until the next failure (or end of life).
    """
    baseline_lof = min_lof * 2.0
    lof = baseline_lof

    index, last_failure_time = state
    while index < len(failure_times) and t > failure_times[index]:
        last_failure_time = failure_times[index]
        index += 1
        lof = baseline_lof * 2.0

    next_failure_time = failure_times[index] if index < len(failure_times) else lifespan

    if t < next_failure_time:
        span = next_failure_time - last_failure_time
        progress = (t - last_failure_time) / span if span != 0 else 0.0
        growth = baseline_lof + (FAIL_LOF_CEILING - baseline_lof) * float(
            logistic_curve(progress, 2.0 * risk_alpha, FAIL_MIDPOINT)
        )
        lof = min(growth, FAIL_LOF_CAP)
    elif t == next_failure_time:
        lof = 1.0

    return FailState(index, last_failure_time), lof


def fix_on_risk_step(current_lof: float, x: float, risk_alpha: float, min_lof: float, threshold: float) -> float:
    """Grow LOF; once it reaches the threshold, intervene and reset it. Returns the recorded LOF."""
    current_lof += RISK_GROWTH * risk_alpha * (1.0 + 2.0 * x)
    if current_lof >= threshold:
        current_lof = min_lof * RISK_RESET_FACTOR
    return current_lof


def generate_risk_curves(
        lifespan: float,
        risk_alpha: float,
        min_lof: float,
        cof: float,
        cycle_length: float,
        threshold: float,
        points: int,
        rng: Optional[Mulberry32] = None,
) -> Tuple[CurvePoint, ...]:
    """
    Expected loss (LOF * COF) per strategy at `points` evenly spaced times over [0, T].

    Strategies:
      - No Fix:      LOF follows the aging S-curve
      - Fix in Plan: LOF oscillates within each maintenance cycle
      - Fix on Fail: LOF grows until a failure, then restarts
      - Fix on Risk: LOF sawtooth, reset whenever it reaches the threshold

    The failure schedule is drawn with its own generator, so failure times are
    the same as the ones priced by the cost curves.
    """
    if rng is None:
        rng = Mulberry32(DEFAULT_SEED)

    failure_times = sorted(event.time for event in failure_schedule(rng, lifespan, cof))

    fail_state = FailState()
    risk_lof = min_lof * RISK_RESET_FACTOR

    result = []
    for i in range(points):
        x = i / (points - 1)
        t = x * lifespan

        lof_no_fix = float(calculate_lof(x, risk_alpha, min_lof))
        lof_fix_in_plan = fix_in_plan_lof(t, x, cycle_length, min_lof)
        fail_state, lof_fix_on_fail = fix_on_fail_step(
            fail_state, t, failure_times, lifespan, risk_alpha, min_lof
        )
        risk_lof = fix_on_risk_step(risk_lof, x, risk_alpha, min_lof, threshold)

        result.append(CurvePoint(
            t=t,
            x=x,
            no_fix=lof_no_fix * cof,
            fix_in_plan=lof_fix_in_plan * cof,
            fix_on_fail=lof_fix_on_fail * cof,
            fix_on_risk=risk_lof * cof,
        ))

    return tuple(result)
