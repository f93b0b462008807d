from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List

from asset_risk.simulation.rng import Mulberry32

# Fix on Fail
FAILURE_WINDOW_START = 0.3
FAILURE_OFFSET = 0.05
FAILURE_WINDOW_SPAN = 0.7
REPAIR_FRACTION_RANGE = (0.3, 0.5)

# Fix on Risk
N_INTERVENTIONS = 4
INTERVENTION_STEP = 0.15
INTERVENTION_COST_FRACTION = 0.2

# Fix in Plan
CYCLE_COST_FRACTION = 0.15


@dataclass(frozen=True)
class FailureEvent:
    time: float
    repair_cost: float


@dataclass(frozen=True)
class Intervention:
    time: float
    cost: float


def n_failures(horizon_fraction: float = 1.0) -> int:
    """Number of failure events over the horizon: max(3, floor(2 + 3 * h^2)), h = 1 today."""
    return max(3, int(math.floor(2 + 3 * horizon_fraction ** 2)))


def failure_schedule(
        rng: Mulberry32,
        lifespan: float,
        replacement_cost: float,
) -> List[FailureEvent]:
    """
    Failures spread over [0.3T, T], later in life on average.

    For failure i (1-based) of N:
      position = clamp(0.3 + (i/N)*0.7 + U(-0.05, 0.05), 0.3, 1)
      repair   = U(0.3, 0.5) * replacement_cost
    Two draws per failure: offset first, then repair fraction.
    """
    n = n_failures()
    events: List[FailureEvent] = []
    for i in range(1, n + 1):
        base_position = FAILURE_WINDOW_START + (i / n) * FAILURE_WINDOW_SPAN
        offset = rng.uniform(-FAILURE_OFFSET, FAILURE_OFFSET)
        position = min(1.0, max(FAILURE_WINDOW_START, base_position + offset))

        repair_fraction = rng.uniform(*REPAIR_FRACTION_RANGE)
        events.append(FailureEvent(
            time=position * lifespan,
            repair_cost=repair_fraction * replacement_cost,
        ))
    return events


def intervention_schedule(lifespan: float, replacement_cost: float) -> List[Intervention]:
    """Fix on Risk interventions at (0.3 + k*0.15) * T, k = 1..4, capped at T."""
    cost = INTERVENTION_COST_FRACTION * replacement_cost
    return [
        Intervention(time=min(FAILURE_WINDOW_START + k * INTERVENTION_STEP, 1.0) * lifespan, cost=cost)
        for k in range(1, N_INTERVENTIONS + 1)
    ]


def cycle_schedule(lifespan: float, cycle_length: float) -> List[float]:
    """Fix in Plan cycle boundaries, one per completed cycle: c * cycle_length, c = 1..floor(T/cycle)."""
    n_cycles = int(math.floor(lifespan / cycle_length))
    return [c * cycle_length for c in range(1, n_cycles + 1)]
