from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Sequence, Tuple

from asset_risk.preprocessing.schema import CurvePoint, DashboardParams, InvalidParameterError, Strategy
from asset_risk.simulation.cost_curves import generate_cost_curves
from asset_risk.simulation.rng import DEFAULT_SEED, Mulberry32
from asset_risk.simulation.risk_curves import generate_risk_curves

COST_CURVE_ALPHA_FACTOR = 0.8


@dataclass(frozen=True)
class SimResult:
    cost: Tuple[CurvePoint, ...]
    risk: Tuple[CurvePoint, ...]
    total_costs: Mapping[Strategy, float]
    average_risk: Mapping[Strategy, float]
    threshold_dollar: float


def total_costs(cost_points: Sequence[CurvePoint]) -> Mapping[Strategy, float]:
    """Terminal cumulative cost per strategy."""
    if not cost_points:
        raise InvalidParameterError("cost curve is empty")
    last = cost_points[-1]
    return MappingProxyType({s: last.value(s) for s in Strategy})


def average_risk(risk_points: Sequence[CurvePoint]) -> Mapping[Strategy, float]:
    """Arithmetic mean of the risk curve per strategy."""
    if not risk_points:
        raise InvalidParameterError("risk curve is empty")
    n = len(risk_points)
    return MappingProxyType({
        s: sum(p.value(s) for p in risk_points) / n for s in Strategy
    })


def simulate(params: DashboardParams) -> SimResult:
    """
    Run the four strategies for one asset.

    Cost and risk curves each get their own generator seeded with DEFAULT_SEED,
    so both see the same failure times and repeated calls give identical output.
    """
    params.validate()

    lifespan = params.lifespan_years
    cof = params.replacement_cost
    cost_curve_alpha = params.risk_alpha * COST_CURVE_ALPHA_FACTOR

    cost = generate_cost_curves(
        lifespan=lifespan,
        cost_curve_alpha=cost_curve_alpha,
        replacement_cost=params.replacement_cost,
        cycle_length=params.cycle_length_years,
        points=params.points,
        rng=Mulberry32(DEFAULT_SEED),
    )
    risk = generate_risk_curves(
        lifespan=lifespan,
        risk_alpha=params.risk_alpha,
        min_lof=params.min_lof,
        cof=cof,
        cycle_length=params.cycle_length_years,
        threshold=params.threshold,
        points=params.points,
        rng=Mulberry32(DEFAULT_SEED),
    )

    return SimResult(
        cost=cost,
        risk=risk,
        total_costs=total_costs(cost),
        average_risk=average_risk(risk),
        threshold_dollar=params.threshold * cof,
    )
