from __future__ import annotations

from typing import Sequence

import pandas as pd

from asset_risk.preprocessing.schema import CurvePoint, Strategy
from asset_risk.simulation.simulator import SimResult


def recommend_strategy(result: SimResult) -> Strategy:
    """
    Strategy with the lowest total cost + average risk.
    Ties go to the first strategy in declaration order.
    """
    best = None
    best_score = float("inf")
    for s in Strategy:
        score = result.total_costs[s] + result.average_risk[s]
        if score < best_score:
            best_score = score
            best = s
    if best is None:
        # every score is NaN or +inf
        best = next(iter(Strategy))
    return best


def curves_to_frame(points: Sequence[CurvePoint]) -> pd.DataFrame:
    """One row per sample: t, x and one column per strategy key."""
    rows = []
    for p in points:
        row = {"t": p.t, "x": p.x}
        for s in Strategy:
            row[s.value] = p.value(s)
        rows.append(row)
    return pd.DataFrame(rows, columns=["t", "x"] + [s.value for s in Strategy])


def summarize(result: SimResult) -> pd.DataFrame:
    rows = []
    for s in Strategy:
        total_cost = float(result.total_costs[s])
        avg_risk = float(result.average_risk[s])
        rows.append({
            "strategy": s.value,
            "name": s.display_name,
            "total_cost": total_cost,
            "average_risk": avg_risk,
            "score": total_cost + avg_risk,
            "threshold_dollar": float(result.threshold_dollar),
        })
    return pd.DataFrame(rows)
