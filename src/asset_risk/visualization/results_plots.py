from __future__ import annotations

from pathlib import Path

import numpy as np
import pandas as pd
import matplotlib.pyplot as plt

from asset_risk.preprocessing.schema import Strategy
from asset_risk.simulation.lof import calculate_lof

STRATEGY_COLORS = {
    Strategy.NO_FIX: "#e11d48",
    Strategy.FIX_IN_PLAN: "#2563eb",
    Strategy.FIX_ON_FAIL: "#16a34a",
    Strategy.FIX_ON_RISK: "#f59e0b",
}


def _plot_strategy_lines(df: pd.DataFrame) -> None:
    for s in Strategy:
        plt.plot(df["t"], df[s.value], label=s.display_name, color=STRATEGY_COLORS[s])


def plot_cost_curves(df: pd.DataFrame, out_dir: Path) -> Path:
    """
    Cumulative cost per strategy over the lifespan.
    """
    plt.figure()
    _plot_strategy_lines(df)

    plt.xlabel("Time (years)")
    plt.ylabel("Cumulative cost")
    plt.title("Cumulative cost by strategy")
    plt.legend()
    plt.tight_layout()

    out_dir.mkdir(parents=True, exist_ok=True)
    out_path = out_dir / "cost_curves.png"
    plt.savefig(out_path)
    plt.close()
    return out_path


def plot_risk_curves(df: pd.DataFrame, threshold_dollar: float, out_dir: Path) -> Path:
    """
    Expected loss (LOF x COF) per strategy, with the Fix on Risk threshold.
    """
    plt.figure()
    _plot_strategy_lines(df)
    plt.axhline(threshold_dollar, linestyle="--", color="black", linewidth=1, label="Risk threshold")

    plt.xlabel("Time (years)")
    plt.ylabel("Expected loss")
    plt.title("Risk (LOF x COF) by strategy")
    plt.legend()
    plt.tight_layout()

    out_dir.mkdir(parents=True, exist_ok=True)
    out_path = out_dir / "risk_curves.png"
    plt.savefig(out_path)
    plt.close()
    return out_path


def plot_summary(summary: pd.DataFrame, out_dir: Path) -> Path:
    """
    Side-by-side bars of total cost and average risk per strategy.
    """
    idx = np.arange(len(summary))
    width = 0.4

    plt.figure()
    plt.bar(idx - width / 2, summary["total_cost"], width=width, label="Total cost")
    plt.bar(idx + width / 2, summary["average_risk"], width=width, label="Average risk")
    plt.xticks(idx, summary["name"])
    plt.ylabel("Amount")
    plt.title("Total cost vs average risk")
    plt.legend()
    plt.tight_layout()

    out_dir.mkdir(parents=True, exist_ok=True)
    out_path = out_dir / "summary.png"
    plt.savefig(out_path)
    plt.close()
    return out_path


def plot_lof_curve(
    risk_alpha: float,
    min_lof: float,
    out_dir: Path,
    failure_times=(),
    lifespan: float = 1.0,
    n: int = 200,
) -> Path:
    """
    No Fix LOF over normalized age, with failure times overlaid if given.
    """
    x = np.linspace(0.0, 1.0, n)
    lof = calculate_lof(x, risk_alpha, min_lof)

    plt.figure()
    plt.plot(x, lof, label="LOF (No Fix)")
    for t_fail in failure_times:
        plt.axvline(t_fail / lifespan, linestyle="--", linewidth=1, alpha=0.5)
    plt.xlabel("Normalized age")
    plt.ylabel("Likelihood of failure")
    plt.ylim(0.0, 1.0)
    plt.title("LOF curve with failure schedule overlay")
    plt.legend()
    plt.tight_layout()

    out_dir.mkdir(parents=True, exist_ok=True)
    out_path = out_dir / "lof_curve.png"
    plt.savefig(out_path)
    plt.close()
    return out_path
