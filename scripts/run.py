from __future__ import annotations

import sys
from pathlib import Path

import matplotlib
import pandas as pd

matplotlib.use("Agg")

from asset_risk.preprocessing.loaders import load_scenario
from asset_risk.simulation.simulator import simulate
from asset_risk.utils.reporting import curves_to_frame, recommend_strategy, summarize
from asset_risk.visualization.results_plots import (
    plot_cost_curves,
    plot_risk_curves,
    plot_summary,
)

plots_dir = Path("outputs/results_plots")


def main() -> None:
    if len(sys.argv) > 1:
        scenario_path = Path(sys.argv[1]).resolve()
    else:
        scenario_path = Path("data/scenario.json").resolve()
    params = load_scenario(scenario_path)

    result = simulate(params)

    cost_df = curves_to_frame(result.cost)
    risk_df = curves_to_frame(result.risk)
    summary = summarize(result)

    # Print summary
    pd.set_option("display.width", 120)
    pd.set_option("display.max_columns", 50)
    print("\n=== Summary ===")
    print(f"Scenario: {scenario_path}")
    print(summary.to_string(index=False))
    print(f"\nRisk threshold: {params.threshold:.2%} of COF ({result.threshold_dollar:,.0f})")

    best = recommend_strategy(result)
    print(f"\nRecommended: {best.display_name} - {best.description}")

    # Save outputs
    out_dir = Path("outputs")
    out_dir.mkdir(exist_ok=True)

    cost_df.to_csv(out_dir / "cost_curves.csv", index=False)
    risk_df.to_csv(out_dir / "risk_curves.csv", index=False)
    summary.to_csv(out_dir / "summary.csv", index=False)
    print(f"\nSaved: {out_dir / 'cost_curves.csv'}")
    print(f"Saved: {out_dir / 'risk_curves.csv'}")
    print(f"Saved: {out_dir / 'summary.csv'}")

    for path in (
        plot_cost_curves(cost_df, plots_dir),
        plot_risk_curves(risk_df, result.threshold_dollar, plots_dir),
        plot_summary(summary, plots_dir),
    ):
        print(f"Saved: {path}")


if __name__ == "__main__":
    main()
