import json
from pathlib import Path

import pandas as pd
import pytest

from asset_risk.preprocessing.loaders import load_scenario, params_from_dict
from asset_risk.preprocessing.schema import DashboardParams, InvalidParameterError, Strategy
from asset_risk.simulation.simulator import SimResult, simulate
from asset_risk.utils.reporting import curves_to_frame, recommend_strategy, summarize
from asset_risk.visualization.results_plots import (
    plot_cost_curves,
    plot_lof_curve,
    plot_risk_curves,
    plot_summary,
)

REPO_ROOT = Path(__file__).resolve().parents[1]


def _write(tmp_path: Path, data) -> Path:
    path = tmp_path / "scenario.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def test_shipped_scenario_is_the_default():
    assert load_scenario(REPO_ROOT / "data" / "scenario.json") == DashboardParams()


def test_load_scenario_snake_case(tmp_path):
    params = load_scenario(_write(tmp_path, {"lifespan_years": 20, "points": 100}))
    assert params.lifespan_years == 20.0
    assert params.points == 100
    assert params.cycle_length_years == 5.0


def test_load_scenario_camel_case(tmp_path):
    params = load_scenario(_write(tmp_path, {
        "lifespanYears": 40,
        "replacementCost": 250000,
        "riskAlpha": 8,
        "minLof": 0.1,
        "cycleLengthYears": 4,
        "threshold": 0.5,
        "points": 200,
    }))
    assert params == DashboardParams(40.0, 250000.0, 8.0, 0.1, 4.0, 0.5, 200)


def test_integral_float_points_accepted():
    assert params_from_dict({"points": 300.0}).points == 300


def test_unknown_key_rejected():
    with pytest.raises(InvalidParameterError, match="Unknown parameter"):
        params_from_dict({"horizon_days": 365})


def test_duplicate_key_rejected():
    with pytest.raises(InvalidParameterError):
        params_from_dict({"minLof": 0.1, "min_lof": 0.2})


def test_invalid_value_rejected(tmp_path):
    with pytest.raises(InvalidParameterError):
        load_scenario(_write(tmp_path, {"points": 1}))


def test_non_object_rejected(tmp_path):
    with pytest.raises(InvalidParameterError):
        load_scenario(_write(tmp_path, [1, 2, 3]))


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_scenario(tmp_path / "nope.json")


def _fake_result(totals, risks) -> SimResult:
    return SimResult(
        cost=(),
        risk=(),
        total_costs=dict(zip(Strategy, totals)),
        average_risk=dict(zip(Strategy, risks)),
        threshold_dollar=0.0,
    )


def test_recommend_lowest_score():
    res = _fake_result([10.0, 5.0, 8.0, 6.0], [1.0, 0.5, 0.0, 2.0])
    assert recommend_strategy(res) is Strategy.FIX_IN_PLAN


def test_recommend_tie_goes_to_first():
    res = _fake_result([3.0, 1.0, 1.0, 2.0], [0.0, 1.0, 1.0, 0.0])
    assert recommend_strategy(res) is Strategy.FIX_IN_PLAN


def test_recommend_default_scenario():
    res = simulate(DashboardParams())
    best = recommend_strategy(res)
    scores = {s: res.total_costs[s] + res.average_risk[s] for s in Strategy}
    assert scores[best] == min(scores.values())


def test_curves_to_frame():
    res = simulate(DashboardParams(points=50))
    df = curves_to_frame(res.cost)
    assert list(df.columns) == ["t", "x", "noFix", "fixInPlan", "fixOnFail", "fixOnRisk"]
    assert len(df) == 50
    assert df["x"].iloc[0] == 0.0
    assert df["x"].iloc[-1] == 1.0
    assert df["noFix"].iloc[-1] == res.total_costs[Strategy.NO_FIX]


def test_summarize():
    res = simulate(DashboardParams(points=50))
    summary = summarize(res)
    assert list(summary["strategy"]) == [s.value for s in Strategy]
    assert list(summary["name"]) == ["No Fix", "Fix in Plan", "Fix on Fail", "Fix on Risk"]
    row = summary.set_index("strategy").loc["fixOnRisk"]
    assert row["score"] == pytest.approx(row["total_cost"] + row["average_risk"])
    assert (summary["threshold_dollar"] == res.threshold_dollar).all()


def test_plots_written(tmp_path):
    res = simulate(DashboardParams(points=60))
    out_dir = tmp_path / "plots"
    paths = [
        plot_cost_curves(curves_to_frame(res.cost), out_dir),
        plot_risk_curves(curves_to_frame(res.risk), res.threshold_dollar, out_dir),
        plot_summary(summarize(res), out_dir),
        plot_lof_curve(6.0, 0.05, out_dir, failure_times=[10.0, 20.0], lifespan=30.0),
    ]
    for path in paths:
        assert path.exists()
        assert path.stat().st_size > 0
    assert isinstance(summarize(res), pd.DataFrame)


@pytest.mark.parametrize("value", [None, "30", "abc", True, [30], {"years": 30}])
def test_non_numeric_values_rejected(value):
    with pytest.raises(InvalidParameterError, match="must be a number"):
        params_from_dict({"lifespan_years": value})


def test_non_numeric_camel_case_value_rejected(tmp_path):
    with pytest.raises(InvalidParameterError):
        load_scenario(_write(tmp_path, {"minLof": False}))


def test_importing_plots_leaves_backend_alone(monkeypatch):
    import importlib

    import matplotlib

    import asset_risk.visualization.results_plots as results_plots

    calls = []
    monkeypatch.setattr(matplotlib, "use", lambda *args, **kwargs: calls.append(args))
    importlib.reload(results_plots)
    assert calls == []


def test_analyze_scenario_reports_saved_file(tmp_path, monkeypatch, capsys):
    import runpy

    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr("sys.argv", ["analyze_scenario.py", str(REPO_ROOT / "data" / "scenario.json")])
    runpy.run_path(str(REPO_ROOT / "scripts" / "analyze_scenario.py"), run_name="__main__")

    out = capsys.readouterr().out
    saved = tmp_path / "outputs" / "scenario_analysis" / "lof_curve.png"
    assert saved.exists()
    assert f"Saved plot: {saved.resolve()}" in out
