from __future__ import annotations

import json
from dataclasses import fields
from pathlib import Path
from typing import Any, Dict

from asset_risk.preprocessing.schema import DashboardParams, InvalidParameterError

# camelCase keys exported by the dashboard front end
_ALIASES = {
    "lifespanYears": "lifespan_years",
    "replacementCost": "replacement_cost",
    "riskAlpha": "risk_alpha",
    "minLof": "min_lof",
    "cycleLengthYears": "cycle_length_years",
}


def params_from_dict(data: Dict[str, Any]) -> DashboardParams:
    """
    Build validated parameters from a plain dict. Missing keys take the defaults.
    """
    known = {f.name for f in fields(DashboardParams)}
    kwargs: Dict[str, Any] = {}

    for key, value in data.items():
        name = _ALIASES.get(key, key)
        if name not in known:
            raise InvalidParameterError(f"Unknown parameter: {key!r}")
        if name in kwargs:
            raise InvalidParameterError(f"Parameter given twice: {name!r}")
        kwargs[name] = value

    if "points" in kwargs and isinstance(kwargs["points"], float) and kwargs["points"].is_integer():
        kwargs["points"] = int(kwargs["points"])
    for name in known - {"points"}:
        if name in kwargs:
            value = kwargs[name]
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise InvalidParameterError(f"{name} must be a number, got {value!r}")
            kwargs[name] = float(value)

    return DashboardParams(**kwargs).validate()


def load_scenario(path: Path) -> DashboardParams:
    """
    Load a scenario.json file and return validated parameters.

    Expected structure (every key optional):
      - lifespan_years
      - replacement_cost
      - risk_alpha
      - min_lof
      - cycle_length_years
      - threshold
      - points
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Scenario file not found: {path}")

    with path.open("r", encoding="utf-8") as f:
        scenario = json.load(f)

    if not isinstance(scenario, dict):
        raise InvalidParameterError(f"Scenario must be a JSON object: {path}")

    return params_from_dict(scenario)
