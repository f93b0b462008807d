from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum


class InvalidParameterError(ValueError):
    """Raised when a parameter record cannot be simulated."""


class Strategy(str, Enum):
    """The four lifecycle-management strategies. Closed set."""

    NO_FIX = "noFix"
    FIX_IN_PLAN = "fixInPlan"
    FIX_ON_FAIL = "fixOnFail"
    FIX_ON_RISK = "fixOnRisk"

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]


_DISPLAY_NAMES = {
    Strategy.NO_FIX: "No Fix",
    Strategy.FIX_IN_PLAN: "Fix in Plan",
    Strategy.FIX_ON_FAIL: "Fix on Fail",
    Strategy.FIX_ON_RISK: "Fix on Risk",
}

_DESCRIPTIONS = {
    Strategy.NO_FIX: "Lowest upfront, highest end-of-life cost.",
    Strategy.FIX_IN_PLAN: "Predictable cycles with moderate cost.",
    Strategy.FIX_ON_FAIL: "Unpredictable failures and emergency repairs.",
    Strategy.FIX_ON_RISK: "Optimized balance of cost and risk.",
}


@dataclass(frozen=True)
class DashboardParams:
    """
    Input record for one simulation run.

      - lifespan_years:      asset lifespan T (years)
      - replacement_cost:    replacement cost, also the consequence of failure (COF)
      - risk_alpha:          steepness of the LOF S-curve
      - min_lof:             LOF floor at early age
      - cycle_length_years:  Fix-in-Plan maintenance cycle
      - threshold:           Fix-on-Risk trigger, fraction of COF
      - points:              number of time samples
    """

    lifespan_years: float = 30.0
    replacement_cost: float = 1_000_000.0
    risk_alpha: float = 6.0
    min_lof: float = 0.05
    cycle_length_years: float = 5.0
    threshold: float = 0.4
    points: int = 500

    def validate(self) -> "DashboardParams":
        if isinstance(self.points, bool) or not isinstance(self.points, int):
            raise InvalidParameterError(f"points must be an integer, got {self.points!r}")
        if self.points < 2:
            raise InvalidParameterError(f"points must be >= 2, got {self.points}")

        _require_positive("lifespan_years", self.lifespan_years)
        _require_positive("cycle_length_years", self.cycle_length_years)
        _require_positive("replacement_cost", self.replacement_cost)
        _require_positive("risk_alpha", self.risk_alpha)

        if not (0.0 <= self.min_lof < 1.0):
            raise InvalidParameterError(f"min_lof must be in [0, 1), got {self.min_lof}")
        if not (0.0 <= self.threshold <= 1.0):
            raise InvalidParameterError(f"threshold must be in [0, 1], got {self.threshold}")
        return self


def _require_positive(name: str, value: float) -> None:
    # NaN fails the comparison too
    if not (math.isfinite(value) and value > 0):
        raise InvalidParameterError(f"{name} must be > 0, got {value}")


@dataclass(frozen=True)
class CurvePoint:
    """One time sample: absolute time t, normalized time x, one value per strategy."""
    t: float
    x: float
    no_fix: float
    fix_in_plan: float
    fix_on_fail: float
    fix_on_risk: float

    def value(self, strategy: Strategy) -> float:
        return getattr(self, _FIELDS[strategy])


_FIELDS = {
    Strategy.NO_FIX: "no_fix",
    Strategy.FIX_IN_PLAN: "fix_in_plan",
    Strategy.FIX_ON_FAIL: "fix_on_fail",
    Strategy.FIX_ON_RISK: "fix_on_risk",
}
