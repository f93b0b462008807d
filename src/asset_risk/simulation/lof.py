from __future__ import annotations

import numpy as np

LOF_MIDPOINT = 0.7


def logistic_curve(x, alpha: float, midpoint: float = 0.5):
    """
    S-curve: 1 / (1 + exp(-alpha * (x - midpoint))).
    Works on floats and numpy arrays.
    """
    return 1.0 / (1.0 + np.exp(-alpha * (x - midpoint)))


def calculate_lof(age_normalized, lof_alpha: float, min_lof: float = 0.05):
    """
    Likelihood of failure at a normalized age.

    Starts near min_lof for a young asset and rises towards 1 along a logistic
    centered at 70% of the lifespan:
        LOF = min_lof + (1 - min_lof) * logistic(age, alpha, 0.7)
    """
    f = logistic_curve(age_normalized, lof_alpha, LOF_MIDPOINT)
    return min_lof + (1.0 - min_lof) * f
