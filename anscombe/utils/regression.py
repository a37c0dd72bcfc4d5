"""
Closed-form simple linear regression and goodness-of-fit metrics.
No external deps beyond NumPy.

Zero-variance inputs raise DegenerateInput instead of letting the division
produce inf/NaN; callers decide whether a failing dataset is fatal.
"""
from __future__ import annotations

from dataclasses import dataclass
import math

import numpy as np


class RegressionError(ValueError):
    """Base class for inputs the fitter or metrics cannot handle."""


class DimensionMismatch(RegressionError):
    pass


class InsufficientSamples(RegressionError):
    pass


class DegenerateInput(RegressionError):
    pass


@dataclass(frozen=True)
class FitResult:
    slope: float
    intercept: float

    def __iter__(self):
        return iter((self.slope, self.intercept))

    def predict(self, x) -> np.ndarray:
        return self.slope * np.asarray(x, dtype=float) + self.intercept


@dataclass(frozen=True)
class MetricsResult:
    r2: float
    rse: float              # residual standard error, n-2 dof
    f_statistic: float      # dof (1, n-2)

    def __iter__(self):
        return iter((self.r2, self.rse, self.f_statistic))


def _as_pair(x, y, min_n: int) -> tuple[np.ndarray, np.ndarray]:
    x = np.asarray(x, dtype=float).reshape(-1)
    y = np.asarray(y, dtype=float).reshape(-1)
    if x.size != y.size:
        raise DimensionMismatch(f"x and y must have the same length (got {x.size} and {y.size})")
    if x.size < min_n:
        raise InsufficientSamples(f"Need at least {min_n} points (got {x.size})")
    if not (np.all(np.isfinite(x)) and np.all(np.isfinite(y))):
        raise DegenerateInput("x and y must contain only finite values")
    return x, y


def fit(x, y) -> FitResult:
    """
    Fit y = intercept + slope*x by ordinary least squares (closed form).

    - Raises DimensionMismatch when the series lengths differ.
    - Raises InsufficientSamples for fewer than 2 points.
    - Raises DegenerateInput when all x are identical.
    """
    x, y = _as_pair(x, y, min_n=2)
    if np.ptp(x) == 0:
        raise DegenerateInput("x has zero variance; slope is undefined")
    n = float(x.size)

    sum_x = float(np.sum(x))
    sum_y = float(np.sum(y))
    sum_xy = float(np.dot(x, y))
    sum_x2 = float(np.dot(x, x))

    numerator = n * sum_xy - sum_x * sum_y
    denominator = n * sum_x2 - sum_x * sum_x
    if denominator == 0:
        raise DegenerateInput("x has zero variance; slope is undefined")

    slope = numerator / denominator
    intercept = float(np.mean(y)) - slope * float(np.mean(x))
    return FitResult(slope=slope, intercept=intercept)


def metrics(x, y, slope: float, intercept: float) -> MetricsResult:
    """
    R^2, residual standard error and F-statistic of a single-predictor fit.

    Needs n > 2 (residual dof = n-2) and non-constant y. A perfect fit
    reports rse=0 and f_statistic=inf.
    """
    x, y = _as_pair(x, y, min_n=3)
    if np.ptp(y) == 0:
        raise DegenerateInput("y has zero variance; R^2 is undefined")
    n = x.size

    y_hat = slope * x + intercept
    resid = y - y_hat

    rss = float(np.sum(resid ** 2))
    tss = float(np.sum((y - np.mean(y)) ** 2))
    if tss == 0:
        raise DegenerateInput("y has zero variance; R^2 is undefined")

    r2 = 1.0 - rss / tss
    rse = math.sqrt(rss / (n - 2))
    if rss == 0:
        f_stat = math.inf
    else:
        f_stat = ((tss - rss) / 1) / (rss / (n - 2))

    return MetricsResult(r2=r2, rse=rse, f_statistic=f_stat)
