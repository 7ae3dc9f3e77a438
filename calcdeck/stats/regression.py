"""Provide least-squares regression and correlation for paired series.

This module supports:
- simple linear regression with R², signed correlation and fitted endpoints,
- Pearson correlation as a standalone statistic, and
- slope/intercept standard errors, with p-value and 95% half-widths when
  SciPy is available.
"""

from __future__ import annotations

import importlib.util
import math
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

import numpy as np

from ..errors import DomainError, InvalidInput

HAVE_SCIPY = importlib.util.find_spec("scipy") is not None
if HAVE_SCIPY:
    from scipy.stats import t as student_t


@dataclass(frozen=True)
class RegressionResult:
    """Outcome of a simple linear least-squares fit ``y = slope * x + intercept``.

    Attributes:
        slope: Fitted slope.
        intercept: Fitted intercept.
        r_squared: Coefficient of determination, ``1 - SSres / SStot``.
        correlation: Pearson r, carrying the sign of the slope.
        n: Number of paired observations.
        x_min: Smallest x value, used for the fitted endpoints.
        x_max: Largest x value.
        se_slope: Standard error of the slope (None when ``n == 2``).
        se_intercept: Standard error of the intercept (None when ``n == 2``).
        p_slope: Two-sided p-value for a zero slope (None without SciPy).
        ci95_slope: 95% half-width for the slope (None without SciPy).
        ci95_intercept: 95% half-width for the intercept (None without SciPy).
    """

    slope: float
    intercept: float
    r_squared: float
    correlation: float
    n: int
    x_min: float
    x_max: float
    se_slope: Optional[float] = None
    se_intercept: Optional[float] = None
    p_slope: Optional[float] = None
    ci95_slope: Optional[float] = None
    ci95_intercept: Optional[float] = None

    def predict(self, x: float) -> float:
        return self.slope * x + self.intercept

    @property
    def equation(self) -> str:
        sign = "+" if self.intercept >= 0 else "-"
        return f"y = {self.slope:.4f}x {sign} {abs(self.intercept):.4f}"

    @property
    def predictions(self) -> List[Tuple[float, float]]:
        """Fitted points at the smallest and largest x."""
        return [(self.x_min, self.predict(self.x_min)), (self.x_max, self.predict(self.x_max))]


def _paired(x: Sequence[float], y: Sequence[float]) -> Tuple[np.ndarray, np.ndarray]:
    x_arr = np.asarray(x, dtype=float).ravel()
    y_arr = np.asarray(y, dtype=float).ravel()
    if x_arr.size != y_arr.size:
        raise InvalidInput("X and Y values must have the same number of points")
    if x_arr.size < 2:
        raise InvalidInput("Please enter at least two data points")
    if not (np.all(np.isfinite(x_arr)) and np.all(np.isfinite(y_arr))):
        raise InvalidInput("X and Y values must be finite numbers")
    return x_arr, y_arr


def correlation(x: Sequence[float], y: Sequence[float]) -> float:
    """Pearson correlation coefficient of two equal-length series.

    Raises:
        InvalidInput: If lengths differ or fewer than two pairs are given.
        DomainError: If either series has zero variance.
    """
    x_arr, y_arr = _paired(x, y)
    dx = x_arr - x_arr.mean()
    dy = y_arr - y_arr.mean()
    sxx = float(np.sum(dx**2))
    syy = float(np.sum(dy**2))
    if sxx <= 0 or syy <= 0:
        raise DomainError("Correlation is undefined when a series has no variance")
    return float(np.sum(dx * dy) / math.sqrt(sxx * syy))


def linear_regression(x: Sequence[float], y: Sequence[float]) -> RegressionResult:
    """Fit an ordinary least-squares straight line.

    Args:
        x: Independent variable values.
        y: Dependent variable values, paired with ``x`` by position.

    Returns:
        RegressionResult: Slope, intercept, R², signed r and, for ``n > 2``,
        standard errors.

    Raises:
        InvalidInput: If lengths differ, fewer than two pairs are given, or a
            value is not finite.
        DomainError: If all x values are identical (slope undefined) or all y
            values are identical (R² undefined).

    References:
        slope = Σ(xᵢ−x̄)(yᵢ−ȳ) / Σ(xᵢ−x̄)², intercept = ȳ − slope·x̄.
    """
    x_arr, y_arr = _paired(x, y)
    n = int(x_arr.size)
    xbar = float(x_arr.mean())
    ybar = float(y_arr.mean())

    dx = x_arr - xbar
    sxy = float(np.sum(dx * (y_arr - ybar)))
    ssxx = float(np.sum(dx**2))
    if ssxx <= 0:
        raise DomainError("X values must not all be identical")

    m = sxy / ssxx
    b = ybar - m * xbar
    resid = y_arr - (m * x_arr + b)

    sse = float(np.sum(resid**2))
    sst = float(np.sum((y_arr - ybar) ** 2))
    if sst <= 0:
        raise DomainError("Y values must not all be identical")
    r2 = 1.0 - sse / sst
    r = math.copysign(math.sqrt(max(r2, 0.0)), sxy)

    se_m: Optional[float] = None
    se_b: Optional[float] = None
    p_m: Optional[float] = None
    ci95_m: Optional[float] = None
    ci95_b: Optional[float] = None
    dof = n - 2
    if dof > 0:
        mse = sse / dof
        se_m = math.sqrt(mse / ssxx)
        se_b = math.sqrt(mse * (1.0 / n + xbar * xbar / ssxx))

        if HAVE_SCIPY:
            t_stat = m / se_m if se_m > 0 else math.inf
            p_m = float(2 * (1 - student_t.cdf(abs(t_stat), dof)))
            t_crit = float(student_t.ppf(0.975, dof))
            ci95_m = t_crit * se_m
            ci95_b = t_crit * se_b

    return RegressionResult(
        slope=m,
        intercept=b,
        r_squared=r2,
        correlation=r,
        n=n,
        x_min=float(x_arr.min()),
        x_max=float(x_arr.max()),
        se_slope=se_m,
        se_intercept=se_b,
        p_slope=p_m,
        ci95_slope=ci95_m,
        ci95_intercept=ci95_b,
    )
