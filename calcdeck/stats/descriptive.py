"""Descriptive statistics for a single numeric series.

Variance and standard deviation are population statistics (divide by n),
matching what the calculators display. Inputs may be any sequence of finite
numbers; use :func:`calcdeck.parsing.parse_series` to obtain one from text.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence

import numpy as np

from ..errors import InvalidInput


@dataclass(frozen=True)
class Quartiles:
    q1: float
    q2: float
    q3: float


@dataclass(frozen=True)
class DescriptiveStats:
    """Summary of a numeric series.

    Attributes:
        count: Number of values.
        total: Sum of values.
        mean: Arithmetic mean.
        median: Middle value (mean of the two middle values for even counts).
        mode: Every value sharing the highest frequency, ascending.
        minimum: Smallest value.
        maximum: Largest value.
        value_range: ``maximum - minimum``.
        variance: Population variance.
        std_dev: Population standard deviation.
        quartiles: Q1/Q2/Q3 by the median-of-halves method.
    """

    count: int
    total: float
    mean: float
    median: float
    mode: List[float]
    minimum: float
    maximum: float
    value_range: float
    variance: float
    std_dev: float
    quartiles: Quartiles


def _as_series(values: Sequence[float], min_length: int = 1) -> np.ndarray:
    arr = np.asarray(values, dtype=float).ravel()
    if arr.size < min_length:
        if min_length == 1:
            raise InvalidInput("Series must contain at least one number")
        raise InvalidInput(f"Please enter at least {min_length} numbers")
    if not np.all(np.isfinite(arr)):
        raise InvalidInput("Series must contain only finite numbers")
    return arr


def mean(values: Sequence[float]) -> float:
    arr = _as_series(values)
    return float(np.sum(arr) / arr.size)


def median(values: Sequence[float]) -> float:
    arr = np.sort(_as_series(values))
    middle = arr.size // 2
    if arr.size % 2 == 0:
        return float((arr[middle - 1] + arr[middle]) / 2.0)
    return float(arr[middle])


def mode(values: Sequence[float]) -> List[float]:
    """Return every value that occurs with the highest frequency, ascending."""
    arr = _as_series(values)
    unique, counts = np.unique(arr, return_counts=True)
    return [float(v) for v in unique[counts == counts.max()]]


def variance(values: Sequence[float]) -> float:
    """Population variance: mean squared deviation from the mean."""
    arr = _as_series(values)
    deviations = arr - mean(arr)
    return float(np.sum(deviations**2) / arr.size)


def std_dev(values: Sequence[float]) -> float:
    return float(np.sqrt(variance(values)))


def value_range(values: Sequence[float]) -> float:
    arr = _as_series(values)
    return float(arr.max() - arr.min())


def quartiles(values: Sequence[float]) -> Quartiles:
    """Compute quartiles as medians of the lower and upper halves.

    For odd counts the middle element belongs to neither half. A single
    value yields that value for all three quartiles.
    """
    arr = np.sort(_as_series(values))
    if arr.size == 1:
        only = float(arr[0])
        return Quartiles(only, only, only)
    lower = arr[: arr.size // 2]
    upper = arr[(arr.size + 1) // 2 :]
    return Quartiles(q1=median(lower), q2=median(arr), q3=median(upper))


def z_score(value: float, mean_value: float, std: float) -> float:
    if std <= 0:
        raise InvalidInput(f"Standard deviation must be positive, got {std}", field="std_dev")
    return (value - mean_value) / std


def describe(values: Sequence[float]) -> DescriptiveStats:
    """Compute the full descriptive summary of a series of at least two values.

    Raises:
        InvalidInput: If fewer than two values are supplied or any value is
            not finite.
    """
    arr = _as_series(values, min_length=2)
    q = quartiles(arr)
    var = variance(arr)
    return DescriptiveStats(
        count=int(arr.size),
        total=float(np.sum(arr)),
        mean=mean(arr),
        median=q.q2,
        mode=mode(arr),
        minimum=float(arr.min()),
        maximum=float(arr.max()),
        value_range=value_range(arr),
        variance=var,
        std_dev=float(np.sqrt(var)),
        quartiles=q,
    )
