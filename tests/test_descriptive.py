"""Tests for descriptive statistics."""

import math

import numpy as np
import pytest

from calcdeck.errors import InvalidInput
from calcdeck.stats import describe, median, mode, quartiles, std_dev, variance, z_score


def test_describe_known_series():
    stats = describe([2, 4, 4, 4, 5, 5, 7, 9])
    assert stats.count == 8
    assert stats.total == 40
    assert math.isclose(stats.mean, 5.0)
    assert math.isclose(stats.median, 4.5)
    assert stats.mode == [4.0]
    assert stats.minimum == 2 and stats.maximum == 9
    assert stats.value_range == 7
    # Population variance of this classic series is exactly 4.
    assert math.isclose(stats.variance, 4.0)
    assert math.isclose(stats.std_dev, 2.0)


def test_quartiles_exclude_middle_for_odd_counts():
    q = quartiles([1, 2, 3, 4, 5, 6, 7])
    assert (q.q1, q.q2, q.q3) == (2.0, 4.0, 6.0)


def test_quartiles_even_count():
    q = quartiles([1, 2, 3, 4, 5, 6, 7, 8])
    assert (q.q1, q.q2, q.q3) == (2.5, 4.5, 6.5)


def test_mode_returns_all_ties_ascending():
    assert mode([3, 1, 3, 1, 2]) == [1.0, 3.0]


def test_median_is_order_independent():
    assert median([9, 1, 5]) == 5.0


def test_variance_never_negative():
    rng = np.random.default_rng(7)
    for _ in range(20):
        data = rng.normal(loc=1e6, scale=1e-3, size=15)
        assert variance(data) >= 0.0


def test_std_dev_is_square_root_of_variance():
    rng = np.random.default_rng(11)
    for size in (1, 2, 5, 40):
        for _ in range(10):
            data = rng.uniform(-1e3, 1e3, size=size)
            assert math.isclose(std_dev(data), math.sqrt(variance(data)), rel_tol=1e-12)


def test_describe_requires_two_values():
    with pytest.raises(InvalidInput, match="at least 2 numbers"):
        describe([1.0])


def test_describe_rejects_nan():
    with pytest.raises(InvalidInput, match="finite"):
        describe([1.0, float("nan"), 3.0])


def test_z_score():
    assert math.isclose(z_score(130, 100, 15), 2.0)
    with pytest.raises(InvalidInput):
        z_score(1, 0, 0)
