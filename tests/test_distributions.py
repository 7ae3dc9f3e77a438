"""Tests for normal, Poisson and binomial probabilities."""

import math

import pytest

from calcdeck.errors import InvalidInput, OutOfRange
from calcdeck.stats import (
    BinomialParams,
    DiscreteBound,
    NormalParams,
    NormalTail,
    PoissonParams,
    binomial_probability,
    binomial_summary,
    distribution_moments,
    normal_cdf,
    normal_probability,
    poisson_pmf,
    poisson_probability,
    z_score_probability,
)


class TestNormal:
    """Normal CDF approximation and tail probabilities."""

    def test_cdf_reference_points(self):
        assert math.isclose(normal_cdf(0.0), 0.5, abs_tol=1e-6)
        assert math.isclose(normal_cdf(1.96), 0.975, abs_tol=1e-4)
        assert math.isclose(normal_cdf(-1.0), 0.158655, abs_tol=1e-5)

    def test_cdf_is_symmetric(self):
        for z in (0.3, 1.0, 2.5):
            assert math.isclose(normal_cdf(z) + normal_cdf(-z), 1.0, abs_tol=1e-6)

    def test_tails_complement(self):
        params = NormalParams(100, 15)
        below = normal_probability(params, 120, NormalTail.LESS_THAN).probability
        above = normal_probability(params, 120, NormalTail.GREATER_THAN).probability
        assert math.isclose(below + above, 1.0)

    def test_between_ignores_bound_order(self):
        params = NormalParams(0, 1)
        a = normal_probability(params, -1, NormalTail.BETWEEN, 1).probability
        b = normal_probability(params, 1, NormalTail.BETWEEN, -1).probability
        assert math.isclose(a, b)
        assert math.isclose(a, 0.682689, abs_tol=1e-4)

    def test_between_requires_second_bound(self):
        with pytest.raises(InvalidInput, match="Second X"):
            normal_probability(NormalParams(0, 1), 0, NormalTail.BETWEEN)

    def test_invalid_std_dev(self):
        with pytest.raises(InvalidInput, match="Standard deviation"):
            NormalParams(0, 0)


class TestDiscrete:
    def test_binomial_exact(self):
        result = binomial_probability(BinomialParams(10, 0.5), 5)
        assert math.isclose(result.probability, 0.24609375)
        assert math.isclose(result.mean, 5.0)
        assert math.isclose(result.variance, 2.5)

    def test_binomial_bounds_sum_to_one(self):
        params = BinomialParams(12, 0.3)
        at_most = binomial_probability(params, 4, DiscreteBound.AT_MOST).probability
        at_least = binomial_probability(params, 5, DiscreteBound.AT_LEAST).probability
        assert math.isclose(at_most + at_least, 1.0)

    def test_poisson_exact(self):
        result = poisson_probability(PoissonParams(3.0), 2)
        assert math.isclose(result.probability, 4.5 * math.exp(-3.0))
        assert result.mean == result.variance == 3.0

    def test_poisson_at_least_zero_is_certain(self):
        result = poisson_probability(PoissonParams(2.0), 0, DiscreteBound.AT_LEAST)
        assert result.probability == 1.0

    def test_probabilities_stay_in_unit_interval(self):
        for k in range(0, 21):
            p = binomial_probability(BinomialParams(20, 0.9), k, DiscreteBound.AT_LEAST)
            assert 0.0 <= p.probability <= 1.0

    def test_k_outside_support(self):
        with pytest.raises(InvalidInput, match="between 0 and N"):
            binomial_probability(BinomialParams(5, 0.5), 6)
        with pytest.raises(InvalidInput):
            poisson_probability(PoissonParams(1.0), -1)

    def test_invalid_parameters(self):
        with pytest.raises(InvalidInput, match="between 0 and 1"):
            BinomialParams(10, 1.5)
        with pytest.raises(InvalidInput, match="positive integer"):
            BinomialParams(0, 0.5)
        with pytest.raises(InvalidInput, match="Lambda"):
            PoissonParams(0)

    def test_large_k_is_out_of_range(self):
        with pytest.raises(OutOfRange):
            poisson_pmf(200, 150.0)


def test_moments_dispatch_on_parameter_type():
    assert distribution_moments(NormalParams(2, 3)) == (2, 9)
    assert distribution_moments(PoissonParams(4)) == (4, 4)
    assert distribution_moments(BinomialParams(10, 0.2)) == pytest.approx((2.0, 1.6))
    with pytest.raises(InvalidInput, match="Unsupported"):
        distribution_moments("not-a-distribution")


def test_binomial_summary():
    summary = binomial_summary(100, 0.25)
    assert math.isclose(summary.mean, 25.0)
    assert math.isclose(summary.std_dev, math.sqrt(18.75))


def test_z_score_probability():
    out = z_score_probability(115, 100, 15)
    assert math.isclose(out["z_score"], 1.0)
    assert math.isclose(out["probability"], 0.841344746, abs_tol=1e-8)
