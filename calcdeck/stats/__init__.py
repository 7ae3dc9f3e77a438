"""
Statistical utilities for the statistics calculators.

This subpackage provides numerical routines for descriptive statistics,
least-squares regression and probability distributions. All functions
operate on arrays and primitive types.

Modules:
    descriptive:
        Mean, median, mode, population variance and standard deviation,
        quartiles, and a combined summary.

    regression:
        Simple linear regression with R², signed correlation and standard
        errors. Pearson correlation as a standalone statistic.

    distributions:
        Normal CDF approximation and normal, Poisson and binomial
        probabilities over a tagged union of parameter types.

Design Principle:
    This subpackage has no dependencies on plotting or I/O modules.
"""

from .descriptive import (
    DescriptiveStats,
    Quartiles,
    describe,
    mean,
    median,
    mode,
    quartiles,
    std_dev,
    value_range,
    variance,
    z_score,
)
from .distributions import (
    BinomialParams,
    DiscreteBound,
    DistributionResult,
    NormalParams,
    NormalTail,
    PoissonParams,
    binomial_pmf,
    binomial_probability,
    binomial_summary,
    distribution_moments,
    normal_cdf,
    normal_probability,
    poisson_pmf,
    poisson_probability,
    z_score_probability,
)
from .regression import RegressionResult, correlation, linear_regression

__all__ = [
    "DescriptiveStats",
    "Quartiles",
    "describe",
    "mean",
    "median",
    "mode",
    "quartiles",
    "std_dev",
    "value_range",
    "variance",
    "z_score",
    "BinomialParams",
    "DiscreteBound",
    "DistributionResult",
    "NormalParams",
    "NormalTail",
    "PoissonParams",
    "binomial_pmf",
    "binomial_probability",
    "binomial_summary",
    "distribution_moments",
    "normal_cdf",
    "normal_probability",
    "poisson_pmf",
    "poisson_probability",
    "z_score_probability",
    "RegressionResult",
    "correlation",
    "linear_regression",
]
