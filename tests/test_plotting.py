"""Tests that figures are written and closed."""

import os

import matplotlib.pyplot as plt
import pytest

from calcdeck.errors import InvalidInput
from calcdeck.finance import amortization_schedule
from calcdeck.plotting import plot_amortization, plot_distribution, plot_regression
from calcdeck.stats import BinomialParams, NormalParams, PoissonParams, linear_regression


def _assert_written(path):
    assert os.path.exists(path)
    assert os.path.getsize(path) > 0
    assert plt.get_fignums() == []


def test_plot_regression(tmp_path):
    x, y = [1, 2, 3, 4, 5], [2.1, 3.9, 6.2, 7.8, 10.1]
    path = plot_regression(x, y, linear_regression(x, y), output_dir=str(tmp_path))
    assert path.endswith("regression.png")
    _assert_written(path)


def test_plot_amortization(tmp_path):
    path = plot_amortization(amortization_schedule(50000, 9, 2), output_dir=str(tmp_path))
    _assert_written(path)


def test_plot_amortization_rejects_empty(tmp_path):
    schedule = amortization_schedule(50000, 9, 2).iloc[0:0]
    with pytest.raises(InvalidInput):
        plot_amortization(schedule, output_dir=str(tmp_path))


@pytest.mark.parametrize(
    "params",
    [NormalParams(10, 2), PoissonParams(3.5), BinomialParams(20, 0.3)],
)
def test_plot_distribution(tmp_path, params):
    name = f"{type(params).__name__}.png"
    path = plot_distribution(params, output_dir=str(tmp_path), filename=name)
    _assert_written(path)
