"""Figures for regression fits, loan amortization and probability distributions.

Every plotting function saves one PNG into ``output_dir`` and returns its
path. Figures are closed after saving so repeated calls do not accumulate
open figures.
"""

from __future__ import annotations

import logging
import math
import os
from typing import Optional, Sequence

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd

from .config import DEFAULT_OUTPUT_DIR
from .errors import InvalidInput
from .schema import AMORTIZATION
from .stats import (
    BinomialParams,
    NormalParams,
    PoissonParams,
    RegressionResult,
    binomial_pmf,
    distribution_moments,
    poisson_pmf,
)
from .stats.distributions import DistributionParameters

logger = logging.getLogger(__name__)

FIGSIZE_SINGLE = (7.0, 4.2)
FIGSIZE_WIDE = (9.5, 4.2)


def setup_plot_style() -> None:
    """High-legibility style for report figures."""
    if "seaborn-v0_8-whitegrid" in plt.style.available:
        plt.style.use("seaborn-v0_8-whitegrid")
    else:
        plt.style.use("default")

    plt.rcParams.update(
        {
            "font.family": "serif",
            "font.serif": ["Times New Roman", "Times", "Nimbus Roman", "DejaVu Serif"],
            "mathtext.fontset": "stix",
            "font.size": 12,
            "axes.titlesize": 14,
            "axes.labelsize": 12,
            "legend.fontsize": 11,
            "figure.dpi": 120,
            "savefig.dpi": 300,
            "savefig.bbox": "tight",
            "axes.spines.top": False,
            "axes.spines.right": False,
            "grid.alpha": 0.25,
            "grid.linestyle": "--",
            "legend.frameon": False,
        }
    )


def _save(fig: plt.Figure, output_dir: Optional[str], filename: str) -> str:
    directory = DEFAULT_OUTPUT_DIR if output_dir is None else output_dir
    os.makedirs(directory, exist_ok=True)
    path = os.path.join(directory, filename)
    fig.savefig(path)
    plt.close(fig)
    logger.info("Saved figure to %s", path)
    return path


def plot_regression(
    x: Sequence[float],
    y: Sequence[float],
    fit: RegressionResult,
    output_dir: Optional[str] = None,
    filename: str = "regression.png",
) -> str:
    """Scatter the data and overlay the fitted line with its equation and R²."""
    setup_plot_style()
    x_arr = np.asarray(x, dtype=float)
    y_arr = np.asarray(y, dtype=float)

    fig, ax = plt.subplots(figsize=FIGSIZE_SINGLE)
    ax.scatter(x_arr, y_arr, color="black", s=30, zorder=3, label="Data")
    xs = np.linspace(fit.x_min, fit.x_max, 200)
    ax.plot(
        xs, fit.slope * xs + fit.intercept, color="black", linewidth=2.0, label="Least-squares fit"
    )
    ax.text(
        0.98,
        0.04,
        f"{fit.equation}\n$R^2$ = {fit.r_squared:.4f}",
        transform=ax.transAxes,
        ha="right",
        va="bottom",
    )
    ax.set_xlabel("x")
    ax.set_ylabel("y")
    ax.set_title("Linear regression")
    ax.legend(loc="upper left")
    ax.grid(True)
    return _save(fig, output_dir, filename)


def plot_amortization(
    schedule: pd.DataFrame,
    output_dir: Optional[str] = None,
    filename: str = "amortization.png",
) -> str:
    """Two panels: principal/interest split per month and outstanding balance."""
    if schedule.empty:
        raise InvalidInput("Amortization schedule is empty")
    setup_plot_style()
    months = schedule[AMORTIZATION.month].to_numpy()
    principal = schedule[AMORTIZATION.principal].to_numpy(dtype=float)
    interest = schedule[AMORTIZATION.interest].to_numpy(dtype=float)

    fig, (ax_split, ax_balance) = plt.subplots(1, 2, figsize=FIGSIZE_WIDE)
    ax_split.bar(months, principal, color="0.35", label=AMORTIZATION.principal)
    ax_split.bar(months, interest, bottom=principal, color="0.75", label=AMORTIZATION.interest)
    ax_split.set_xlabel(AMORTIZATION.month)
    ax_split.set_ylabel("Payment")
    ax_split.set_title("Instalment split")
    ax_split.legend(loc="upper right")

    ax_balance.plot(months, schedule[AMORTIZATION.balance].to_numpy(dtype=float), color="black")
    ax_balance.set_xlabel(AMORTIZATION.month)
    ax_balance.set_ylabel(AMORTIZATION.balance)
    ax_balance.set_title("Outstanding balance")
    ax_balance.set_ylim(bottom=0)
    ax_balance.grid(True)

    fig.tight_layout()
    return _save(fig, output_dir, filename)


def plot_distribution(
    params: DistributionParameters,
    output_dir: Optional[str] = None,
    filename: str = "distribution.png",
) -> str:
    """Plot a normal density or a Poisson/binomial mass function.

    The horizontal range spans the mean plus or minus four standard
    deviations, clipped to the support of discrete distributions.
    """
    setup_plot_style()
    mu, var = distribution_moments(params)
    sd = math.sqrt(var)
    fig, ax = plt.subplots(figsize=FIGSIZE_SINGLE)

    if isinstance(params, NormalParams):
        xs = np.linspace(mu - 4 * sd, mu + 4 * sd, 400)
        density = np.exp(-0.5 * ((xs - mu) / sd) ** 2) / (sd * math.sqrt(2 * math.pi))
        ax.plot(xs, density, color="black", linewidth=2.0)
        ax.fill_between(xs, density, color="0.85")
        ax.set_ylabel("Density")
        ax.set_title(f"Normal(μ={mu:g}, σ={sd:g})")
    else:
        upper = int(math.ceil(mu + 4 * sd)) + 1
        if isinstance(params, BinomialParams):
            ks = np.arange(0, min(upper, params.n) + 1)
            probs = [binomial_pmf(int(k), params.n, params.p) for k in ks]
            ax.set_title(f"Binomial(n={params.n}, p={params.p:g})")
        elif isinstance(params, PoissonParams):
            ks = np.arange(0, upper + 1)
            probs = [poisson_pmf(int(k), params.lam) for k in ks]
            ax.set_title(f"Poisson(λ={params.lam:g})")
        else:
            plt.close(fig)
            raise InvalidInput(f"Unsupported distribution parameters: {type(params).__name__}")
        ax.bar(ks, probs, color="0.45", width=0.8)
        ax.set_ylabel("P(X = k)")

    ax.axvline(mu, color="black", linestyle="--", linewidth=1.2, label=f"Mean = {mu:g}")
    ax.set_xlabel("x")
    ax.legend(loc="upper right")
    return _save(fig, output_dir, filename)
