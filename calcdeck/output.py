"""Write calculation tables to CSV files.

This module is the output boundary between in-memory results and files on
disk. Every writer creates the target directory, writes one CSV and returns
its path.
"""

from __future__ import annotations

import logging
import os
from typing import Optional

import pandas as pd

from .config import DEFAULT_OUTPUT_DIR
from .reporting import describe_frame
from .schema import AMORTIZATION
from .stats import DescriptiveStats

logger = logging.getLogger(__name__)


def _target(output_dir: Optional[str], filename: str) -> str:
    directory = DEFAULT_OUTPUT_DIR if output_dir is None else output_dir
    os.makedirs(directory, exist_ok=True)
    return os.path.join(directory, filename)


def save_amortization_schedule(
    schedule: pd.DataFrame,
    output_dir: Optional[str] = None,
    filename: str = "amortization_schedule.csv",
) -> str:
    """Save an amortization schedule with money columns at two decimals.

    Args:
        schedule (pandas.DataFrame): Output of
            :func:`calcdeck.finance.amortization_schedule`.
        output_dir (str | None): Target directory; defaults to
            ``DEFAULT_OUTPUT_DIR``.
        filename (str): CSV file name.

    Returns:
        str: Path of the written file.

    Raises:
        KeyError: If the schedule lacks a standard amortization column.
    """
    missing = [c for c in AMORTIZATION.columns if c not in schedule.columns]
    if missing:
        raise KeyError(f"Amortization schedule is missing columns: {missing}")

    path = _target(output_dir, filename)
    table = schedule[list(AMORTIZATION.columns)].copy()
    money = [AMORTIZATION.emi, AMORTIZATION.principal, AMORTIZATION.interest, AMORTIZATION.balance]
    table[money] = table[money].round(2)
    table.to_csv(path, index=False)
    logger.info("Saved amortization schedule (%d rows) to %s", len(table), path)
    return path


def save_descriptive_summary(
    stats: DescriptiveStats,
    output_dir: Optional[str] = None,
    filename: str = "descriptive_summary.csv",
) -> str:
    """Save a statistic/value summary table and return its path."""
    path = _target(output_dir, filename)
    describe_frame(stats).to_csv(path, index=False)
    logger.info("Saved descriptive summary to %s", path)
    return path
