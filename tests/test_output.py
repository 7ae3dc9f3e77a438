"""Tests for CSV export of schedules and summaries."""

import logging
import os

import pandas as pd
import pytest

from calcdeck.finance import amortization_schedule
from calcdeck.output import save_amortization_schedule, save_descriptive_summary
from calcdeck.schema import AMORTIZATION, SUMMARY
from calcdeck.stats import describe


def test_amortization_csv_round_trips_rows(tmp_path, caplog):
    schedule = amortization_schedule(100000, 10, 1)
    with caplog.at_level(logging.INFO):
        path = save_amortization_schedule(schedule, output_dir=str(tmp_path / "reports"))
    assert os.path.exists(path)
    assert "Saved amortization schedule" in caplog.text

    written = pd.read_csv(path)
    assert list(written.columns) == list(AMORTIZATION.columns)
    assert len(written) == 12
    assert written[AMORTIZATION.emi].iloc[0] == pytest.approx(8791.59, abs=0.005)


def test_amortization_requires_standard_columns(tmp_path):
    bad = pd.DataFrame({"Month": [1], "EMI": [10.0]})
    with pytest.raises(KeyError, match="missing columns"):
        save_amortization_schedule(bad, output_dir=str(tmp_path))


def test_descriptive_summary_csv(tmp_path):
    path = save_descriptive_summary(describe([1, 2, 3, 4]), output_dir=str(tmp_path))
    written = pd.read_csv(path)
    assert list(written.columns) == [SUMMARY.statistic, SUMMARY.value]
    assert "Standard Deviation" in set(written[SUMMARY.statistic])
