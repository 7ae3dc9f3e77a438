"""Tests for the command-line interface."""

import os

import pytest

from calcdeck.cli import _build_arg_parser, main


def test_list_prints_categories(capsys):
    assert main(["list"]) == 0
    out = capsys.readouterr().out
    assert "Financial:" in out
    assert "compound-interest" in out


def test_run_prints_result_lines(capsys):
    assert main(["run", "combinatorics", "n=5", "r=2"]) == 0
    out = capsys.readouterr().out
    assert "Combinations: 10" in out
    assert "Permutations: 20" in out


def test_run_reports_error_kind(capsys):
    assert main(["run", "factorial", "n=-1"]) == 1
    err = capsys.readouterr().err
    assert "domain_error" in err


def test_run_rejects_malformed_pair(capsys):
    assert main(["run", "arithmetic", "a5"]) == 2
    assert "key=value" in capsys.readouterr().err


def test_run_precision(capsys):
    assert main(["run", "square-root", "value=2", "--precision", "2"]) == 0
    assert "Square root: 1.41" in capsys.readouterr().out


def test_loan_report_writes_files(tmp_path, capsys):
    outdir = str(tmp_path / "loan")
    code = main(
        ["loan-report", "--principal", "100000", "--rate", "10", "--years", "1", "--outdir", outdir]
    )
    assert code == 0
    assert os.path.exists(os.path.join(outdir, "amortization_schedule.csv"))
    assert os.path.exists(os.path.join(outdir, "amortization.png"))
    assert "EMI: 8791.59" in capsys.readouterr().out


def test_loan_report_invalid(tmp_path, capsys):
    code = main(
        [
            "loan-report",
            "--principal",
            "0",
            "--rate",
            "10",
            "--years",
            "1",
            "--outdir",
            str(tmp_path),
        ]
    )
    assert code == 1


def test_subcommand_required():
    with pytest.raises(SystemExit):
        _build_arg_parser().parse_args([])
