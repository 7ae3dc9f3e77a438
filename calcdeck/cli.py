"""Command-line interface for listing and running calculators.

Usage:
    calcdeck list
    calcdeck run compound-interest principal=10000 rate=5 years=10
    calcdeck loan-report --principal 500000 --rate 8.5 --years 20 --outdir output
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Dict, List, Optional

from .calculators import (
    Calculator,
    calculators_by_category,
    evaluate,
)
from .config import DEFAULT_OUTPUT_DIR, VERSION
from .errors import CalculationError
from .finance import amortization_schedule, loan_summary
from .output import save_amortization_schedule
from .plotting import plot_amortization
from .reporting import format_number, result_lines

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def _parse_assignments(pairs: List[str]) -> Dict[str, str]:
    """Turn ``key=value`` tokens into an input mapping."""
    inputs: Dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key.strip():
            raise argparse.ArgumentTypeError(f"Expected key=value, got {pair!r}")
        inputs[key.strip()] = value
    return inputs


def _cmd_list(args: argparse.Namespace) -> int:
    for category, members in calculators_by_category().items():
        if not members:
            continue
        print(f"{category.value}:")
        for calc in members:
            fields = ", ".join(calc.entry.fields)
            print(f"  {calc.value:<24} {calc.title} ({fields})")
    return 0


def _cmd_run(args: argparse.Namespace) -> int:
    try:
        inputs = _parse_assignments(args.inputs)
    except argparse.ArgumentTypeError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    result = evaluate(args.calculator, inputs)
    if not result.ok:
        where = f" [{result.field}]" if result.field else ""
        print(f"Error ({result.error_kind}){where}: {result.error}", file=sys.stderr)
        return 1
    for line in result_lines(result.value, args.precision):
        print(line)
    return 0


def _cmd_loan_report(args: argparse.Namespace) -> int:
    try:
        summary = loan_summary(args.principal, args.rate, args.years)
        schedule = amortization_schedule(args.principal, args.rate, args.years)
    except CalculationError as e:
        print(f"Error ({e.kind}): {e}", file=sys.stderr)
        return 1

    csv_path = save_amortization_schedule(schedule, args.outdir)
    figure_path = plot_amortization(schedule, args.outdir)
    print(f"EMI: {format_number(summary.emi, 2)}")
    print(f"Total interest: {format_number(summary.total_interest, 2)}")
    print(f"Total payment: {format_number(summary.total_payment, 2)}")
    print(f"Wrote amortization schedule to {csv_path}")
    print(f"Wrote amortization figure to {figure_path}")
    return 0


def _build_arg_parser() -> argparse.ArgumentParser:
    """Build command-line parser for module execution."""
    parser = argparse.ArgumentParser(
        prog="calcdeck",
        description="Formula calculators for arithmetic, statistics, finance and more.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING).",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    list_parser = sub.add_parser("list", help="List calculators by category.")
    list_parser.set_defaults(func=_cmd_list)

    run_parser = sub.add_parser("run", help="Run one calculator with key=value inputs.")
    run_parser.add_argument(
        "calculator",
        help=f"Calculator name, e.g. {Calculator.COMPOUND_INTEREST.value}.",
    )
    run_parser.add_argument("inputs", nargs="*", help="Inputs as key=value pairs.")
    run_parser.add_argument(
        "--precision",
        type=int,
        default=None,
        help="Decimal places shown in results.",
    )
    run_parser.set_defaults(func=_cmd_run)

    loan_parser = sub.add_parser(
        "loan-report", help="Write an amortization schedule CSV and figure."
    )
    loan_parser.add_argument("--principal", type=float, required=True, help="Loan amount.")
    loan_parser.add_argument(
        "--rate", type=float, required=True, help="Annual interest rate in percent."
    )
    loan_parser.add_argument("--years", type=float, required=True, help="Loan tenure in years.")
    loan_parser.add_argument(
        "--outdir",
        default=DEFAULT_OUTPUT_DIR,
        help=f"Output directory (default: {DEFAULT_OUTPUT_DIR}).",
    )
    loan_parser.set_defaults(func=_cmd_loan_report)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entrypoint; returns the process exit status."""
    parser = _build_arg_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format=LOG_FORMAT)
    logger.debug("Running command %s", args.command)
    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
