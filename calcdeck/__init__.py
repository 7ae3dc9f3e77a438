"""
A Python package of stateless formula calculators.

Covers basic and scientific arithmetic, statistics, finance, engineering
physics, unit and currency conversion, health and chemistry formulas, date
arithmetic and computer-science utilities.

Modules:
    - calculators: Calculator registry and the ``evaluate`` result-or-error boundary.
    - parsing: Converts raw text fields into validated numbers, series and matrices.
    - arithmetic, complex_numbers, linalg: Basic and scientific math.
    - stats: Descriptive statistics, regression and probability distributions.
    - finance: Interest, loan, investment, profit/loss and tax formulas.
    - physics, units, currency: Engineering formulas and conversions.
    - specialized: Health, chemistry and construction estimates.
    - dates, computing: Calendar arithmetic and number-system utilities.
    - reporting, output, plotting: Display formatting, CSV export and figures.
"""

from .config import VERSION

__version__ = VERSION

from .calculators import (
    CalculationResult,
    Calculator,
    Category,
    calculators_by_category,
    evaluate,
    resolve_calculator,
)
from .errors import (
    CalculationError,
    DimensionMismatch,
    DomainError,
    InvalidInput,
    OutOfRange,
)
from .finance import amortization_schedule, loan_summary
from .output import save_amortization_schedule, save_descriptive_summary
from .plotting import (
    plot_amortization,
    plot_distribution,
    plot_regression,
    setup_plot_style,
)
from .reporting import format_number, format_value, result_lines
from .stats import describe, linear_regression

__all__ = [
    "__version__",
    # Evaluation boundary
    "CalculationResult",
    "Calculator",
    "Category",
    "calculators_by_category",
    "evaluate",
    "resolve_calculator",
    # Errors
    "CalculationError",
    "DimensionMismatch",
    "DomainError",
    "InvalidInput",
    "OutOfRange",
    # Formulas commonly used directly
    "amortization_schedule",
    "describe",
    "linear_regression",
    "loan_summary",
    # Reporting and output
    "format_number",
    "format_value",
    "result_lines",
    "save_amortization_schedule",
    "save_descriptive_summary",
    "plot_amortization",
    "plot_distribution",
    "plot_regression",
    "setup_plot_style",
]
