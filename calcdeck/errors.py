"""Error taxonomy shared by every calculator.

Pure formula functions raise these exceptions; the calculator boundary in
:mod:`calcdeck.calculators` converts them into result-or-error values so no
failure ever reaches a caller as a raw exception or a silent NaN.

Hierarchy:
    CalculationError (ValueError)
        InvalidInput       unparseable, missing or constraint-violating field
            DomainError    mathematically undefined operation
        DimensionMismatch  matrix/vector shape errors
        OutOfRange         numeric overflow guard

A ``DomainError`` is a constraint violation too (a zero resistance, an even
root of a negative number), so it can be caught as ``InvalidInput``.
"""

from __future__ import annotations

from typing import Optional


class CalculationError(ValueError):
    """Base class for all calculator failures.

    Attributes:
        kind: Short machine-readable error category.
        field: Name of the offending input field, when one is known.
    """

    kind = "calculation_error"

    def __init__(self, message: str, field: Optional[str] = None) -> None:
        super().__init__(message)
        self.field = field


class InvalidInput(CalculationError):
    kind = "invalid_input"


class DimensionMismatch(CalculationError):
    kind = "dimension_mismatch"


class DomainError(InvalidInput):
    """Mathematically undefined operation on otherwise well-formed input."""

    kind = "domain_error"


class OutOfRange(CalculationError):
    kind = "out_of_range"
