"""Validated parsing of raw calculator inputs.

Every calculator field arrives as text (or occasionally as an already-typed
number). This module is the single place where that text becomes a finite
float, an integer, a numeric series or a matrix. Each parser either returns
a clean value or raises :class:`~calcdeck.errors.InvalidInput` naming the
field, so formula code never has to repeat ``isnan``/``isfinite`` checks.
"""

from __future__ import annotations

import math
import numbers
import re
from typing import Any, Optional, Sequence

import numpy as np

from .errors import DimensionMismatch, InvalidInput, OutOfRange

_SERIES_SEPARATOR = re.compile(r"[,\s]+")
_ROW_SEPARATOR = re.compile(r"[;\n]+")


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and value.strip() == "")


def parse_number(value: Any, field: str = "value") -> float:
    """Parse one finite floating-point number.

    Args:
        value: Raw field content. Strings are stripped before parsing; real
            numbers are accepted as-is. Booleans are rejected.
        field: Field name used in error messages.

    Returns:
        float: The parsed value.

    Raises:
        InvalidInput: If the value is missing, unparseable, not finite, or an
            integer too large for a float.
    """
    if _is_blank(value):
        raise InvalidInput(f"{field} is required", field=field)
    if isinstance(value, bool):
        raise InvalidInput(f"{field} must be a number, got {value!r}", field=field)

    if isinstance(value, numbers.Real):
        try:
            number = float(value)
        except OverflowError:
            raise InvalidInput(f"{field} is too large to represent", field=field)
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            raise InvalidInput(f"Invalid number for {field}: {value!r}", field=field)
    else:
        raise InvalidInput(
            f"{field} must be numeric, got {type(value).__name__}", field=field
        )

    if not math.isfinite(number):
        raise InvalidInput(f"{field} must be finite, got {value!r}", field=field)
    return number


def parse_optional_number(value: Any, field: str = "value") -> Optional[float]:
    """Parse a number, treating a blank field as ``None``."""
    if _is_blank(value):
        return None
    return parse_number(value, field)


def parse_integer(
    value: Any, field: str = "value", minimum: Optional[int] = None
) -> int:
    """Parse a whole number.

    Args:
        value: Raw field content.
        field: Field name used in error messages.
        minimum: Optional inclusive lower bound.

    Returns:
        int: The parsed integer.

    Raises:
        InvalidInput: If the value is not a whole number or is below
            ``minimum``.
    """
    number = parse_number(value, field)
    if not number.is_integer():
        raise InvalidInput(f"{field} must be a whole number, got {value!r}", field=field)
    integer = int(number)
    if minimum is not None and integer < minimum:
        raise InvalidInput(f"{field} must be at least {minimum}, got {integer}", field=field)
    return integer


def parse_series(value: Any, field: str = "data", min_length: int = 1) -> np.ndarray:
    """Parse a comma- or whitespace-separated list of numbers.

    Args:
        value: Text such as ``"1, 2 3,4"`` or a sequence of numbers.
        field: Field name used in error messages.
        min_length: Minimum number of values required.

    Returns:
        numpy.ndarray: One-dimensional float array in input order.

    Raises:
        InvalidInput: If any token is not a finite number or fewer than
            ``min_length`` values are present.
    """
    if _is_blank(value):
        tokens: Sequence[Any] = []
    elif isinstance(value, str):
        tokens = [tok for tok in _SERIES_SEPARATOR.split(value.strip()) if tok]
    else:
        tokens = list(np.ravel(np.asarray(value, dtype=object)))

    values = []
    for token in tokens:
        try:
            values.append(parse_number(token, field))
        except InvalidInput:
            raise InvalidInput(f"Invalid number: {token}", field=field)

    if len(values) < min_length:
        if min_length == 1:
            raise InvalidInput(f"{field} must contain at least one number", field=field)
        raise InvalidInput(
            f"{field} must contain at least {min_length} numbers, got {len(values)}",
            field=field,
        )
    return np.asarray(values, dtype=float)


def parse_matrix(value: Any, field: str = "matrix") -> np.ndarray:
    """Parse a rectangular matrix.

    Text input separates rows with ``;`` or newlines and entries with commas
    or whitespace, e.g. ``"1 2; 3 4"``. Nested sequences are also accepted.

    Raises:
        InvalidInput: If the matrix is empty or contains a non-finite entry.
        DimensionMismatch: If rows have different lengths.
    """
    if _is_blank(value):
        raise InvalidInput(f"{field} is required", field=field)

    if isinstance(value, str):
        raw_rows = [row for row in _ROW_SEPARATOR.split(value.strip()) if row.strip()]
    elif isinstance(value, np.ndarray):
        raw_rows = [list(row) for row in np.atleast_2d(value)]
    else:
        raw_rows = list(value)

    rows = [parse_series(row, field) for row in raw_rows]
    if not rows:
        raise InvalidInput(f"{field} must have at least one row", field=field)

    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise DimensionMismatch(f"All rows of {field} must have the same length", field=field)
    return np.vstack(rows)


def require_positive(value: float, field: str) -> float:
    if value <= 0:
        raise InvalidInput(f"{field} must be positive, got {value}", field=field)
    return value


def require_non_negative(value: float, field: str) -> float:
    if value < 0:
        raise InvalidInput(f"{field} cannot be negative, got {value}", field=field)
    return value


def require_in_range(value: float, low: float, high: float, field: str) -> float:
    if not low <= value <= high:
        raise InvalidInput(
            f"{field} must be between {low} and {high}, got {value}", field=field
        )
    return value


def require_finite_result(value: float, what: str = "result") -> float:
    """Reject an overflowed or undefined computed value.

    Raises:
        OutOfRange: If ``value`` is infinite or NaN.
    """
    if not math.isfinite(value):
        raise OutOfRange(f"{what} is too large to represent")
    return value


def require_finite_array(values: np.ndarray, what: str = "result") -> np.ndarray:
    """Array counterpart of :func:`require_finite_result`."""
    if not np.isfinite(values).all():
        raise OutOfRange(f"{what} is too large to represent")
    return values
