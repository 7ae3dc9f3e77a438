"""Matrix arithmetic on small dense matrices.

Matrices are two-dimensional float arrays. Shape rules:
    add/subtract  A and B have identical shapes
    multiply      A.columns == B.rows
    determinant   A is square and no larger than 5x5

The determinant is computed by recursive cofactor expansion along the first
row, which is O(n!) and therefore capped in the core rather than left to the
input form.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional, Union

import numpy as np

from ..config import MAX_DETERMINANT_SIZE
from ..errors import DimensionMismatch, InvalidInput, OutOfRange
from ..parsing import parse_matrix, require_finite_array, require_finite_result


class MatrixOperation(Enum):
    ADD = "add"
    SUBTRACT = "subtract"
    MULTIPLY = "multiply"
    DETERMINANT = "determinant"


def as_matrix(value: Any, name: str = "matrix") -> np.ndarray:
    """Coerce nested sequences or text into a validated 2-D float array."""
    return parse_matrix(value, field=name)


def add(a: Any, b: Any) -> np.ndarray:
    ma, mb = as_matrix(a, "A"), as_matrix(b, "B")
    if ma.shape != mb.shape:
        raise DimensionMismatch(
            f"Matrices must have the same dimensions, got {ma.shape} and {mb.shape}"
        )
    with np.errstate(over="ignore", invalid="ignore"):
        total = ma + mb
    return require_finite_array(total, "Matrix sum")


def subtract(a: Any, b: Any) -> np.ndarray:
    ma, mb = as_matrix(a, "A"), as_matrix(b, "B")
    if ma.shape != mb.shape:
        raise DimensionMismatch(
            f"Matrices must have the same dimensions, got {ma.shape} and {mb.shape}"
        )
    with np.errstate(over="ignore", invalid="ignore"):
        difference = ma - mb
    return require_finite_array(difference, "Matrix difference")


def multiply(a: Any, b: Any) -> np.ndarray:
    ma, mb = as_matrix(a, "A"), as_matrix(b, "B")
    if ma.shape[1] != mb.shape[0]:
        raise DimensionMismatch(
            "Matrix dimensions not compatible for multiplication: "
            f"A has {ma.shape[1]} columns, B has {mb.shape[0]} rows"
        )
    with np.errstate(over="ignore", invalid="ignore"):
        product = ma @ mb
    return require_finite_array(product, "Matrix product")


def _cofactor_determinant(m: np.ndarray) -> float:
    size = m.shape[0]
    if size == 1:
        return float(m[0, 0])
    if size == 2:
        return float(m[0, 0] * m[1, 1] - m[0, 1] * m[1, 0])
    det = 0.0
    for col in range(size):
        minor = np.delete(m[1:], col, axis=1)
        sign = 1.0 if col % 2 == 0 else -1.0
        det += sign * m[0, col] * _cofactor_determinant(minor)
    return det


def determinant(a: Any) -> float:
    """Determinant by cofactor expansion along the first row.

    Raises:
        DimensionMismatch: If the matrix is not square.
        OutOfRange: If the matrix is larger than 5x5 or the
            determinant overflows.
    """
    m = as_matrix(a, "A")
    rows, cols = m.shape
    if rows != cols:
        raise DimensionMismatch("Can only calculate determinant of square matrices")
    if rows > MAX_DETERMINANT_SIZE:
        raise OutOfRange(
            f"Determinant is limited to {MAX_DETERMINANT_SIZE}x{MAX_DETERMINANT_SIZE} "
            f"matrices, got {rows}x{cols}"
        )
    with np.errstate(over="ignore", invalid="ignore"):
        det = _cofactor_determinant(m)
    return require_finite_result(det, "Determinant")


def apply_matrix_operation(
    operation: MatrixOperation, a: Any, b: Optional[Any] = None
) -> Union[np.ndarray, float]:
    if operation is MatrixOperation.DETERMINANT:
        return determinant(a)
    if b is None:
        raise InvalidInput(f"Matrix B is required for {operation.value}", field="B")
    if operation is MatrixOperation.ADD:
        return add(a, b)
    if operation is MatrixOperation.SUBTRACT:
        return subtract(a, b)
    return multiply(a, b)
