"""
Linear algebra for the matrix and vector calculators.

Modules:
    matrix:
        Add, subtract, multiply and cofactor-expansion determinant with
        explicit shape checks and a 5x5 determinant cap.

    vector:
        Vector3 value type with add, subtract, dot, cross and scaling.
"""

from .matrix import (
    MatrixOperation,
    add,
    apply_matrix_operation,
    as_matrix,
    determinant,
    multiply,
    subtract,
)
from .vector import Vector3, VectorOperation, apply_vector_operation

__all__ = [
    "MatrixOperation",
    "add",
    "apply_matrix_operation",
    "as_matrix",
    "determinant",
    "multiply",
    "subtract",
    "Vector3",
    "VectorOperation",
    "apply_vector_operation",
]
