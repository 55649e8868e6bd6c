"""
Solver designs.

A design validates the operands of a solver once, at the boundary, and
carries them (plus the caller's output matrices) to a backend. Backends
trust a design and never re-validate.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pymatalg.core.exceptions import DimensionError, ValidationError
from pymatalg.core.validation import (
    check_floating,
    check_same_dtype,
    check_same_shape,
    check_square,
)
from pymatalg.dense.matrix import Matrix, matrix_type
from pymatalg.expression.nodes import MatrixExpression


def _check_materialized(value: Any, name: str) -> Matrix:
    if isinstance(value, Matrix):
        return value
    if isinstance(value, MatrixExpression):
        raise ValidationError(
            f"{name}: solvers need a materialized Matrix; call .eval() on the expression"
        )
    raise ValidationError(f"{name}: expected a Matrix, got {type(value).__name__}")


def _check_output(value: Matrix | None, like: Matrix, name: str) -> Matrix:
    """Validate a caller-provided output matrix, or allocate one of ``like``'s type."""
    if value is None:
        return type(like)()
    value = _check_materialized(value, name)
    check_same_shape(like, value, name)
    return value


@dataclass(frozen=True)
class FactorizationDesign:
    """
    Validated input for LU factorization.

    Attributes:
        A: Square floating matrix to factor
        L, U: Output matrices of A's type, overwritten by the backend
    """
    A: Matrix
    L: Matrix
    U: Matrix

    @classmethod
    def build(
        cls,
        A: Any,
        L: Matrix | None = None,
        U: Matrix | None = None,
    ) -> FactorizationDesign:
        A = _check_materialized(A, 'A')
        check_square(A, 'LU factorization')
        check_floating(A, 'LU factorization')
        L = _check_output(L, A, 'L')
        U = _check_output(U, A, 'U')
        if L is A or U is A or L is U:
            raise ValidationError("L, U and A must be distinct matrices")
        return cls(A=A, L=L, U=U)

    @property
    def n(self) -> int:
        return self.A.rows


@dataclass(frozen=True)
class LinearSystemDesign:
    """
    Validated input for solving A x = b.

    Attributes:
        A: Square floating coefficient matrix (n x n)
        b: Right-hand side column vector (n x 1), same dtype as A
        x: Output column vector (n x 1), overwritten by the backend
    """
    A: Matrix
    b: Matrix
    x: Matrix

    @classmethod
    def build(cls, A: Any, b: Any, x: Matrix | None = None) -> LinearSystemDesign:
        A = _check_materialized(A, 'A')
        n = check_square(A, 'linear system')
        check_floating(A, 'linear system')

        b = _check_materialized(b, 'b')
        if b.shape != (n, 1):
            raise DimensionError(
                f"b: expected {n}x1 column vector, got {b.rows}x{b.cols}",
                expected=(n, 1),
                actual=b.shape,
            )
        check_same_dtype(A, b, 'b')

        if x is None:
            x = matrix_type(A.dtype, n, 1)()
        else:
            x = _check_materialized(x, 'x')
            check_same_shape(b, x, 'x')
            if x is b:
                raise ValidationError("x and b must be distinct matrices")
        return cls(A=A, b=b, x=x)

    @property
    def n(self) -> int:
        return self.A.rows
