"""
Whole-matrix reductions over expressions.

These evaluate cells directly through ``at`` and never materialize the
expression first.
"""

from typing import Any

from pymatalg.core.validation import check_square
from pymatalg.expression.nodes import MatrixExpression


def accumulate(expr: MatrixExpression) -> Any:
    """Sum of every cell, in the expression's scalar type."""
    total = expr.dtype.type(0)
    for r, c in expr.cells():
        total += expr.at(r, c)
    return total


def trace(expr: MatrixExpression) -> Any:
    """
    Sum of the diagonal.

    Raises:
        NotSquareError: If the expression is not square
    """
    n = check_square(expr, 'trace')
    total = expr.dtype.type(0)
    for i in range(1, n + 1):
        total += expr.at(i, i)
    return total
