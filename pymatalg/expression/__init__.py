"""
Lazy matrix expressions.

Operators on matrices build expression graphs; nothing is computed until a
graph is materialized with ``expr.eval()``, ``Matrix[...](expr)`` or
``M.assign(expr)``.

Public API:
    MatrixExpression: abstract node (shape, dtype, at)
    BinaryExpression, ScalarExpression, Op: operator node variants
    accumulate, trace: reductions
"""

from pymatalg.expression.nodes import (
    BinaryExpression,
    MatrixExpression,
    Op,
    ScalarExpression,
)
from pymatalg.expression.reductions import accumulate, trace

__all__ = [
    "MatrixExpression",
    "BinaryExpression",
    "ScalarExpression",
    "Op",
    "accumulate",
    "trace",
]
