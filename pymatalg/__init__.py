"""
pymatalg: fixed-shape matrix algebra with lazy expressions.

Matrix types carry their scalar type and shape; operators build expression
graphs that are evaluated cell by cell only when materialized. Dense
solvers (Doolittle LU, Jacobi iteration) sit on top of the algebra.

Submodules:
    expression: Lazy expression nodes and reductions
    dense: Dense matrix/vector storage
    linalg: LU factorization and Jacobi iteration

Example:
    >>> import numpy as np
    >>> from pymatalg import Matrix
    >>> M = Matrix[np.float64, 1, 2]
    >>> A, B, C = M([[5, 6]]), M([[2, 3]]), M([[3, 1]])
    >>> D = M(A + B + C - B)
    >>> D.to_numpy().tolist()
    [[8.0, 7.0]]
"""

__version__ = "0.1.0"

from pymatalg.core.exceptions import (
    PyMatAlgError,
    ValidationError,
    DimensionError,
    ScalarTypeError,
    NotSquareError,
    IndexOutOfRangeError,
    NumericalError,
    SingularMatrixError,
    ConvergenceError,
)
from pymatalg.expression import MatrixExpression, accumulate, trace
from pymatalg.dense import ColVector, Fill, Matrix, RowVector
from pymatalg.linalg import (
    JacobiSolution,
    LUSolution,
    lu_doolittle,
    lu_solve,
    solve_jacobi,
)

__all__ = [
    "__version__",
    # Types
    "Matrix",
    "RowVector",
    "ColVector",
    "Fill",
    "MatrixExpression",
    # Reductions
    "accumulate",
    "trace",
    # Solvers
    "lu_doolittle",
    "lu_solve",
    "solve_jacobi",
    "LUSolution",
    "JacobiSolution",
    # Exceptions
    "PyMatAlgError",
    "ValidationError",
    "DimensionError",
    "ScalarTypeError",
    "NotSquareError",
    "IndexOutOfRangeError",
    "NumericalError",
    "SingularMatrixError",
    "ConvergenceError",
]
