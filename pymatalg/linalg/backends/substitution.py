"""
Triangular substitution with LU factors.

Solves L y = b (L unit lower triangular) then U x = y (U upper triangular)
through the Matrix element contract.
"""

from pymatalg.core.compute.tolerances import pivot_threshold
from pymatalg.core.exceptions import SingularMatrixError
from pymatalg.dense.matrix import Matrix


def forward_substitution(L: Matrix, b: Matrix) -> Matrix:
    """Solve L y = b for unit lower triangular L."""
    n = L.rows
    zero = L.dtype.type(0)
    y = type(b)()
    for i in range(1, n + 1):
        total = zero
        for k in range(1, i):
            total += L[i, k] * y[k, 1]
        y[i, 1] = b[i, 1] - total
    return y


def back_substitution(U: Matrix, y: Matrix) -> Matrix:
    """
    Solve U x = y for upper triangular U.

    Raises:
        SingularMatrixError: If a diagonal entry of U is zero or negligible
    """
    n = U.rows
    zero = U.dtype.type(0)
    scale = max((abs(value) for value in U), default=0.0)
    threshold = pivot_threshold(U.dtype, n, float(scale))

    x = type(y)()
    for i in range(n, 0, -1):
        diagonal = U[i, i]
        if abs(diagonal) <= threshold:
            raise SingularMatrixError(
                f"back substitution: U({i},{i}) = {diagonal} is zero or negligible",
                matrix_name='U',
                pivot_index=i,
                pivot_value=diagonal.item(),
            )
        total = zero
        for k in range(i + 1, n + 1):
            total += U[i, k] * x[k, 1]
        x[i, 1] = (y[i, 1] - total) / diagonal
    return x
