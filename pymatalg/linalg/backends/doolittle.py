"""
Dense Doolittle LU backend.

Factors a square matrix A into a unit lower triangular L and an upper
triangular U with A = L U, working only through the 1-indexed Matrix
element contract. No row pivoting is performed.
"""

from typing import Any

from pymatalg.core.compute.timing import Timer
from pymatalg.core.compute.tolerances import pivot_threshold
from pymatalg.core.exceptions import SingularMatrixError
from pymatalg.core.result import Result
from pymatalg.dense.matrix import Fill
from pymatalg.linalg.design import FactorizationDesign
from pymatalg.linalg.solution import LUParams


class DoolittleBackend:
    """
    LU factorization by Doolittle's algorithm.

    Implements the Backend protocol for FactorizationDesign -> LUParams.
    """

    @property
    def name(self) -> str:
        return 'dense_doolittle'

    def solve(self, design: FactorizationDesign) -> Result[LUParams]:
        """
        Factor design.A into design.L and design.U.

        Algorithm, for j = 1..n:
            1. U(j,i) = A(j,i) - sum_{k<j} L(j,k) U(k,i)          for i = j..n
            2. L(i,j) = (A(i,j) - sum_{k<j} L(i,k) U(k,j)) / U(j,j)  for i = j+1..n

        The factors are built in scratch matrices and copied into the
        caller's L and U only once elimination has succeeded.

        Raises:
            SingularMatrixError: If a pivot that must be divided by is
                zero or below n * eps * max|A|
        """
        timer = Timer()
        timer.start()

        A = design.A
        n = design.n
        zero = A.dtype.type(0)

        with timer.section('scale'):
            scale = max((abs(value) for value in A), default=0.0)
            threshold = pivot_threshold(A.dtype, n, float(scale))

        L = type(A)(Fill.EYE)
        U = type(A)(Fill.ZEROS)
        min_abs_pivot = float('inf')

        with timer.section('elimination'):
            for j in range(1, n + 1):
                for i in range(j, n + 1):
                    total = zero
                    for k in range(1, j):
                        total += L[j, k] * U[k, i]
                    U[j, i] = A[j, i] - total

                pivot = U[j, j]
                min_abs_pivot = min(min_abs_pivot, float(abs(pivot)))
                if j < n and abs(pivot) <= threshold:
                    raise SingularMatrixError(
                        f"LU factorization: pivot U({j},{j}) = {pivot} is zero or "
                        f"below {threshold:.3g}; Doolittle without pivoting cannot proceed",
                        matrix_name='A',
                        pivot_index=j,
                        pivot_value=pivot.item(),
                    )

                for i in range(j + 1, n + 1):
                    total = zero
                    for k in range(1, j):
                        total += L[i, k] * U[k, j]
                    L[i, j] = (A[i, j] - total) / pivot

        design.L.assign(L)
        design.U.assign(U)
        timer.stop()

        warnings: tuple[str, ...] = ()
        if n and abs(U[n, n]) <= threshold:
            warnings = (
                f"U({n},{n}) = {U[n, n]} is zero or negligible; A is singular "
                f"and the factors cannot be used to solve",
            )

        info: dict[str, Any] = {
            'method': 'doolittle',
            'n': n,
            'pivoting': False,
            'min_abs_pivot': min_abs_pivot if n else 0.0,
            'pivot_threshold': threshold,
        }

        return Result(
            params=LUParams(L=design.L, U=design.U),
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=warnings,
        )
