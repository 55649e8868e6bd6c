"""
Dense Jacobi backend.

Element-based Jacobi iteration for A x = b. Every component of the new
iterate is computed from the previous full iterate; values computed in the
current sweep are never reused within it (that would be Gauss-Seidel).
"""

from typing import Any

from pymatalg.core.compute.timing import Timer
from pymatalg.core.exceptions import ConvergenceError, SingularMatrixError
from pymatalg.core.result import Result
from pymatalg.dense.matrix import Fill, Matrix
from pymatalg.linalg.design import LinearSystemDesign
from pymatalg.linalg.solution import JacobiParams


def is_diagonally_dominant(A: Matrix) -> bool:
    """Strict row diagonal dominance: |A(i,i)| > sum_{j != i} |A(i,j)| for every row."""
    for i in range(1, A.rows + 1):
        off_diagonal = sum(abs(A[i, j]) for j in range(1, A.cols + 1) if j != i)
        if not abs(A[i, i]) > off_diagonal:
            return False
    return True


class JacobiBackend:
    """
    Jacobi iteration with an absolute total-change stopping rule.

    Implements the Backend protocol for LinearSystemDesign -> JacobiParams.
    Configuration is fixed at construction time. With strict=True an
    unconverged run raises instead of returning its last iterate.
    """

    def __init__(self, max_iterations: int, tol: float, strict: bool = False):
        self.max_iterations = max_iterations
        self.tol = tol
        self.strict = strict

    @property
    def name(self) -> str:
        return 'dense_jacobi'

    def solve(self, design: LinearSystemDesign) -> Result[JacobiParams]:
        """
        Iterate from x = ones until sum |x_new(i) - x(i)| < tol.

        Per iteration:
            x_new(i) = (b(i) - sum_{j != i} A(i,j) x(j)) / A(i,i)

        Exhausting max_iterations is not an error unless strict: the last
        iterate is returned with converged=False.

        Raises:
            SingularMatrixError: If any diagonal entry A(i,i) is zero
            ConvergenceError: If strict and not converged. design.x is left
                untouched in that case.
        """
        timer = Timer()
        timer.start()

        A, b = design.A, design.b
        n = design.n
        zero = A.dtype.type(0)

        for i in range(1, n + 1):
            if A[i, i] == 0:
                raise SingularMatrixError(
                    f"Jacobi: diagonal entry A({i},{i}) is zero",
                    matrix_name='A',
                    pivot_index=i,
                    pivot_value=0.0,
                )

        warnings: list[str] = []
        dominant = is_diagonally_dominant(A)
        if not dominant:
            warnings.append(
                "A is not strictly diagonally dominant; Jacobi iteration may not converge"
            )

        x = type(b)(Fill.ONES)
        scratch = type(b)()
        history: list[float] = []
        converged = False
        error = float('inf')

        with timer.section('iterations'):
            for _ in range(self.max_iterations):
                for i in range(1, n + 1):
                    total = zero
                    for j in range(1, n + 1):
                        if j != i:
                            total += A[i, j] * x[j, 1]
                    scratch[i, 1] = (b[i, 1] - total) / A[i, i]

                error = float(sum(abs(scratch[i, 1] - x[i, 1]) for i in range(1, n + 1)))
                history.append(error)
                x.assign(scratch)

                if error < self.tol:
                    converged = True
                    break

        if not converged and self.strict:
            raise ConvergenceError(
                f"Jacobi did not converge after {len(history)} iterations",
                iterations=len(history),
                final_change=error,
                threshold=self.tol,
            )
        if not converged:
            warnings.append(
                f"Jacobi did not converge after {self.max_iterations} iterations "
                f"(final change {error:.3g}, tol {self.tol:.3g})"
            )

        design.x.assign(x)
        timer.stop()

        params = JacobiParams(
            x=design.x,
            converged=converged,
            iterations=len(history),
            final_error=error,
            error_history=tuple(history),
        )

        info: dict[str, Any] = {
            'method': 'jacobi',
            'n': n,
            'converged': converged,
            'iterations': len(history),
            'max_iterations': self.max_iterations,
            'tol': self.tol,
            'diagonally_dominant': dominant,
        }

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings),
        )
