"""
Solver solution types.

Contains the parameter payloads produced by backends and the user-facing
solution wrappers.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from pymatalg.core.result import Result
from pymatalg.dense.matrix import Matrix

if TYPE_CHECKING:
    from pymatalg.linalg.design import FactorizationDesign, LinearSystemDesign


@dataclass(frozen=True)
class LUParams:
    """
    Parameter payload for LU factorization.

    L is unit lower triangular, U upper triangular, A = L U.
    """
    L: Matrix
    U: Matrix


@dataclass(frozen=True)
class JacobiParams:
    """Parameter payload for the Jacobi solver."""
    x: Matrix
    converged: bool
    iterations: int
    final_error: float
    error_history: tuple[float, ...]


@dataclass
class LUSolution:
    """
    User-facing LU factorization results.

    The L and U exposed here are the caller's output matrices when they
    were passed in, so they are also updated in place.
    """
    _result: Result[LUParams]
    _design: 'FactorizationDesign'

    @property
    def L(self) -> Matrix:
        return self._result.params.L

    @property
    def U(self) -> Matrix:
        return self._result.params.U

    @property
    def n(self) -> int:
        return self._design.n

    def reconstruct(self) -> Matrix:
        """Materialized L U, equal to the factored A up to rounding."""
        return (self.L @ self.U).eval()

    def solve(self, b: Matrix) -> Matrix:
        """Solve A x = b by forward and back substitution with these factors."""
        from pymatalg.linalg.solvers import lu_solve
        return lu_solve(self, b)

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        lines = [
            "LU factorization (Doolittle, no pivoting)",
            "=" * 42,
            f"Order: {self.n}x{self.n}   dtype: {self.L.dtype}",
            f"Smallest |pivot|: {self.info['min_abs_pivot']:.6g}",
            "",
            "L:",
            str(self.L).rstrip("\n"),
            "U:",
            str(self.U).rstrip("\n"),
            "-" * 42,
            f"Backend: {self.backend_name}",
        ]
        if self.timing:
            lines.append(f"Time: {self.timing.get('total_seconds', 0):.4f}s")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"LUSolution(n={self.n}, dtype={self.L.dtype})"


@dataclass
class JacobiSolution:
    """
    User-facing Jacobi results.

    Non-convergence is not an error: ``x`` then holds the last iterate and
    ``converged`` is False. Always check ``converged`` before trusting x.
    """
    _result: Result[JacobiParams]
    _design: 'LinearSystemDesign'

    @property
    def x(self) -> Matrix:
        return self._result.params.x

    @property
    def converged(self) -> bool:
        return self._result.params.converged

    @property
    def iterations(self) -> int:
        return self._result.params.iterations

    @property
    def final_error(self) -> float:
        """Total absolute change over the last iteration."""
        return self._result.params.final_error

    @property
    def error_history(self) -> tuple[float, ...]:
        return self._result.params.error_history

    def residual_norm(self) -> float:
        """Sum of |b - A x| over all rows."""
        residual = self._design.b - self._design.A @ self.x
        return float(sum(abs(value) for value in residual.eval()))

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        status = "converged" if self.converged else "NOT converged"
        lines = [
            "Jacobi iteration",
            "=" * 42,
            f"Order: {self._design.n}x{self._design.n}   dtype: {self.x.dtype}",
            f"Status: {status} after {self.iterations} iterations",
            f"Final change: {self.final_error:.6g} (tol={self.info['tol']:.3g})",
            f"Diagonally dominant: {self.info['diagonally_dominant']}",
            "",
            "x:",
            str(self.x).rstrip("\n"),
            "-" * 42,
            f"Backend: {self.backend_name}",
        ]
        if self.timing:
            lines.append(f"Time: {self.timing.get('total_seconds', 0):.4f}s")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"JacobiSolution(n={self._design.n}, converged={self.converged}, "
            f"iterations={self.iterations}, final_error={self.final_error:.3g})"
        )
