"""
Solver dispatch for dense linear algebra.

This module provides the public solver functions. Each validates its
inputs by building a design, runs a backend, re-emits backend warnings,
and wraps the result.
"""

import numbers

from pymatalg.core.exceptions import DimensionError, ValidationError
from pymatalg.core.validation import check_positive, check_same_dtype
from pymatalg.dense.matrix import Matrix
from pymatalg.linalg.backends.doolittle import DoolittleBackend
from pymatalg.linalg.backends.jacobi import JacobiBackend
from pymatalg.linalg.backends.substitution import back_substitution, forward_substitution
from pymatalg.linalg.design import FactorizationDesign, LinearSystemDesign
from pymatalg.linalg.solution import JacobiSolution, LUSolution


def lu_doolittle(
    A: Matrix,
    L: Matrix | None = None,
    U: Matrix | None = None,
) -> LUSolution:
    """
    LU factorization by Doolittle's algorithm, without pivoting.

    Args:
        A: Square matrix with a floating scalar type. Must be materialized.
        L: Optional output matrix of A's type; overwritten with the unit
           lower triangular factor.
        U: Optional output matrix of A's type; overwritten with the upper
           triangular factor.

    Returns:
        LUSolution with L, U (the caller's matrices when given)

    Raises:
        NotSquareError: If A is not square
        ScalarTypeError: If A is integral, or L/U have another dtype
        DimensionError: If L/U have another shape
        SingularMatrixError: If a pivot to divide by is zero or negligible.
            L and U are left untouched in that case.

    Example:
        >>> M3 = Matrix[np.float64, 3, 3]
        >>> A = M3([[1, 1, 2], [2, 1, 3], [3, 1, 1]])
        >>> lu = lu_doolittle(A)
        >>> lu.reconstruct().allclose(A)
        True
    """
    design = FactorizationDesign.build(A, L, U)
    result = DoolittleBackend().solve(design)
    result.emit_warnings()
    return LUSolution(_result=result, _design=design)


def lu_solve(factors: LUSolution, b: Matrix) -> Matrix:
    """
    Solve A x = b from the LU factors of A.

    Args:
        factors: Result of lu_doolittle(A)
        b: n x 1 column vector with A's scalar type

    Returns:
        New n x 1 column vector x

    Raises:
        DimensionError: If b is not n x 1
        ScalarTypeError: If b's dtype differs from the factors'
        SingularMatrixError: If U has a zero or negligible diagonal entry
    """
    if not isinstance(factors, LUSolution):
        raise ValidationError(
            f"factors: expected an LUSolution, got {type(factors).__name__}"
        )
    if not isinstance(b, Matrix):
        raise ValidationError(f"b: expected a Matrix, got {type(b).__name__}")

    n = factors.n
    if b.shape != (n, 1):
        raise DimensionError(
            f"b: expected {n}x1 column vector, got {b.rows}x{b.cols}",
            expected=(n, 1),
            actual=b.shape,
        )
    check_same_dtype(factors.U, b, 'b')

    y = forward_substitution(factors.L, b)
    return back_substitution(factors.U, y)


def solve_jacobi(
    A: Matrix,
    b: Matrix,
    *,
    x: Matrix | None = None,
    max_iterations: int = 100,
    tol: float = 1e-10,
    strict: bool = False,
) -> JacobiSolution:
    """
    Approximate the solution of A x = b by Jacobi iteration.

    Starts from the all-ones vector and stops when the total absolute
    change between successive iterates drops below ``tol``.

    Args:
        A: Square matrix with a floating scalar type and nonzero diagonal.
           Strict diagonal dominance guarantees convergence.
        b: n x 1 right-hand side with A's scalar type
        x: Optional n x 1 output vector; overwritten with the final iterate
        max_iterations: Iteration budget (>= 1)
        tol: Absolute tolerance on sum |x_new - x| (> 0)
        strict: Raise ConvergenceError instead of returning an
            unconverged iterate

    Returns:
        JacobiSolution. Check ``converged``: when the budget runs out the
        last iterate is returned with converged=False and a RuntimeWarning
        is emitted.

    Raises:
        NotSquareError: If A is not square
        DimensionError: If b or x is not n x 1
        ScalarTypeError: If dtypes differ or A is integral
        ValidationError: If max_iterations or tol is invalid
        SingularMatrixError: If a diagonal entry of A is zero
        ConvergenceError: Only with strict=True, when not converged. x is
            left untouched in that case.

    Example:
        >>> M2 = Matrix[np.float64, 2, 2]
        >>> V2 = ColVector[np.float64, 2]
        >>> sol = solve_jacobi(M2([[10, 1], [2, 12]]), V2([[12], [25]]))
        >>> sol.converged
        True
    """
    if isinstance(max_iterations, bool) or not isinstance(max_iterations, numbers.Integral):
        raise ValidationError(f"max_iterations: expected an integer, got {max_iterations!r}")
    if max_iterations < 1:
        raise ValidationError(f"max_iterations: must be at least 1, got {max_iterations}")
    check_positive(tol, 'tol')

    design = LinearSystemDesign.build(A, b, x)
    backend = JacobiBackend(
        max_iterations=int(max_iterations), tol=float(tol), strict=bool(strict)
    )
    result = backend.solve(design)
    result.emit_warnings()

    return JacobiSolution(_result=result, _design=design)
