"""
Dense solvers built on the matrix algebra.

Public API:
    lu_doolittle(A, L=None, U=None) -> LUSolution
    lu_solve(factors, b) -> Matrix
    solve_jacobi(A, b, *, x=None, max_iterations=100, tol=1e-10) -> JacobiSolution

Solvers take materialized matrices, never lazy expressions.

Example:
    >>> from pymatalg.linalg import lu_doolittle
    >>> lu = lu_doolittle(A)
    >>> x = lu.solve(b)
    >>> print(lu.summary())
"""

from pymatalg.linalg.design import FactorizationDesign, LinearSystemDesign
from pymatalg.linalg.solution import JacobiParams, JacobiSolution, LUParams, LUSolution
from pymatalg.linalg.solvers import lu_doolittle, lu_solve, solve_jacobi

__all__ = [
    "lu_doolittle",
    "lu_solve",
    "solve_jacobi",
    "FactorizationDesign",
    "LinearSystemDesign",
    "LUSolution",
    "LUParams",
    "JacobiSolution",
    "JacobiParams",
]
