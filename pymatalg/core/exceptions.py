"""
Exception hierarchy for pymatalg.

All exceptions inherit from PyMatAlgError to allow catching any
library-specific error. Domain-specific exceptions should inherit from
the appropriate base class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyMatAlgError(Exception):
    """Base exception for all pymatalg errors."""
    pass


class ValidationError(PyMatAlgError):
    """
    Input validation failed.

    Raised when user-provided inputs or operand combinations fail
    validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Matrix dimensions are incorrect or inconsistent.

    Raised when two operands of an operator have incompatible shapes, or
    when construction data does not match the declared shape.

    Attributes:
        expected: Expected (rows, cols), if applicable
        actual: Actual (rows, cols) or length, if applicable
    """

    def __init__(
        self,
        message: str,
        expected: tuple[int, ...] | None = None,
        actual: tuple[int, ...] | None = None,
    ):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class ScalarTypeError(ValidationError):
    """
    Scalar types of operands do not match, or are not numeric.

    There is no implicit promotion: every operand of a binary operator
    must share exactly the same dtype.
    """
    pass


class NotSquareError(ValidationError):
    """
    Operation requires a square matrix.

    Raised by identity fill, trace, and the solvers.

    Attributes:
        shape: The offending (rows, cols)
    """

    def __init__(self, message: str, shape: tuple[int, int] | None = None):
        super().__init__(message)
        self.shape = shape


class IndexOutOfRangeError(PyMatAlgError, IndexError):
    """
    Element or traversal index lies outside the declared shape.

    Indices are 1-based; 0 and negative indices are always out of range.

    Attributes:
        index: The rejected index tuple
        shape: The (rows, cols) of the matrix that was accessed
    """

    def __init__(
        self,
        message: str,
        index: tuple[int, ...] | None = None,
        shape: tuple[int, int] | None = None,
    ):
        super().__init__(message)
        self.index = index
        self.shape = shape


class NumericalError(PyMatAlgError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular or nearly singular for the requested algorithm.

    Raised by LU factorization on a zero or near-zero pivot and by the
    Jacobi solver on a zero diagonal entry.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        pivot_index: 1-based index of the offending pivot/diagonal entry
        pivot_value: The offending value, if available
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        pivot_index: int | None = None,
        pivot_value: float | None = None,
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.pivot_index = pivot_index
        self.pivot_value = pivot_value


class ConvergenceError(PyMatAlgError):
    """
    Iterative algorithm failed to converge.

    Only raised when a caller explicitly asks for strict convergence;
    by default iterative solvers return their last iterate and report
    convergence status on the solution object.

    Attributes:
        iterations: Number of iterations completed
        final_change: Final change between successive iterates
        threshold: The convergence threshold that was not met
    """

    def __init__(
        self,
        message: str,
        iterations: int,
        final_change: float | None = None,
        threshold: float | None = None,
    ):
        super().__init__(message)
        self.iterations = iterations
        self.final_change = final_change
        self.threshold = threshold
