"""
Shape/type contract and input validation for pymatalg.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent. Every operator calls them before
constructing an expression node, so an incompatible composition never
produces an object.

Design principles:
    - No implicit scalar promotion between operands
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Operator or parameter names included in all error messages
"""

from __future__ import annotations

import numbers
from typing import Any, Protocol

import numpy as np

from pymatalg.core.exceptions import (
    DimensionError,
    IndexOutOfRangeError,
    NotSquareError,
    ScalarTypeError,
    ValidationError,
)


class Shaped(Protocol):
    """Anything carrying a fixed shape and scalar type."""

    @property
    def shape(self) -> tuple[int, int]: ...

    @property
    def dtype(self) -> np.dtype: ...


def check_scalar_type(scalar_type: Any, name: str) -> np.dtype:
    """
    Validate and normalize a scalar type.

    Accepts anything numpy understands as a dtype (``np.float64``,
    ``float``, ``'int32'``...) and rejects non-numeric kinds.

    Args:
        scalar_type: Candidate scalar type
        name: Parameter name for error messages

    Returns:
        Normalized numpy dtype

    Raises:
        ScalarTypeError: If the type is not a numeric dtype
    """
    try:
        dtype = np.dtype(scalar_type)
    except TypeError as e:
        raise ScalarTypeError(f"{name}: not a scalar type: {scalar_type!r}") from e

    # bool is a numpy number subtype only by accident of history
    if dtype == np.bool_ or not np.issubdtype(dtype, np.number):
        raise ScalarTypeError(
            f"{name}: non-numeric dtype {dtype}, expected integer, floating or complex"
        )
    return dtype


def check_dimension(value: Any, name: str) -> int:
    """
    Verify a row or column count is a non-negative integer.

    Raises:
        ValidationError: If value is not a non-negative integer
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise ValidationError(f"{name}: expected an integer, got {value!r}")
    if value < 0:
        raise ValidationError(f"{name}: must be non-negative, got {value}")
    return int(value)


def check_same_dtype(lhs: Shaped, rhs: Shaped, op: str) -> None:
    """
    Verify two operands share exactly the same scalar type.

    Raises:
        ScalarTypeError: If the dtypes differ
    """
    if lhs.dtype != rhs.dtype:
        raise ScalarTypeError(
            f"{op}: scalar types differ ({lhs.dtype} vs {rhs.dtype}); "
            f"no implicit promotion is performed"
        )


def check_same_shape(lhs: Shaped, rhs: Shaped, op: str) -> tuple[int, int]:
    """
    Same-shape contract: equal scalar type and equal (rows, cols).

    Used by addition, subtraction, elementwise product and comparisons.

    Returns:
        The shared shape

    Raises:
        ScalarTypeError: If the dtypes differ
        DimensionError: If the shapes differ
    """
    check_same_dtype(lhs, rhs, op)
    if lhs.shape != rhs.shape:
        raise DimensionError(
            f"{op}: shapes differ, {lhs.shape[0]}x{lhs.shape[1]} "
            f"vs {rhs.shape[0]}x{rhs.shape[1]}",
            expected=lhs.shape,
            actual=rhs.shape,
        )
    return lhs.shape


def check_chained_shape(lhs: Shaped, rhs: Shaped, op: str) -> tuple[int, int]:
    """
    Chained-shape contract for the matrix product.

    Requires equal scalar type and ``lhs.cols == rhs.rows``.

    Returns:
        Result shape ``(lhs.rows, rhs.cols)``

    Raises:
        ScalarTypeError: If the dtypes differ
        DimensionError: If the inner dimensions differ
    """
    check_same_dtype(lhs, rhs, op)
    (m, k1), (k2, n) = lhs.shape, rhs.shape
    if k1 != k2:
        raise DimensionError(
            f"{op}: inner dimensions differ, {m}x{k1} times {k2}x{n}",
            expected=(k1,),
            actual=(k2,),
        )
    return m, n


def check_square(operand: Shaped, name: str) -> int:
    """
    Verify an operand is square.

    Returns:
        The order n of the n x n operand

    Raises:
        NotSquareError: If rows != cols
    """
    rows, cols = operand.shape
    if rows != cols:
        raise NotSquareError(
            f"{name}: requires a square matrix, got {rows}x{cols}",
            shape=(rows, cols),
        )
    return rows


def check_floating(operand: Shaped, name: str) -> None:
    """
    Verify an operand has a floating (real or complex) scalar type.

    Raises:
        ScalarTypeError: If the dtype is integral
    """
    if not np.issubdtype(operand.dtype, np.inexact):
        raise ScalarTypeError(
            f"{name}: requires a floating scalar type, got {operand.dtype}"
        )


def check_scalar_operand(value: Any, dtype: np.dtype, op: str) -> np.generic:
    """
    Verify a scalar can multiply a matrix of the given dtype.

    A numpy scalar must carry exactly ``dtype``. A Python number is
    accepted only when combining it with ``dtype`` does not promote
    (``2`` with int64 or float64, ``2.5`` with float64, never ``2.5``
    with int64).

    Returns:
        The value converted to ``dtype``

    Raises:
        ScalarTypeError: If the scalar is not compatible or does not fit
            in ``dtype`` (``300`` with int8)
    """
    if isinstance(value, np.generic):
        if value.dtype != dtype:
            raise ScalarTypeError(
                f"{op}: scalar of type {value.dtype} cannot scale a {dtype} matrix"
            )
        return value
    if isinstance(value, bool) or not isinstance(value, numbers.Number):
        raise ScalarTypeError(f"{op}: expected a numeric scalar, got {value!r}")
    try:
        if np.result_type(value, dtype) != dtype:
            raise ScalarTypeError(
                f"{op}: scalar {value!r} would promote a {dtype} matrix"
            )
        return dtype.type(value)
    except OverflowError as e:
        raise ScalarTypeError(f"{op}: scalar {value!r} out of range for {dtype}") from e


def check_index(index: Any, bound: int, axis: str, shape: tuple[int, int]) -> int:
    """
    Verify a 1-based index lies in ``1..bound``.

    Args:
        index: Candidate index
        bound: Largest valid index (the row or column count)
        axis: 'row', 'col' or 'index' for error messages
        shape: Shape of the accessed matrix for error messages

    Returns:
        The index as a Python int

    Raises:
        TypeError: If the index is not an integer
        IndexOutOfRangeError: If the index is outside 1..bound
    """
    if isinstance(index, bool) or not isinstance(index, numbers.Integral):
        raise TypeError(f"{axis} index must be an integer, got {index!r}")
    if not 1 <= index <= bound:
        raise IndexOutOfRangeError(
            f"{axis} index {index} out of range 1..{bound} "
            f"for {shape[0]}x{shape[1]} matrix",
            index=(int(index),),
            shape=shape,
        )
    return int(index)


def check_positive(value: Any, name: str) -> None:
    """
    Verify a numeric parameter is strictly positive.

    Raises:
        ValidationError: If value <= 0 or not a real number
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise ValidationError(f"{name}: expected a real number, got {value!r}")
    if not value > 0:
        raise ValidationError(f"{name}: must be positive, got {value}")
