"""
Dense fixed-shape matrix.

A Matrix type is parametrized by scalar type and shape:

    M23 = Matrix[np.float64, 2, 3]
    A = M23([[1, 2, 3], [4, 5, 6]])

The parameters belong to the type, not the instance. ``Matrix[...]`` returns
the same class for the same parameters, so ``type(A) is Matrix[np.float64, 2, 3]``.

Storage is a flat row-major numpy buffer of rows*cols elements. All element
access is 1-indexed: (r, c) lives at offset (r-1)*cols + (c-1).
"""

from __future__ import annotations

import sys
from enum import Enum
from io import StringIO
from typing import Any, Callable, ClassVar, Iterator, TextIO

import numpy as np
from numpy.typing import NDArray

from pymatalg.core.exceptions import DimensionError, ScalarTypeError, ValidationError
from pymatalg.core.validation import (
    check_dimension,
    check_floating,
    check_index,
    check_same_shape,
    check_scalar_operand,
    check_scalar_type,
    check_square,
)
from pymatalg.dense.traversal import ColumnView, RowView
from pymatalg.expression.nodes import MatrixExpression


class Fill(Enum):
    """Bulk initialization policies."""
    ZEROS = 'zeros'
    ONES = 'ones'
    EYE = 'eye'
    RAND = 'rand'
    NONE = 'none'


_TYPES: dict[tuple[np.dtype, int, int], type[Matrix]] = {}


class Matrix(MatrixExpression):
    """
    Dense matrix with a compile-time-style fixed shape.

    Construction:
        M()                      all zeros
        M([1, 2, 3, 4])          flat row-major data, length rows*cols
        M([[1, 2], [3, 4]])      nested rows, exact shape
        M(Fill.EYE)              fill policy
        M(other)                 copy, or materialize any expression of M's type

    Access:
        A[r, c], A.at(r, c)      1-indexed read
        A[r, c] = v              1-indexed write
        v[i], v.at(i)            single index on row/column vectors
    """

    _dtype: ClassVar[np.dtype | None] = None
    _rows: ClassVar[int] = 0
    _cols: ClassVar[int] = 0

    def __class_getitem__(cls, params: Any) -> type[Matrix]:
        if cls is not Matrix:
            raise TypeError(f"{cls.__name__} is already parametrized")
        if not isinstance(params, tuple) or len(params) != 3:
            raise TypeError("Matrix[...] takes (scalar_type, rows, cols)")
        scalar_type, rows, cols = params
        return matrix_type(scalar_type, rows, cols)

    def __init__(self, data: Any = None):
        if self._dtype is None:
            raise TypeError(
                "Matrix must be parametrized before use, e.g. Matrix[np.float64, 2, 2]"
            )
        rows, cols = self.shape

        if data is None or data is Fill.NONE:
            self._data = np.zeros(rows * cols, dtype=self._dtype)
        elif isinstance(data, Fill):
            self._data = np.zeros(rows * cols, dtype=self._dtype)
            self._apply_fill(data)
        elif isinstance(data, MatrixExpression):
            check_same_shape(self, data, 'construction')
            self._data = _evaluate(data)
        else:
            self._data = self._from_literal(data)

    # === Construction helpers ===

    def _from_literal(self, data: Any) -> NDArray[Any]:
        rows, cols = self.shape
        try:
            array = np.asarray(data)
        except ValueError as e:
            raise DimensionError(f"construction: ragged or malformed data: {e}") from e

        if array.dtype == object:
            raise DimensionError(
                "construction: data converted to object dtype, "
                "indicating ragged rows or non-numeric values"
            )
        if array.size and not np.issubdtype(array.dtype, np.number):
            raise ScalarTypeError(f"construction: non-numeric data of dtype {array.dtype}")
        if array.size and np.issubdtype(self._dtype, np.integer):
            self._check_integer_range(array)
        elif array.size and not np.can_cast(array.dtype, self._dtype, casting='same_kind'):
            raise ScalarTypeError(
                f"construction: {array.dtype} data cannot be stored as {self._dtype}"
            )

        if array.ndim == 1:
            if array.shape[0] != rows * cols:
                raise DimensionError(
                    f"construction: {array.shape[0]} elements given, "
                    f"{rows}x{cols} matrix needs {rows * cols}",
                    expected=(rows * cols,),
                    actual=(array.shape[0],),
                )
        elif array.ndim == 2:
            if array.shape != (rows, cols):
                raise DimensionError(
                    f"construction: {array.shape[0]}x{array.shape[1]} data "
                    f"for {rows}x{cols} matrix",
                    expected=(rows, cols),
                    actual=array.shape,
                )
        else:
            raise DimensionError(
                f"construction: expected flat or nested rows, got {array.ndim}D data"
            )
        return array.astype(self._dtype).reshape(rows * cols)

    def _check_integer_range(self, array: NDArray[Any]) -> None:
        # Integer literals are checked by value, not by numpy's default int64.
        if not np.issubdtype(array.dtype, np.integer):
            raise ScalarTypeError(
                f"construction: {array.dtype} data cannot be stored as {self._dtype}"
            )
        info = np.iinfo(self._dtype)
        low, high = int(array.min()), int(array.max())
        if low < info.min or high > info.max:
            raise ScalarTypeError(
                f"construction: values in [{low}, {high}] out of range for {self._dtype} "
                f"[{info.min}, {info.max}]"
            )

    def _apply_fill(self, fill: Fill) -> None:
        if fill is Fill.ZEROS:
            self.zeros()
        elif fill is Fill.ONES:
            self.ones()
        elif fill is Fill.EYE:
            self.eye()
        elif fill is Fill.RAND:
            self.rand()
        elif fill is Fill.NONE:
            pass
        else:
            raise ValidationError(f"unknown fill policy: {fill!r}")

    # === Shape queries ===

    @property
    def shape(self) -> tuple[int, int]:
        return self._rows, self._cols

    @property
    def dtype(self) -> np.dtype:
        return self._dtype

    def is_empty(self) -> bool:
        """True once the buffer has been cleared by reset() (or for 0-sized types)."""
        return self._data.size == 0

    # === Element access ===

    def _offset(self, row: int, col: int) -> int:
        rows, cols = self.shape
        row = check_index(row, rows, 'row', self.shape)
        col = check_index(col, cols, 'col', self.shape)
        return (row - 1) * cols + (col - 1)

    def _vector_offset(self, index: int) -> int:
        if not self.is_vector:
            raise TypeError(
                f"single-index access needs a row or column vector, "
                f"not a {self._rows}x{self._cols} matrix"
            )
        return check_index(index, self.size, 'index', self.shape) - 1

    def _locate(self, key: Any) -> int:
        if isinstance(key, tuple):
            if len(key) != 2:
                raise TypeError(f"expected (row, col), got {len(key)} indices")
            return self._offset(*key)
        return self._vector_offset(key)

    def at(self, row: int, col: int | None = None) -> Any:
        if col is None:
            return self._data[self._vector_offset(row)]
        return self._data[self._offset(row, col)]

    def __getitem__(self, key: Any) -> Any:
        return self._data[self._locate(key)]

    def __setitem__(self, key: Any, value: Any) -> None:
        offset = self._locate(key)
        self._data[offset] = check_scalar_operand(value, self._dtype, 'element assignment')

    def __iter__(self) -> Iterator[Any]:
        """Element values in row-major order."""
        return iter(self._data.tolist())

    def row(self, index: int) -> RowView:
        """Lazy view over the elements of 1-indexed row ``index``."""
        check_index(index, self._rows, 'row', self.shape)
        return RowView(self, index)

    def col(self, index: int) -> ColumnView:
        """Lazy view over the elements of 1-indexed column ``index``."""
        check_index(index, self._cols, 'col', self.shape)
        return ColumnView(self, index)

    # === Bulk mutators ===

    def zeros(self) -> None:
        """Set every element to 0."""
        self._data.fill(0)

    def ones(self) -> None:
        """Set every element to 1."""
        self._data.fill(1)

    def eye(self) -> None:
        """
        Set to the identity.

        Raises:
            NotSquareError: If rows != cols (no element is touched)
        """
        n = check_square(self, 'eye')
        self._data.fill(0)
        self._data[::n + 1] = 1

    def rand(self, rng: np.random.Generator | None = None) -> None:
        """
        Fill with uniform random values in [0, 1).

        Args:
            rng: Generator to draw from; a fresh default_rng() if None

        Raises:
            ScalarTypeError: If the scalar type is integral
        """
        check_floating(self, 'rand')
        rng = np.random.default_rng() if rng is None else rng
        self._data[:] = rng.random(self._data.size)

    def fill(self, value: Any) -> None:
        """Set every element to ``value``."""
        self._data.fill(check_scalar_operand(value, self._dtype, 'fill'))

    def fill_with(self, func: Callable[[], Any]) -> None:
        """Set every element to a fresh ``func()``, called in row-major order."""
        values = np.empty_like(self._data)
        for i in range(values.size):
            values[i] = check_scalar_operand(func(), self._dtype, 'fill_with')
        self._data = values

    def reset(self) -> None:
        """Clear the buffer. Shape-dependent operations afterwards are undefined."""
        self._data = np.empty(0, dtype=self._dtype)

    # === Materialization and copies ===

    def assign(self, expr: MatrixExpression) -> Matrix:
        """
        Materialize ``expr`` into this matrix.

        Evaluates into a fresh buffer first, so ``A.assign(A @ B)`` reads
        the old values of A throughout.

        Returns:
            self

        Raises:
            DimensionError, ScalarTypeError: If expr is not of this type's shape/dtype
        """
        if not isinstance(expr, MatrixExpression):
            raise ValidationError(
                f"assign: expected a matrix expression, got {type(expr).__name__}"
            )
        check_same_shape(self, expr, 'assign')
        self._data = _evaluate(expr)
        return self

    def copy(self) -> Matrix:
        """Independent copy with its own buffer."""
        clone = type(self).__new__(type(self))
        clone._data = self._data.copy()
        return clone

    def __copy__(self) -> Matrix:
        return self.copy()

    def __deepcopy__(self, memo: dict) -> Matrix:
        return self.copy()

    def __reduce__(self):
        return _restore, (self._dtype.str, self._rows, self._cols, self._data.copy())

    def to_numpy(self) -> NDArray[Any]:
        """2-D copy of the elements."""
        return self._data.reshape(self.shape).copy()

    # === Rendering ===

    def dump(self, stream: TextIO | None = None) -> None:
        """
        Write rows as space-separated values, one row per line.

        Diagnostic output only; not a serialization format.
        """
        stream = sys.stdout if stream is None else stream
        rows, cols = self.shape
        for r in range(rows):
            for value in self._data[r * cols:(r + 1) * cols].tolist():
                stream.write(f"{value} ")
            stream.write("\n")

    def __str__(self) -> str:
        buffer = StringIO()
        self.dump(buffer)
        return buffer.getvalue()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_numpy().tolist()})"


def matrix_type(scalar_type: Any, rows: Any, cols: Any) -> type[Matrix]:
    """
    Return the Matrix subclass for (scalar_type, rows, cols).

    Raises:
        ScalarTypeError: If scalar_type is not numeric
        ValidationError: If rows or cols is not a non-negative integer
    """
    dtype = check_scalar_type(scalar_type, 'scalar_type')
    rows = check_dimension(rows, 'rows')
    cols = check_dimension(cols, 'cols')

    key = (dtype, rows, cols)
    cls = _TYPES.get(key)
    if cls is None:
        name = f"Matrix[{dtype.name}, {rows}, {cols}]"
        cls = type(name, (Matrix,), {
            '_dtype': dtype,
            '_rows': rows,
            '_cols': cols,
            '__module__': __name__,
            '__qualname__': name,
        })
        _TYPES[key] = cls
    return cls


def materialize(expr: MatrixExpression) -> Matrix:
    """Evaluate ``expr`` into a new matrix of its own type."""
    rows, cols = expr.shape
    return matrix_type(expr.dtype, rows, cols)(expr)


def _evaluate(expr: MatrixExpression) -> NDArray[Any]:
    """Evaluate each cell of ``expr`` exactly once into a new flat buffer."""
    if isinstance(expr, Matrix):
        return expr._data.copy()
    rows, cols = expr.shape
    buffer = np.empty(rows * cols, dtype=expr.dtype)
    for r in range(1, rows + 1):
        base = (r - 1) * cols
        for c in range(1, cols + 1):
            buffer[base + c - 1] = expr.at(r, c)
    return buffer


def _restore(dtype: str, rows: int, cols: int, data: NDArray[Any]) -> Matrix:
    """Unpickle helper."""
    matrix = matrix_type(np.dtype(dtype), rows, cols)()
    matrix._data = data
    return matrix
