"""
Expression nodes.

Every participant in the algebra is a MatrixExpression: it reports a fixed
shape and scalar type and evaluates a single 1-indexed cell on demand.
Dense matrices are the leaves; operator results are interior nodes.

Operators never compute anything. They check the shape/type contract and
wrap their operands by reference. Evaluation happens cell by cell when the
graph is materialized, and nothing is cached: a sub-expression used twice is
evaluated twice per cell.

Operator nodes form a closed set of tagged variants:
    BinaryExpression(op, lhs, rhs)   for + - @ % == != < <= > >=
    ScalarExpression(scalar, operand) for s * A, A * s and -A
"""

from __future__ import annotations

import operator
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Callable, Iterator

import numpy as np
from numpy.typing import NDArray

from pymatalg.core.compute.tolerances import select_tolerance
from pymatalg.core.exceptions import ScalarTypeError
from pymatalg.core.validation import (
    check_chained_shape,
    check_same_shape,
    check_scalar_operand,
)

if TYPE_CHECKING:
    from pymatalg.dense.matrix import Matrix


class Op(Enum):
    """Binary operator tags."""
    ADD = '+'
    SUB = '-'
    MATMUL = '@'
    HADAMARD = '%'
    EQ = '=='
    NE = '!='
    LT = '<'
    LE = '<='
    GT = '>'
    GE = '>='


_ARITHMETIC: dict[Op, Callable[[Any, Any], Any]] = {
    Op.ADD: operator.add,
    Op.SUB: operator.sub,
    Op.HADAMARD: operator.mul,
}

_COMPARISON: dict[Op, Callable[[Any, Any], Any]] = {
    Op.EQ: operator.eq,
    Op.NE: operator.ne,
    Op.LT: operator.lt,
    Op.LE: operator.le,
    Op.GT: operator.gt,
    Op.GE: operator.ge,
}


class MatrixExpression(ABC):
    """
    A lazily evaluated fixed-shape matrix.

    Subclasses provide ``shape``, ``dtype`` and ``at(row, col)``; this base
    supplies the operator overloads, reductions and materialization.

    Operators:
        A + B, A - B     elementwise, same shape and dtype
        A @ B, A * B     matrix product, A.cols == B.rows
        A % B            elementwise product
        A == B, A != B, A < B, A <= B, A > B, A >= B
                         elementwise comparison, 1 or 0 per cell
        s * A, A * s     scalar product
        -A               negation

    Comparison operators return expressions, so ``bool(A == B)`` is
    ambiguous and raises; use ``(A == B).all()``.
    """

    # Make numpy scalars on the left defer to __rmul__
    __array_ufunc__ = None

    @property
    @abstractmethod
    def shape(self) -> tuple[int, int]:
        """(rows, cols), fixed for the lifetime of the expression."""

    @property
    @abstractmethod
    def dtype(self) -> np.dtype:
        """Scalar type of every cell."""

    @abstractmethod
    def at(self, row: int, col: int) -> Any:
        """Evaluate the cell at 1-indexed (row, col)."""

    # === Shape queries ===

    @property
    def rows(self) -> int:
        return self.shape[0]

    @property
    def cols(self) -> int:
        return self.shape[1]

    @property
    def size(self) -> int:
        return self.shape[0] * self.shape[1]

    @property
    def is_square(self) -> bool:
        return self.shape[0] == self.shape[1]

    @property
    def is_vector(self) -> bool:
        return self.shape[0] == 1 or self.shape[1] == 1

    def cells(self) -> Iterator[tuple[int, int]]:
        """Yield every 1-indexed (row, col) in row-major order."""
        rows, cols = self.shape
        for r in range(1, rows + 1):
            for c in range(1, cols + 1):
                yield r, c

    # === Materialization ===

    def eval(self) -> Matrix:
        """Evaluate every cell once into a new dense matrix of this shape."""
        from pymatalg.dense.matrix import materialize
        return materialize(self)

    def to_numpy(self) -> NDArray[Any]:
        """Evaluate into a new 2-D numpy array."""
        return self.eval().to_numpy()

    # === Reductions ===

    def all(self) -> bool:
        """True if every cell is nonzero."""
        return all(self.at(r, c) != 0 for r, c in self.cells())

    def any(self) -> bool:
        """True if at least one cell is nonzero."""
        return any(self.at(r, c) != 0 for r, c in self.cells())

    def allclose(
        self,
        other: MatrixExpression,
        rtol: float | None = None,
        atol: float | None = None,
    ) -> bool:
        """
        Cellwise ``|a - b| <= atol + rtol * |b|``.

        Defaults come from the tolerance tier of this expression's dtype
        (exact comparison for integer types).
        """
        check_same_shape(self, other, 'allclose')
        tier = select_tolerance(self.dtype)
        rtol = tier.rtol if rtol is None else rtol
        atol = tier.atol if atol is None else atol
        for r, c in self.cells():
            a, b = self.at(r, c), other.at(r, c)
            if abs(a - b) > atol + rtol * abs(b):
                return False
        return True

    def __bool__(self) -> bool:
        raise ValueError(
            "The truth value of a matrix expression is ambiguous. "
            "Use .all() or .any()"
        )

    # === Operators ===

    def __add__(self, other: Any) -> MatrixExpression:
        return _binary(Op.ADD, self, other)

    def __sub__(self, other: Any) -> MatrixExpression:
        return _binary(Op.SUB, self, other)

    def __matmul__(self, other: Any) -> MatrixExpression:
        return _binary(Op.MATMUL, self, other)

    def __mul__(self, other: Any) -> MatrixExpression:
        if isinstance(other, MatrixExpression):
            return _binary(Op.MATMUL, self, other)
        return _scale(other, self, '*')

    def __rmul__(self, other: Any) -> MatrixExpression:
        return _scale(other, self, '*')

    def __mod__(self, other: Any) -> MatrixExpression:
        return _binary(Op.HADAMARD, self, other)

    def __neg__(self) -> MatrixExpression:
        if np.issubdtype(self.dtype, np.unsignedinteger):
            raise ScalarTypeError(f"operator -: cannot negate a {self.dtype} matrix")
        return ScalarExpression(self.dtype.type(-1), self)

    def __eq__(self, other: Any) -> MatrixExpression:  # type: ignore[override]
        return _binary(Op.EQ, self, other)

    def __ne__(self, other: Any) -> MatrixExpression:  # type: ignore[override]
        return _binary(Op.NE, self, other)

    def __lt__(self, other: Any) -> MatrixExpression:
        return _binary(Op.LT, self, other)

    def __le__(self, other: Any) -> MatrixExpression:
        return _binary(Op.LE, self, other)

    def __gt__(self, other: Any) -> MatrixExpression:
        return _binary(Op.GT, self, other)

    def __ge__(self, other: Any) -> MatrixExpression:
        return _binary(Op.GE, self, other)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        rows, cols = self.shape
        return f"<{type(self).__name__} {rows}x{cols} {self.dtype}>"


@dataclass(frozen=True, eq=False, repr=False)
class BinaryExpression(MatrixExpression):
    """
    Result of a binary operator.

    Holds its operands by reference and combines their cells on demand.
    Construct through the operators, which enforce the shape/type contract.
    """
    op: Op
    lhs: MatrixExpression
    rhs: MatrixExpression

    @property
    def shape(self) -> tuple[int, int]:
        if self.op is Op.MATMUL:
            return self.lhs.shape[0], self.rhs.shape[1]
        return self.lhs.shape

    @property
    def dtype(self) -> np.dtype:
        return self.lhs.dtype

    def at(self, row: int, col: int) -> Any:
        lhs, rhs = self.lhs, self.rhs

        if self.op is Op.MATMUL:
            total = self.dtype.type(0)
            for k in range(1, lhs.shape[1] + 1):
                total += lhs.at(row, k) * rhs.at(k, col)
            return total

        arithmetic = _ARITHMETIC.get(self.op)
        if arithmetic is not None:
            return arithmetic(lhs.at(row, col), rhs.at(row, col))

        compare = _COMPARISON[self.op]
        return self.dtype.type(1 if compare(lhs.at(row, col), rhs.at(row, col)) else 0)

    def __repr__(self) -> str:
        rows, cols = self.shape
        return f"<BinaryExpression '{self.op.value}' {rows}x{cols} {self.dtype}>"


@dataclass(frozen=True, eq=False, repr=False)
class ScalarExpression(MatrixExpression):
    """Scalar product ``scalar * operand``; the scalar is already in operand's dtype."""
    scalar: np.generic
    operand: MatrixExpression

    @property
    def shape(self) -> tuple[int, int]:
        return self.operand.shape

    @property
    def dtype(self) -> np.dtype:
        return self.operand.dtype

    def at(self, row: int, col: int) -> Any:
        return self.scalar * self.operand.at(row, col)

    def __repr__(self) -> str:
        rows, cols = self.shape
        return f"<ScalarExpression {self.scalar}* {rows}x{cols} {self.dtype}>"


def _binary(op: Op, lhs: MatrixExpression, rhs: Any) -> MatrixExpression:
    """Check the contract for ``op`` and wrap both operands."""
    if not isinstance(rhs, MatrixExpression):
        if op in _COMPARISON:
            # Comparisons are elementwise between matrices only.
            raise ScalarTypeError(
                f"operator {op.value}: cannot compare a matrix expression with "
                f"{type(rhs).__name__}"
            )
        return NotImplemented
    if op is Op.MATMUL:
        check_chained_shape(lhs, rhs, f"operator {op.value}")
    else:
        check_same_shape(lhs, rhs, f"operator {op.value}")
    return BinaryExpression(op, lhs, rhs)


def _scale(scalar: Any, operand: MatrixExpression, symbol: str) -> MatrixExpression:
    """Check the scalar against operand's dtype and wrap it."""
    if isinstance(scalar, MatrixExpression):
        return NotImplemented
    value = check_scalar_operand(scalar, operand.dtype, f"operator {symbol}")
    return ScalarExpression(value, operand)
