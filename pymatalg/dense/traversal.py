"""
Row and column traversal.

A view names one row or column of a matrix. It holds no copy of the data:
every iteration re-reads the matrix, so a view is restartable and always
reflects the current values. Writing through a view writes the matrix.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Iterator

from pymatalg.core.validation import check_index

if TYPE_CHECKING:
    from pymatalg.dense.matrix import Matrix


class _LineView(ABC):
    """Shared behaviour of RowView and ColumnView."""

    _axis = ''

    def __init__(self, matrix: Matrix, index: int):
        self._matrix = matrix
        self._index = index

    @property
    def index(self) -> int:
        """1-based row or column number."""
        return self._index

    @abstractmethod
    def _position(self, k: int) -> tuple[int, int]:
        """Matrix coordinates of the k-th element."""

    @abstractmethod
    def __len__(self) -> int:
        ...

    def __iter__(self) -> Iterator[Any]:
        for k in range(1, len(self) + 1):
            yield self._matrix.at(*self._position(k))

    def __getitem__(self, k: int) -> Any:
        check_index(k, len(self), 'position', self._matrix.shape)
        return self._matrix.at(*self._position(k))

    def __setitem__(self, k: int, value: Any) -> None:
        check_index(k, len(self), 'position', self._matrix.shape)
        self._matrix[self._position(k)] = value

    def tolist(self) -> list[Any]:
        """Current values as Python scalars."""
        return [value.item() for value in self]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._axis}={self._index}, {self.tolist()})"


class RowView(_LineView):
    """Elements of one row, left to right."""

    _axis = 'row'

    def _position(self, k: int) -> tuple[int, int]:
        return self._index, k

    def __len__(self) -> int:
        return self._matrix.cols


class ColumnView(_LineView):
    """Elements of one column, top to bottom."""

    _axis = 'col'

    def _position(self, k: int) -> tuple[int, int]:
        return k, self._index

    def __len__(self) -> int:
        return self._matrix.rows
