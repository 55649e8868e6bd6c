"""
Dense fixed-shape storage.

Public API:
    Matrix[dtype, rows, cols]: dense matrix type
    RowVector[dtype, n], ColVector[dtype, n]: vector type spellings
    Fill: construction fill policies
    RowView, ColumnView: row/column traversal
    matrix_type, materialize: functional forms
"""

from pymatalg.dense.matrix import Fill, Matrix, materialize, matrix_type
from pymatalg.dense.traversal import ColumnView, RowView
from pymatalg.dense.vector import ColVector, RowVector

__all__ = [
    "Matrix",
    "RowVector",
    "ColVector",
    "Fill",
    "RowView",
    "ColumnView",
    "matrix_type",
    "materialize",
]
