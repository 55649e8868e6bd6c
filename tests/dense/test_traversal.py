"""
Tests for vectors and row/column traversal.

Validates:
    - RowVector/ColVector are spellings of 1 x n / n x 1 Matrix types
    - Single-index access on vectors, with bounds
    - Row and column views: order, restartability, live reads, writes
"""

import numpy as np
import pytest

from pymatalg import ColVector, IndexOutOfRangeError, Matrix, RowVector, ScalarTypeError
from pymatalg.dense import ColumnView, RowView
from pymatalg.dense.traversal import _LineView


# ═══════════════════════════════════════════════════════════════════════
# Vector types
# ═══════════════════════════════════════════════════════════════════════


class TestVectorTypes:

    def test_row_vector_is_matrix_type(self):
        assert RowVector[np.float64, 3] is Matrix[np.float64, 1, 3]

    def test_col_vector_is_matrix_type(self):
        assert ColVector[np.float64, 3] is Matrix[np.float64, 3, 1]

    def test_unparametrized_rejected(self):
        with pytest.raises(TypeError):
            RowVector()
        with pytest.raises(TypeError):
            ColVector([1, 2])

    def test_wrong_arity(self):
        with pytest.raises(TypeError):
            ColVector[np.float64, 3, 1]

    def test_bad_scalar_type(self):
        with pytest.raises(ScalarTypeError):
            RowVector[bool, 2]


class TestVectorAccess:

    def test_single_index_row(self):
        v = RowVector[np.int64, 3]([4, 5, 6])
        assert v[1] == 4
        assert v.at(3) == 6
        assert v[1, 2] == 5

    def test_single_index_column(self):
        v = ColVector[np.float64, 2]([[1.5], [2.5]])
        assert v[2] == 2.5
        assert v.at(1) == 1.5

    def test_single_index_write(self):
        v = ColVector[np.float64, 3]()
        v[2] = 9.0
        assert list(v) == [0.0, 9.0, 0.0]

    @pytest.mark.parametrize("index", [0, 4])
    def test_single_index_out_of_range(self, index):
        v = RowVector[np.float64, 3]()
        with pytest.raises(IndexOutOfRangeError):
            v[index]

    def test_one_by_one_is_vector(self):
        v = Matrix[np.float64, 1, 1]([3.0])
        assert v.is_vector
        assert v[1] == 3.0


# ═══════════════════════════════════════════════════════════════════════
# Row and column views
# ═══════════════════════════════════════════════════════════════════════


class TestLineViews:

    @pytest.fixture
    def A(self):
        return Matrix[np.int64, 2, 3]([[1, 2, 3], [4, 5, 6]])

    def test_row_order(self, A):
        assert A.row(2).tolist() == [4, 5, 6]

    def test_column_order(self, A):
        assert A.col(3).tolist() == [3, 6]

    def test_view_types(self, A):
        assert isinstance(A.row(1), RowView)
        assert isinstance(A.col(1), ColumnView)

    def test_base_view_is_abstract(self, A):
        with pytest.raises(TypeError):
            _LineView(A, 1)

    def test_view_needs_position_and_length(self, A):
        class DiagonalView(_LineView):
            def _position(self, k):
                return k, k

        with pytest.raises(TypeError):
            DiagonalView(A, 1)

    def test_lengths(self, A):
        assert len(A.row(1)) == 3
        assert len(A.col(1)) == 2

    def test_index(self, A):
        assert A.row(2).index == 2

    def test_restartable(self, A):
        view = A.col(2)
        assert list(view) == [2, 5]
        assert list(view) == [2, 5]

    def test_reflects_later_writes(self, A):
        view = A.row(1)
        A[1, 2] = 20
        assert view.tolist() == [1, 20, 3]

    def test_positional_access(self, A):
        assert A.row(2)[3] == 6
        assert A.col(1)[2] == 4

    def test_write_through(self, A):
        A.col(2)[1] = 7
        assert A[1, 2] == 7

    @pytest.mark.parametrize("index", [0, 3])
    def test_row_out_of_range(self, A, index):
        with pytest.raises(IndexOutOfRangeError):
            A.row(index)

    def test_column_out_of_range(self, A):
        with pytest.raises(IndexOutOfRangeError):
            A.col(4)

    def test_position_out_of_range(self, A):
        with pytest.raises(IndexOutOfRangeError):
            A.row(1)[4]
        with pytest.raises(IndexOutOfRangeError):
            A.col(1)[0] = 1

    def test_columns_reconstruct_transpose(self, A):
        columns = [A.col(j).tolist() for j in range(1, A.cols + 1)]
        np.testing.assert_array_equal(np.array(columns), A.to_numpy().T)

    def test_repr(self, A):
        assert repr(A.row(1)) == "RowView(row=1, [1, 2, 3])"
