"""
Tests for the shape/type contract and input validators.

Validates every function in core/validation.py:
    - check_scalar_type: numeric dtypes accepted, bool/object rejected
    - check_dimension: non-negative integer counts
    - check_same_dtype / check_same_shape / check_chained_shape: operator contract
    - check_square / check_floating
    - check_scalar_operand: no promotion or overflow of the matrix dtype
    - check_index: 1-based bounds
    - check_positive
"""

from dataclasses import dataclass

import numpy as np
import pytest

from pymatalg.core.exceptions import (
    DimensionError,
    IndexOutOfRangeError,
    NotSquareError,
    ScalarTypeError,
    ValidationError,
)
from pymatalg.core.validation import (
    check_chained_shape,
    check_dimension,
    check_floating,
    check_index,
    check_positive,
    check_same_dtype,
    check_same_shape,
    check_scalar_operand,
    check_scalar_type,
    check_square,
)


@dataclass
class Operand:
    """Bare shape/dtype carrier."""
    shape: tuple[int, int]
    dtype: np.dtype


F64 = np.dtype(np.float64)
I64 = np.dtype(np.int64)


# ═══════════════════════════════════════════════════════════════════════
# Scalar types and dimensions
# ═══════════════════════════════════════════════════════════════════════


class TestCheckScalarType:

    @pytest.mark.parametrize("scalar_type", [
        np.float64, np.float32, np.int32, np.uint8, np.complex128, float, int, 'int16',
    ])
    def test_numeric_accepted(self, scalar_type):
        assert check_scalar_type(scalar_type, "t") == np.dtype(scalar_type)

    @pytest.mark.parametrize("scalar_type", [bool, np.bool_, str, object, 'U3'])
    def test_non_numeric_rejected(self, scalar_type):
        with pytest.raises(ScalarTypeError):
            check_scalar_type(scalar_type, "t")

    def test_garbage_rejected(self):
        with pytest.raises(ScalarTypeError, match="not a scalar type"):
            check_scalar_type("not-a-dtype", "t")


class TestCheckDimension:

    def test_valid(self):
        assert check_dimension(3, "rows") == 3
        assert check_dimension(np.int64(0), "rows") == 0

    def test_negative(self):
        with pytest.raises(ValidationError, match="non-negative"):
            check_dimension(-1, "rows")

    @pytest.mark.parametrize("value", [2.0, "2", True, None])
    def test_non_integer(self, value):
        with pytest.raises(ValidationError, match="integer"):
            check_dimension(value, "rows")


# ═══════════════════════════════════════════════════════════════════════
# Operator contract
# ═══════════════════════════════════════════════════════════════════════


class TestSameShape:

    def test_equal(self):
        assert check_same_shape(Operand((2, 3), F64), Operand((2, 3), F64), "+") == (2, 3)

    def test_shape_mismatch(self):
        with pytest.raises(DimensionError) as exc_info:
            check_same_shape(Operand((2, 3), F64), Operand((3, 2), F64), "operator +")
        assert exc_info.value.expected == (2, 3)
        assert exc_info.value.actual == (3, 2)
        assert "operator +" in str(exc_info.value)

    def test_dtype_mismatch_checked_first(self):
        with pytest.raises(ScalarTypeError):
            check_same_shape(Operand((2, 3), F64), Operand((3, 2), I64), "+")

    def test_same_dtype_message(self):
        with pytest.raises(ScalarTypeError, match="no implicit promotion"):
            check_same_dtype(Operand((1, 1), F64), Operand((1, 1), I64), "+")


class TestChainedShape:

    def test_result_shape(self):
        assert check_chained_shape(Operand((2, 3), F64), Operand((3, 4), F64), "@") == (2, 4)

    def test_inner_mismatch(self):
        with pytest.raises(DimensionError, match="inner dimensions"):
            check_chained_shape(Operand((2, 3), F64), Operand((2, 3), F64), "@")

    def test_dtype_mismatch(self):
        with pytest.raises(ScalarTypeError):
            check_chained_shape(Operand((2, 3), F64), Operand((3, 4), I64), "@")


class TestSquareAndFloating:

    def test_square(self):
        assert check_square(Operand((4, 4), F64), "trace") == 4

    def test_not_square(self):
        with pytest.raises(NotSquareError) as exc_info:
            check_square(Operand((2, 3), F64), "trace")
        assert exc_info.value.shape == (2, 3)

    def test_floating_accepts_complex(self):
        check_floating(Operand((2, 2), np.dtype(np.complex128)), "lu")

    def test_floating_rejects_integer(self):
        with pytest.raises(ScalarTypeError, match="floating"):
            check_floating(Operand((2, 2), I64), "lu")


# ═══════════════════════════════════════════════════════════════════════
# Scalars
# ═══════════════════════════════════════════════════════════════════════


class TestCheckScalarOperand:

    def test_python_int_with_float(self):
        value = check_scalar_operand(2, F64, "*")
        assert value == 2.0
        assert value.dtype == F64

    def test_python_int_with_int(self):
        assert check_scalar_operand(3, I64, "*").dtype == I64

    def test_python_float_with_int_rejected(self):
        with pytest.raises(ScalarTypeError, match="promote"):
            check_scalar_operand(2.5, I64, "*")

    def test_numpy_scalar_exact_dtype(self):
        assert check_scalar_operand(np.float64(1.5), F64, "*") == 1.5

    def test_numpy_scalar_other_dtype_rejected(self):
        with pytest.raises(ScalarTypeError):
            check_scalar_operand(np.float32(1.5), F64, "*")

    @pytest.mark.parametrize("value", [300, -129])
    def test_python_int_out_of_range_rejected(self, value):
        with pytest.raises(ScalarTypeError, match="out of range"):
            check_scalar_operand(value, np.dtype(np.int8), "*")

    def test_negative_int_with_unsigned_rejected(self):
        with pytest.raises(ScalarTypeError):
            check_scalar_operand(-1, np.dtype(np.uint16), "fill")

    @pytest.mark.parametrize("value", [True, "2", None, [1]])
    def test_non_numbers_rejected(self, value):
        with pytest.raises(ScalarTypeError):
            check_scalar_operand(value, F64, "*")


# ═══════════════════════════════════════════════════════════════════════
# Indices and parameters
# ═══════════════════════════════════════════════════════════════════════


class TestCheckIndex:

    def test_bounds_inclusive(self):
        assert check_index(1, 3, "row", (3, 3)) == 1
        assert check_index(3, 3, "row", (3, 3)) == 3

    @pytest.mark.parametrize("index", [0, -1, 4])
    def test_out_of_range(self, index):
        with pytest.raises(IndexOutOfRangeError) as exc_info:
            check_index(index, 3, "row", (3, 3))
        assert exc_info.value.index == (index,)
        assert exc_info.value.shape == (3, 3)

    @pytest.mark.parametrize("index", [1.0, "1", True])
    def test_non_integer(self, index):
        with pytest.raises(TypeError):
            check_index(index, 3, "row", (3, 3))


class TestCheckPositive:

    def test_positive(self):
        check_positive(1e-12, "tol")

    @pytest.mark.parametrize("value", [0, -1.0, float("nan")])
    def test_not_positive(self, value):
        with pytest.raises(ValidationError):
            check_positive(value, "tol")

    def test_not_a_number(self):
        with pytest.raises(ValidationError, match="real number"):
            check_positive("1", "tol")
