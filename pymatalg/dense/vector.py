"""
Row and column vector types.

Vectors are ordinary matrices with one dimension equal to 1; these helpers
only spell the type more conveniently:

    RowVector[np.float64, 3] is Matrix[np.float64, 1, 3]
    ColVector[np.float64, 3] is Matrix[np.float64, 3, 1]

Any matrix with a unit dimension accepts single-index access, v[i].
"""

from typing import Any

from pymatalg.dense.matrix import Matrix, matrix_type


def _vector_params(params: Any, name: str) -> tuple[Any, Any]:
    if not isinstance(params, tuple) or len(params) != 2:
        raise TypeError(f"{name}[...] takes (scalar_type, length)")
    return params


class RowVector:
    """Type factory for 1 x n matrices."""

    def __new__(cls, *args, **kwargs):
        raise TypeError("parametrize first, e.g. RowVector[np.float64, 3]")

    def __class_getitem__(cls, params: Any) -> type[Matrix]:
        scalar_type, length = _vector_params(params, 'RowVector')
        return matrix_type(scalar_type, 1, length)


class ColVector:
    """Type factory for n x 1 matrices."""

    def __new__(cls, *args, **kwargs):
        raise TypeError("parametrize first, e.g. ColVector[np.float64, 3]")

    def __class_getitem__(cls, params: Any) -> type[Matrix]:
        scalar_type, length = _vector_params(params, 'ColVector')
        return matrix_type(scalar_type, length, 1)
