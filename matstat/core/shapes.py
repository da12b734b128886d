from __future__ import annotations

"""Shape and axis helpers.

Conventions
-----------
- A matrix is 2D: (num_rows, num_cols)
- The *outer* length of an axis is the number of results it produces; the
  *inner* length is the number of values aggregated per result.
"""

from typing import TYPE_CHECKING, Tuple

import numpy as np

from matstat.contracts.types import AXES

from .errors import InvalidMatrixError, ParseError

if TYPE_CHECKING:  # pragma: no cover
    from .matrix import Matrix

_INT64 = np.iinfo(np.int64)


def check_axis(axis: str) -> str:
    if axis not in AXES:
        raise ValueError(f"axis must be one of {', '.join(AXES)}; got {axis!r}")
    return axis


def axis_lengths(matrix: "Matrix", axis: str) -> Tuple[int, int]:
    """Return ``(outer, inner)`` lengths of ``matrix`` along ``axis``."""
    check_axis(axis)
    if axis == "rows":
        return matrix.num_rows, matrix.num_cols
    return matrix.num_cols, matrix.num_rows


def ensure_computable(matrix: "Matrix", axis: str) -> Tuple[int, int]:
    """Like :func:`axis_lengths` but rejects zero-sized dimensions."""
    outer, inner = axis_lengths(matrix, axis)
    if matrix.num_rows < 1 or matrix.num_cols < 1:
        raise InvalidMatrixError(
            "Matrix must have at least 1 row and 1 column; "
            f"got {matrix.num_rows}x{matrix.num_cols}"
        )
    return outer, inner


def coerce_integer_matrix(arr: np.ndarray, *, context: str) -> np.ndarray:
    """Ensure a 2D, contiguous int64 array.

    - Accepts 1D and reshapes to a single row
    - Rejects non-integer dtypes (floats, bools, objects, strings)
    """

    arr = np.asarray(arr)
    if arr.ndim == 1:
        arr = arr[None, :]
    if arr.ndim != 2:
        raise InvalidMatrixError(f"{context}: expected a 2D matrix; got shape={arr.shape}")

    if arr.dtype == np.bool_ or not np.issubdtype(arr.dtype, np.integer):
        raise ParseError(f"{context}: expected integer data; got dtype={arr.dtype}")

    if arr.size and np.issubdtype(arr.dtype, np.unsignedinteger) and int(arr.max()) > _INT64.max:
        raise ParseError(f"{context}: values exceed the signed 64-bit range")

    return np.ascontiguousarray(arr, dtype=np.int64)
