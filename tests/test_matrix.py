"""Tests for the Matrix accessor abstraction."""

from __future__ import annotations

import numpy as np
import pytest

from matstat.core.errors import InvalidMatrixError
from matstat.core.matrix import Matrix


@pytest.fixture
def m23() -> Matrix:
    return Matrix.from_rows([[1, 2, 3], [4, 5, 6]])


def test_shape_and_flat_indexing(m23: Matrix) -> None:
    assert m23.shape == (2, 3)
    assert m23[1, 2] == 6
    assert m23[0, 1] == m23.buffer[0 * 3 + 1]


def test_row_and_column_views(m23: Matrix) -> None:
    assert m23.row(1).tolist() == [4, 5, 6]
    assert m23.column(0).tolist() == [1, 4]
    assert [lane.tolist() for lane in m23.lanes("cols")] == [[1, 4], [2, 5], [3, 6]]
    assert [lane.tolist() for lane in m23.lanes("rows")] == [[1, 2, 3], [4, 5, 6]]


def test_out_of_range_access(m23: Matrix) -> None:
    with pytest.raises(IndexError):
        m23.row(2)
    with pytest.raises(IndexError):
        m23.column(3)
    with pytest.raises(IndexError):
        m23[2, 0]


def test_buffer_is_read_only(m23: Matrix) -> None:
    with pytest.raises(ValueError):
        m23.buffer[0] = 99
    with pytest.raises(ValueError):
        m23.as_array()[0, 0] = 99


def test_source_array_is_copied() -> None:
    arr = np.array([[1, 2], [3, 4]])
    m = Matrix.from_array(arr)
    arr[0, 0] = 100
    assert m[0, 0] == 1


def test_transpose(m23: Matrix) -> None:
    t = m23.transpose()
    assert t.shape == (3, 2)
    assert t.tolist() == [[1, 4], [2, 5], [3, 6]]
    assert t.transpose() == m23


def test_from_rows_requires_rectangular() -> None:
    with pytest.raises(InvalidMatrixError, match="Row 2 has 1 values"):
        Matrix.from_rows([[1, 2], [3]])


def test_buffer_must_fill_shape() -> None:
    with pytest.raises(InvalidMatrixError):
        Matrix([1, 2, 3], 2, 2)


def test_lanes_reject_unknown_axis(m23: Matrix) -> None:
    with pytest.raises(ValueError, match="axis must be one of"):
        list(m23.lanes("diagonal"))


def test_empty_matrix() -> None:
    assert Matrix.from_rows([]).shape == (0, 0)
    assert Matrix([], 0, 3).is_empty()
