from __future__ import annotations

"""Immutable integer matrix backed by a flat row-major buffer.

Storage is a 1D ``int64`` array indexed by ``row * num_cols + col``. Callers
should go through the 2D accessors (:meth:`Matrix.row`, :meth:`Matrix.column`,
:meth:`Matrix.lanes`) rather than computing offsets themselves.
"""

from typing import Iterable, Iterator, Sequence

import numpy as np

from .errors import InvalidMatrixError
from .shapes import axis_lengths


class Matrix:
    """Read-only integer grid with known row/column counts."""

    __slots__ = ("_buffer", "_num_rows", "_num_cols")

    def __init__(self, buffer: Iterable[int] | np.ndarray, num_rows: int, num_cols: int) -> None:
        if num_rows < 0 or num_cols < 0:
            raise ValueError(f"Matrix dimensions must be non-negative; got {num_rows}x{num_cols}")

        buf = np.array(buffer, dtype=np.int64).ravel()
        if buf.size != num_rows * num_cols:
            raise InvalidMatrixError(
                f"Buffer holds {buf.size} values, which does not fill a "
                f"{num_rows}x{num_cols} matrix"
            )
        buf.flags.writeable = False

        self._buffer = buf
        self._num_rows = int(num_rows)
        self._num_cols = int(num_cols)

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------
    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> "Matrix":
        """Build from nested sequences; every row must have the same width."""
        if len(rows) == 0:
            return cls([], 0, 0)
        width = len(rows[0])
        for i, r in enumerate(rows):
            if len(r) != width:
                raise InvalidMatrixError(
                    f"Row {i + 1} has {len(r)} values; expected {width} (width of row 1)"
                )
        flat = [int(v) for r in rows for v in r]
        return cls(flat, len(rows), width)

    @classmethod
    def from_array(cls, arr: np.ndarray) -> "Matrix":
        arr = np.asarray(arr)
        if arr.ndim != 2:
            raise InvalidMatrixError(f"Matrix must be 2D; got shape={arr.shape}")
        n_rows, n_cols = arr.shape
        return cls(arr.reshape(-1), n_rows, n_cols)

    # ------------------------------------------------------------------
    # Shape
    # ------------------------------------------------------------------
    @property
    def num_rows(self) -> int:
        return self._num_rows

    @property
    def num_cols(self) -> int:
        return self._num_cols

    @property
    def shape(self) -> tuple[int, int]:
        return self._num_rows, self._num_cols

    @property
    def buffer(self) -> np.ndarray:
        """The flat row-major storage (read-only)."""
        return self._buffer

    def is_empty(self) -> bool:
        return self._num_rows == 0 or self._num_cols == 0

    # ------------------------------------------------------------------
    # 2D access
    # ------------------------------------------------------------------
    def __getitem__(self, index: tuple[int, int]) -> int:
        r, c = index
        if not (0 <= r < self._num_rows and 0 <= c < self._num_cols):
            raise IndexError(f"({r}, {c}) out of range for shape {self.shape}")
        return int(self._buffer[r * self._num_cols + c])

    def row(self, i: int) -> np.ndarray:
        if not 0 <= i < self._num_rows:
            raise IndexError(f"row {i} out of range for {self._num_rows} rows")
        start = i * self._num_cols
        return self._buffer[start : start + self._num_cols]

    def column(self, j: int) -> np.ndarray:
        if not 0 <= j < self._num_cols:
            raise IndexError(f"column {j} out of range for {self._num_cols} columns")
        return self._buffer[j :: self._num_cols]

    def lanes(self, axis: str) -> Iterator[np.ndarray]:
        """Yield each row (``axis="rows"``) or each column (``axis="cols"``)."""
        outer, _inner = axis_lengths(self, axis)
        get = self.row if axis == "rows" else self.column
        for i in range(outer):
            yield get(i)

    def as_array(self) -> np.ndarray:
        """2D read-only view of the buffer."""
        return self._buffer.reshape(self._num_rows, self._num_cols)

    def transpose(self) -> "Matrix":
        return Matrix(self.as_array().T.reshape(-1), self._num_cols, self._num_rows)

    def tolist(self) -> list[list[int]]:
        return self.as_array().tolist()

    # ------------------------------------------------------------------
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._buffer, other._buffer))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Matrix(num_rows={self._num_rows}, num_cols={self._num_cols})"
