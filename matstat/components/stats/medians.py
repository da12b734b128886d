from __future__ import annotations

from typing import List

import numpy as np

from matstat.core.matrix import Matrix
from matstat.core.shapes import ensure_computable


def upper_median(values: np.ndarray) -> int:
    """Element at 1-based position ``n // 2 + 1`` of the ascending sort.

    For odd ``n`` this is the middle element; for even ``n`` it is the upper
    of the two middle elements (no interpolation).
    """
    n = values.shape[0]
    if n == 0:
        raise ValueError("median of an empty sequence is undefined")
    return int(np.sort(values, kind="stable")[n // 2])


def compute_medians(matrix: Matrix, axis: str) -> List[int]:
    """One upper-middle median per row (``axis="rows"``) or column (``"cols"``)."""

    ensure_computable(matrix, axis)
    return [upper_median(lane) for lane in matrix.lanes(axis)]
