from __future__ import annotations

from typing import List

from matstat.core.matrix import Matrix
from matstat.core.shapes import ensure_computable


def rounded_mean(total: int, count: int) -> int:
    """Integer mean rounded half up: ``(total + count // 2) // count``.

    Uses floor division on exact Python ints, so exact halves always round
    toward +inf (``1.5 -> 2``, ``-1.5 -> -1``).
    """
    return (total + count // 2) // count


def compute_averages(matrix: Matrix, axis: str) -> List[int]:
    """One rounded average per row (``axis="rows"``) or column (``"cols"``)."""

    _outer, inner = ensure_computable(matrix, axis)
    # tolist() -> Python ints, so sums cannot overflow int64
    return [rounded_mean(sum(lane.tolist()), inner) for lane in matrix.lanes(axis)]
