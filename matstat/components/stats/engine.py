"""Stateless statistics over a loaded :class:`Matrix`."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List

from matstat.contracts.results import StatsResult
from matstat.core.matrix import Matrix
from matstat.core.shapes import ensure_computable

from .averages import compute_averages
from .medians import compute_medians

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StatsEngine:
    """Per-row or per-column average/median over one matrix.

    Every call builds fresh result lists; nothing is cached between calls.
    """

    matrix: Matrix

    def compute_average(self, axis: str) -> List[int]:
        return compute_averages(self.matrix, axis)

    def compute_median(self, axis: str) -> List[int]:
        return compute_medians(self.matrix, axis)

    def compute(self, axis: str) -> StatsResult:
        outer, inner = ensure_computable(self.matrix, axis)
        logger.debug("computing %s stats: %d lanes of %d values", axis, outer, inner)
        return StatsResult(
            axis=axis,
            num_rows=self.matrix.num_rows,
            num_cols=self.matrix.num_cols,
            averages=self.compute_average(axis),
            medians=self.compute_median(axis),
        )


def compute_stats(matrix: Matrix, axis: str) -> StatsResult:
    return StatsEngine(matrix).compute(axis)
