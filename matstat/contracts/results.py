from __future__ import annotations

"""Result contracts for the statistics engine.

These models represent *outputs* produced by the engine and are intended to be
stable across CLI/backend changes. Callers serialize via ``model_dump()`` at the
boundary.
"""

from typing import TYPE_CHECKING, List

from pydantic import BaseModel, ConfigDict, model_validator

from .types import AxisName

if TYPE_CHECKING:  # pragma: no cover
    import pandas as pd


class ResultModel(BaseModel):
    """Base class for result contracts (strict by default)."""

    model_config = ConfigDict(extra="forbid")


class StatsPair(ResultModel):
    average: int
    median: int


class StatsResult(ResultModel):
    """Per-row or per-column averages and medians, aligned by index."""

    axis: AxisName
    num_rows: int
    num_cols: int
    averages: List[int]
    medians: List[int]

    @model_validator(mode="after")
    def _check_aligned(self) -> "StatsResult":
        expected = self.num_rows if self.axis == "rows" else self.num_cols
        if len(self.averages) != expected or len(self.medians) != expected:
            raise ValueError(
                f"{self.axis} result must have {expected} averages and medians; "
                f"got {len(self.averages)} and {len(self.medians)}"
            )
        return self

    def __len__(self) -> int:
        return len(self.averages)

    def pairs(self) -> List[StatsPair]:
        """Row-mode view: one ``{average, median}`` pair per lane."""
        return [StatsPair(average=a, median=m) for a, m in zip(self.averages, self.medians)]

    def to_frame(self) -> "pd.DataFrame":
        """Tabular view with columns ``index, average, median``."""
        import pandas as pd

        return pd.DataFrame(
            {
                "index": list(range(len(self.averages))),
                "average": self.averages,
                "median": self.medians,
            }
        )
