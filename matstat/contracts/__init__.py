"""Engine contracts: config inputs, result outputs and choice types.

Contracts should only depend on stdlib + pydantic (pandas is imported lazily
by :meth:`StatsResult.to_frame`).
"""

from .types import AXES, WIDTH_POLICIES, AxisName, WidthPolicy
from .run_config import SourceModel, StatsRunConfig
from .results import ResultModel, StatsPair, StatsResult

__all__ = [
    "AXES",
    "WIDTH_POLICIES",
    "AxisName",
    "WidthPolicy",
    "SourceModel",
    "StatsRunConfig",
    "ResultModel",
    "StatsPair",
    "StatsResult",
]
