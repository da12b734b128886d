from typing import List, Optional

from pydantic import BaseModel

from matstat.contracts import AxisName, WidthPolicy


# Request allows either inline text or a path (relative to the upload dir)
class StatsRequest(BaseModel):
    axis: AxisName
    text: Optional[str] = None
    path: Optional[str] = None
    width_policy: WidthPolicy = "last"


class StatsExportRequest(StatsRequest):
    filename: Optional[str] = None


class StatsPairModel(BaseModel):
    average: int
    median: int


class StatsResponse(BaseModel):
    axis: AxisName
    num_rows: int
    num_cols: int
    averages: List[int]
    medians: List[int]
    pairs: List[StatsPairModel]
