from __future__ import annotations

from typing import Optional

from pydantic import BaseModel

from .types import AxisName, WidthPolicy


class SourceModel(BaseModel):
    # Exactly one of path/text is normally set; neither means "read stdin".
    path: Optional[str] = None
    text: Optional[str] = None

    # Parsing hints
    encoding: Optional[str] = None
    width_policy: WidthPolicy = "last"


class StatsRunConfig(BaseModel):
    source: SourceModel
    axis: AxisName
