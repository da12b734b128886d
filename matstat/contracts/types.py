from __future__ import annotations

"""Literal choice sets shared by the engine, CLI and backend."""

from typing import Literal, TypeAlias, get_args

# Aggregation axis: "rows" -> one result per row, "cols" -> one per column
AxisName: TypeAlias = Literal["rows", "cols"]

# Ragged input handling
#   last   -> trust the width of the last line read (legacy)
#   strict -> every line must match the first line's width
WidthPolicy: TypeAlias = Literal["last", "strict"]

AXES: tuple[str, ...] = get_args(AxisName)
WIDTH_POLICIES: tuple[str, ...] = get_args(WidthPolicy)

__all__ = ["AxisName", "WidthPolicy", "AXES", "WIDTH_POLICIES"]
