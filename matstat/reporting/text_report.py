"""Plain-text presentation of :class:`StatsResult`.

Row mode::

    Average\tMedian
    2\t2
    5\t5

Column mode::

    Averages:
    3\t4\t5
    Medians:
    4\t5\t6
"""

from __future__ import annotations

from matstat.contracts.results import StatsResult

ROW_HEADER = "Average\tMedian"
AVERAGES_LABEL = "Averages:"
MEDIANS_LABEL = "Medians:"


def _join(values: list[int]) -> str:
    return "\t".join(str(v) for v in values)


def format_row_report(result: StatsResult) -> str:
    lines = [ROW_HEADER]
    lines.extend(f"{p.average}\t{p.median}" for p in result.pairs())
    return "\n".join(lines) + "\n"


def format_column_report(result: StatsResult) -> str:
    lines = [AVERAGES_LABEL, _join(result.averages), MEDIANS_LABEL, _join(result.medians)]
    return "\n".join(lines) + "\n"


def render_report(result: StatsResult) -> str:
    if result.axis == "rows":
        return format_row_report(result)
    return format_column_report(result)
