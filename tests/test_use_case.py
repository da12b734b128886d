"""Tests for the load + compute use-case, reporting and CSV export."""

from __future__ import annotations

import io

import pytest

from matstat.api import (
    InvalidMatrixError,
    ParseError,
    export_stats_to_csv,
    load_matrix,
    render_report,
    run_matrix_stats,
)
from matstat.contracts import SourceModel, StatsRunConfig
from matstat.core.environment import get_log_level, get_width_policy
from matstat.reporting import format_column_report, format_row_report


def _cfg(axis: str, **source) -> StatsRunConfig:
    return StatsRunConfig(source=SourceModel(**source), axis=axis)


def test_run_from_text(sample_text: str) -> None:
    result = run_matrix_stats(_cfg("cols", text=sample_text))
    assert result.axis == "cols"
    assert (result.num_rows, result.num_cols) == (2, 3)
    assert result.averages == [3, 4, 5]
    assert result.medians == [4, 5, 6]


def test_run_from_path(write_matrix, sample_text: str) -> None:
    result = run_matrix_stats(_cfg("rows", path=str(write_matrix(sample_text))))
    assert result.averages == [2, 5]
    assert result.medians == [2, 5]


def test_run_from_stream_when_no_path_or_text(sample_text: str) -> None:
    result = run_matrix_stats(_cfg("rows"), stream=io.StringIO(sample_text))
    assert result.averages == [2, 5]


def test_source_must_be_resolvable() -> None:
    with pytest.raises(ValueError, match="requires path or text"):
        load_matrix(SourceModel())
    with pytest.raises(ValueError, match="either path or text"):
        load_matrix(SourceModel(path="m.txt", text="1"))


@pytest.mark.parametrize("text", ["", "\n\n", "  \t \n"])
def test_empty_input_is_invalid(text: str) -> None:
    with pytest.raises(InvalidMatrixError, match="no matrix rows"):
        run_matrix_stats(_cfg("rows", text=text))


def test_parse_errors_propagate() -> None:
    with pytest.raises(ParseError, match="line 2"):
        run_matrix_stats(_cfg("rows", text="1 2\n3 x\n"))


def test_strict_width_policy_from_config() -> None:
    with pytest.raises(InvalidMatrixError):
        run_matrix_stats(_cfg("rows", text="1 2\n3\n", width_policy="strict"))


def test_row_report_layout(sample_text: str) -> None:
    result = run_matrix_stats(_cfg("rows", text=sample_text))
    assert format_row_report(result) == "Average\tMedian\n2\t2\n5\t5\n"
    assert render_report(result) == format_row_report(result)


def test_column_report_layout(sample_text: str) -> None:
    result = run_matrix_stats(_cfg("cols", text=sample_text))
    assert format_column_report(result) == "Averages:\n3\t4\t5\nMedians:\n4\t5\t6\n"
    assert render_report(result) == format_column_report(result)


def test_csv_export_in_memory(sample_text: str) -> None:
    result = run_matrix_stats(_cfg("cols", text=sample_text))
    exported = export_stats_to_csv(result)
    assert exported["path"] is None
    assert exported["filename"] == "cols_stats.csv"
    assert exported["mime_type"] == "text/csv"
    assert exported["content"].decode("utf-8") == "index,average,median\n0,3,4\n1,4,5\n2,5,6\n"
    assert exported["size"] == len(exported["content"])


def test_csv_export_to_directory(tmp_path, sample_text: str) -> None:
    result = run_matrix_stats(_cfg("rows", text=sample_text))
    exported = export_stats_to_csv(result, filename="report", dest=tmp_path)
    assert exported["path"] == tmp_path / "report.csv"
    assert exported["path"].read_text(encoding="utf-8").splitlines()[0] == "index,average,median"


def test_environment_defaults(monkeypatch) -> None:
    monkeypatch.delenv("MATSTAT_WIDTH_POLICY", raising=False)
    monkeypatch.setenv("MATSTAT_LOG_LEVEL", "debug")
    assert get_width_policy() == "last"
    assert get_log_level() == 10

    monkeypatch.setenv("MATSTAT_WIDTH_POLICY", "sloppy")
    with pytest.raises(ValueError, match="MATSTAT_WIDTH_POLICY"):
        get_width_policy()
