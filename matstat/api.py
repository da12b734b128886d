"""Public engine API.

This module is the **stable public surface** for loading matrices and
computing statistics. Prefer importing from here instead of reaching into
internal subpackages:

    from matstat.api import run_matrix_stats, render_report

The backend and scripts may depend on this module (and on
:mod:`matstat.contracts`) only.
"""

from __future__ import annotations

from matstat.components.stats import StatsEngine, compute_stats
from matstat.core.errors import InvalidMatrixError, MatrixError, ParseError, RaggedRowsWarning
from matstat.core.matrix import Matrix
from matstat.io.export.csv_export import ExportResult, export_stats_to_csv
from matstat.io.store import MatrixStore
from matstat.reporting.text_report import render_report
from matstat.use_cases.matrix_stats import load_matrix, run_matrix_stats

__all__ = [
    "Matrix",
    "MatrixStore",
    "StatsEngine",
    "load_matrix",
    "compute_stats",
    "run_matrix_stats",
    "render_report",
    "export_stats_to_csv",
    "ExportResult",
    "MatrixError",
    "InvalidMatrixError",
    "ParseError",
    "RaggedRowsWarning",
]
