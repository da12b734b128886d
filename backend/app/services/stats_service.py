# backend/app/services/stats_service.py
from typing import Any, Dict

from matstat.api import ExportResult, export_stats_to_csv, run_matrix_stats
from matstat.contracts import SourceModel, StatsResult, StatsRunConfig

from ..adapters.io import LoadError, resolve_user_path
from ..models.v1.stats_models import StatsExportRequest, StatsRequest


def build_run_config(req: StatsRequest) -> StatsRunConfig:
    """Translate an HTTP request into an engine run config (exactly one source)."""
    has_text = req.text is not None
    has_path = bool(req.path and req.path.strip())
    if has_text == has_path:
        raise LoadError("Provide exactly one of 'text' or 'path'")

    source = SourceModel(
        text=req.text if has_text else None,
        path=resolve_user_path(req.path) if has_path else None,
        width_policy=req.width_policy,
    )
    return StatsRunConfig(source=source, axis=req.axis)


def compute_stats(req: StatsRequest) -> StatsResult:
    return run_matrix_stats(build_run_config(req))


def stats_payload(result: StatsResult) -> Dict[str, Any]:
    payload = result.model_dump()
    payload["pairs"] = [p.model_dump() for p in result.pairs()]
    return payload


def export_stats(req: StatsExportRequest) -> ExportResult:
    result = compute_stats(req)
    return export_stats_to_csv(result, filename=req.filename)
