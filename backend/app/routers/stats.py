# backend/app/routers/stats.py
import logging

from fastapi import APIRouter, HTTPException
from fastapi.responses import StreamingResponse

from matstat.api import MatrixError

from ..adapters.io import LoadError
from ..models.v1.stats_models import StatsExportRequest, StatsRequest, StatsResponse
from ..services.stats_service import compute_stats, export_stats, stats_payload

router = APIRouter()

logger = logging.getLogger(__name__)


@router.post("/stats", response_model=StatsResponse)
def stats_endpoint(req: StatsRequest):
    """
    Per-row or per-column averages and medians.

    Flow:
      1. Resolve the source (inline text or an allow-listed file path).
      2. Load + compute through the engine public API.
      3. Return the aligned averages/medians plus row-mode pairs.
    """
    try:
        result = compute_stats(req)
    except LoadError as e:
        raise HTTPException(status_code=400, detail=f"Data load failed: {e}")
    except MatrixError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=f"Data load failed: {e}")
    except Exception as e:
        logger.exception("stats computation failed")
        raise HTTPException(status_code=500, detail=str(e))

    return StatsResponse(**stats_payload(result))


@router.post("/stats/export")
def export_stats_endpoint(req: StatsExportRequest):
    """
    Same computation as /stats, returned as a CSV download (no JSON envelope).
    """
    try:
        export_result = export_stats(req)
    except LoadError as e:
        raise HTTPException(status_code=400, detail=f"Data load failed: {e}")
    except MatrixError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=f"Data load failed: {e}")
    except Exception as e:
        logger.exception("stats export failed")
        raise HTTPException(status_code=500, detail=str(e))

    headers = {
        "Content-Disposition": f'attachment; filename="{export_result["filename"]}"',
        "X-MATSTAT-Size": str(export_result["size"]),
    }

    return StreamingResponse(
        content=iter([export_result["content"]]),
        media_type=export_result["mime_type"],
        headers=headers,
    )
