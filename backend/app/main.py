from fastapi import FastAPI

import logging

from .routers.health import router as health_router
from .routers.stats import router as stats_router


class _SkipHealthAccessLogs(logging.Filter):
    """Hide uvicorn access logs for health polling to prevent console spam."""
    def filter(self, record: logging.LogRecord) -> bool:
        try:
            msg = record.getMessage()
        except Exception:
            return True
        return "/healthz" not in msg and "/api/v1/ping" not in msg

# Attach the filter once
_access_logger = logging.getLogger("uvicorn.access")
# Avoid duplicate filters on reload
if not any(isinstance(f, _SkipHealthAccessLogs) for f in getattr(_access_logger, "filters", [])):
    _access_logger.addFilter(_SkipHealthAccessLogs())

app = FastAPI(
    title="matstat Local API",
    version="1.0.0",
    description="Local API exposing matrix row/column statistics",
)

# Routers
app.include_router(health_router, prefix="/api/v1", tags=["health"])
app.include_router(stats_router,  prefix="/api/v1", tags=["stats"])


@app.get("/healthz")
def healthz():
    return {"ok": True}
