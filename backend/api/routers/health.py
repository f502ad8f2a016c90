"""api/routers/health.py — Health check endpoints.

Routes (mounted at root, no /api/v1 prefix):
    GET /health        Liveness check — returns env, version, timestamp
    GET /health/db     Readiness check — verifies DB is reachable
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from api.dependencies import check_db_connectivity, get_db
from core.config import settings

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])

VERSION = "1.0.0"


@router.get("/health", summary="Liveness check")
def health():
    """Returns environment, version, and current UTC timestamp."""
    return {
        "status": "ok",
        "environment": settings.environment,
        "version": VERSION,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


@router.get("/health/db", summary="Readiness check")
def health_db(db: Session = Depends(get_db)):
    """Returns HTTP 200 when the database answers SELECT 1, HTTP 503 when not."""
    try:
        check_db_connectivity(db)
    except RuntimeError as exc:
        logger.warning("health/db: database unreachable", extra={"error": str(exc)})
        return JSONResponse(
            status_code=503,
            content={"status": "error", "db": str(exc)},
        )
    logger.debug("health/db: database reachable")
    return {"status": "ok", "db": "connected"}
