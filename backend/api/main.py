"""
main.py — Event API entry point

The FastAPI application instance lives here. All middleware, routers,
and startup/shutdown events are registered in this file.

Usage
-----
Development (auto-reloads on file save):
    cd backend
    uvicorn api.main:app --reload --port 8000

Production (multiple worker processes):
    cd backend
    gunicorn api.main:app -c gunicorn.conf.py

Docs (once running):
    http://localhost:8000/docs    — Swagger UI (interactive)
    http://localhost:8000/redoc   — ReDoc (read-only)
"""

from __future__ import annotations

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from api.routers.health import VERSION
from api.routers.health import router as health_router
from api.v1.router import v1_router
from core.config import settings
from core.logging import configure_logging
from core.middleware import RequestIDMiddleware, TimingMiddleware
from db.database import init_db

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Lifespan — startup and shutdown hooks
# ---------------------------------------------------------------------------

@asynccontextmanager
async def lifespan(app: FastAPI):
    # ── Startup ────────────────────────────────────────────────────────────────
    configure_logging(settings.log_level, settings.log_dir)
    os.makedirs(settings.upload_dir, exist_ok=True)
    if settings.create_tables:
        init_db()
    logger.info(
        "Event API starting",
        extra={
            "environment": settings.environment,
            "version": VERSION,
            "log_level": settings.log_level,
            "upload_dir": os.path.abspath(settings.upload_dir),
            "allowed_origins": settings.allowed_origins,
        },
    )
    yield
    # ── Shutdown ───────────────────────────────────────────────────────────────
    logger.info("Event API shutting down")


# ---------------------------------------------------------------------------
# Application
# ---------------------------------------------------------------------------

app = FastAPI(
    title="Event API",
    description="Create, list, read, update and delete events with an optional image.",
    version=VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)


# ---------------------------------------------------------------------------
# Middleware  (add_middleware order matters: last added = outermost)
#
#   Request:  CORS → RequestID → Timing → route handler
#   Response: route handler → Timing → RequestID → CORS
# ---------------------------------------------------------------------------

app.add_middleware(TimingMiddleware)
app.add_middleware(RequestIDMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["Location", "X-Request-ID"],
)


# ---------------------------------------------------------------------------
# Exception handlers
# ---------------------------------------------------------------------------

@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    """Return structured JSON for HTTP errors raised with a detail."""
    request_id = getattr(request.state, "request_id", None)
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "error": exc.detail,
            "status_code": exc.status_code,
            "request_id": request_id,
        },
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all for unhandled exceptions: log the traceback, return clean JSON."""
    request_id = getattr(request.state, "request_id", None)
    logger.error(
        "unhandled exception",
        extra={
            "request_id": request_id,
            "method": request.method,
            "path": request.url.path,
            "error": str(exc),
        },
        exc_info=True,
    )
    return JSONResponse(
        status_code=500,
        content={
            "error": "Internal server error",
            "status_code": 500,
            "request_id": request_id,
        },
    )


# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------

app.include_router(health_router)            # /health, /health/db  (unversioned)
app.include_router(v1_router, prefix="/api/v1")

# Stored images, read-only. The directory is created at startup.
app.mount("/images", StaticFiles(directory=settings.upload_dir, check_dir=False), name="images")


# ---------------------------------------------------------------------------
# Root
# ---------------------------------------------------------------------------

@app.get("/", tags=["root"], summary="API root")
def root():
    """Confirms the API is running. Returns service name, version, and docs URL."""
    return {
        "service": "Event API",
        "version": VERSION,
        "docs":    "/docs",
    }
