"""core/middleware.py — Custom ASGI middleware for the Event API.

Provides:
  - RequestIDMiddleware  : tags each request with an ID (X-Request-ID header),
                           reusing a caller-supplied one when present
  - TimingMiddleware     : logs method, path, status, and duration per request
                           and reports the duration in X-Process-Time-Ms
"""

from __future__ import annotations

import logging
import time
import uuid

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"
PROCESS_TIME_HEADER = "X-Process-Time-Ms"

_MAX_REQUEST_ID_LENGTH = 128


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Attach a request ID to every request and response.

    An incoming X-Request-ID is propagated as-is so a proxy or client can
    correlate its own logs; otherwise a fresh UUID4 is generated.
    """

    async def dispatch(self, request: Request, call_next) -> Response:
        incoming = request.headers.get(REQUEST_ID_HEADER, "").strip()
        if incoming and len(incoming) <= _MAX_REQUEST_ID_LENGTH:
            request_id = incoming
        else:
            request_id = str(uuid.uuid4())
        request.state.request_id = request_id
        response = await call_next(request)
        response.headers[REQUEST_ID_HEADER] = request_id
        return response


class TimingMiddleware(BaseHTTPMiddleware):
    """Log one line per request; server errors are logged at WARNING.

    Reads request.state.request_id, so RequestIDMiddleware must wrap it
    (added after TimingMiddleware).
    """

    async def dispatch(self, request: Request, call_next) -> Response:
        start = time.perf_counter()
        response = await call_next(request)
        duration_ms = round((time.perf_counter() - start) * 1000, 2)
        response.headers[PROCESS_TIME_HEADER] = str(duration_ms)

        level = logging.WARNING if response.status_code >= 500 else logging.INFO
        logger.log(
            level,
            "request completed",
            extra={
                "request_id": getattr(request.state, "request_id", "-"),
                "method": request.method,
                "path": request.url.path,
                "status_code": response.status_code,
                "duration_ms": duration_ms,
            },
        )
        return response
