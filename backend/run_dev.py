"""run_dev.py — Start the Event API in development mode.

Equivalent CLI command (run from backend/):
    uvicorn api.main:app --reload --host 0.0.0.0 --port 8000

Tables are created on startup and uploaded images land in ./UploadedImages
unless DATABASE_URL / UPLOAD_DIR say otherwise.
"""

import uvicorn

from core.config import settings

if __name__ == "__main__":
    uvicorn.run(
        "api.main:app",
        host="0.0.0.0",
        port=8000,
        reload=not settings.is_production,
        log_level=settings.log_level.lower(),
    )
