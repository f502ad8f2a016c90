# gunicorn.conf.py — Production server configuration for the Event API.
#
# Run from backend/ with:
#   gunicorn api.main:app -c gunicorn.conf.py
#
# Every worker runs the FastAPI lifespan, so table creation (CREATE_TABLES)
# must stay idempotent; Base.metadata.create_all only adds missing tables.

import os

workers = int(os.environ.get("WEB_CONCURRENCY", "4"))
worker_class = "uvicorn.workers.UvicornWorker"

bind = os.environ.get("BIND", "0.0.0.0:8000")

# Access and error logs go to stdout/stderr; application logs are JSON
# via core/logging.py
accesslog = "-"
errorlog  = "-"
loglevel  = "info"

# Uploads are read into a spooled temp file before the handler runs
timeout          = 60
keepalive        = 5
graceful_timeout = 30
