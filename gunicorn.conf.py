"""Gunicorn config for serving simpledata.main:app."""
import os

bind = f"0.0.0.0:{os.environ.get('PORT', '8000')}"

# Uvicorn async workers — each loads its own copy of the records at startup
worker_class = "uvicorn.workers.UvicornWorker"
workers = int(os.environ.get("WEB_CONCURRENCY", "2"))
wsgi_app = "simpledata.main:app"

timeout = 60
graceful_timeout = 30
keepalive = 65

# Logging
accesslog = "-"
errorlog = "-"
loglevel = "info"
