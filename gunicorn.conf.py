"""
Gunicorn configuration for the Sitemap Service
"""

import multiprocessing
import os

bind = f"0.0.0.0:{os.getenv('PORT', '5000')}"

# Sitemap generation is CPU-bound, one worker per core
workers = int(os.getenv("WORKERS", multiprocessing.cpu_count()))
worker_class = "uvicorn.workers.UvicornWorker"

# Catalog is registered at import time, share it across forks
preload_app = True

timeout = int(os.getenv("WORKER_TIMEOUT", "30"))

accesslog = "-"
errorlog = "-"
loglevel = os.getenv("LOG_LEVEL", "info").lower()

proc_name = "sitemap-service"


def when_ready(server):
    server.log.info(f"Sitemap Service listening on {bind}, {workers} workers, sitemap at "
                    f"{os.getenv('SITEMAP_PATH', '/sitemap.xml')}")
