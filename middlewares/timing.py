"""
middlewares/timing.py

Adds X-Latency-Ms to every response and writes one access line per request.
Requests slower than settings.SLOW_REQUEST_MS are logged at WARNING
(report cards and GPA issue one query per subject per term).
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

from config.settings import settings

logger = logging.getLogger("request")

QUIET_PATHS = ("/health",)


class TimingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        latency_ms = (time.perf_counter() - start) * 1000
        response.headers["X-Latency-Ms"] = f"{latency_ms:.1f}"

        path = request.url.path
        if latency_ms >= settings.SLOW_REQUEST_MS:
            logger.warning("slow request %s %s -> %s (%.1f ms)", request.method, path, response.status_code, latency_ms)
        elif path not in QUIET_PATHS:
            logger.info("%s %s -> %s (%.1f ms)", request.method, path, response.status_code, latency_ms)
        return response
