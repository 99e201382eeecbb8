import logging
import time
from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)


class MetricsMiddleware(BaseHTTPMiddleware):
    """Logs the response time of every tracked request"""

    TRACKED_METHODS = {"GET", "POST", "PUT", "PATCH", "DELETE"}
    IGNORED_PATHS = {"/docs", "/redoc", "/openapi.json", "/health"}

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        if request.url.path in self.IGNORED_PATHS:
            return await call_next(request)

        if request.method not in self.TRACKED_METHODS:
            return await call_next(request)

        start_time = time.perf_counter()
        status_code = 500

        try:
            response = await call_next(request)
            status_code = response.status_code
            return response
        finally:
            response_time_ms = (time.perf_counter() - start_time) * 1000
            logger.info(
                "%s %s -> %d (%.2f ms)",
                request.method,
                request.url.path,
                status_code,
                response_time_ms,
            )
