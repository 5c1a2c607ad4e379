import logging
import time

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger("phongnews.requests")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """One log line per request: ``GET /api/data/rooms 200 3.12 ms``."""

    async def dispatch(self, request: Request, call_next):
        start = time.perf_counter()
        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
            return response
        finally:
            duration_ms = round((time.perf_counter() - start) * 1000, 2)
            logger.info(
                "%s %s %s %s ms",
                request.method,
                request.url.path,
                status_code,
                duration_ms,
            )
