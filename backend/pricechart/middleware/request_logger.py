# backend/pricechart/middleware/request_logger.py
import time
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from pricechart.logger import get_logger

log = get_logger(__name__)

class RequestLoggerMiddleware(BaseHTTPMiddleware):
    """Logs one line per request and stamps the elapsed time on the response."""

    async def dispatch(self, request: Request, call_next):
        start = time.perf_counter()
        response = None
        try:
            response = await call_next(request)
            return response
        finally:
            elapsed = time.perf_counter() - start
            status = getattr(response, "status_code", "-")
            if response is not None:
                response.headers["X-Process-Time"] = f"{elapsed:.4f}"
            query = request.url.query
            target = f"{request.url.path}?{query}" if query else request.url.path
            log.info("%s %s -> %s %dms", request.method, target, status, int(elapsed * 1000))
