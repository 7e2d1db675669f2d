"""
HTTP middleware stack: request correlation and access logging.
"""
import logging
import time
import uuid

from starlette.middleware.base import BaseHTTPMiddleware
from starlette import status
from starlette.requests import Request

from app.core.config import settings
from app.core.exceptions import UNEXPECTED_ERROR, error_response
from app.core.logging import request_id_var

logger = logging.getLogger("app.access")


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    """Reuses the caller's X-Request-ID or mints one, and echoes it back."""

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get(settings.request_id_header) or uuid.uuid4().hex
        token = request_id_var.set(request_id)
        try:
            response = await call_next(request)
        finally:
            request_id_var.reset(token)
        response.headers[settings.request_id_header] = request_id
        return response


class LoggingMiddleware(BaseHTTPMiddleware):
    """
    One line per request: method, path, status and duration.

    Unhandled errors become the 500 envelope here, inside
    CorrelationIdMiddleware, so they still carry the request id.
    """

    async def dispatch(self, request: Request, call_next):
        start = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            logger.exception("Unhandled server error", extra={"path": request.url.path})
            response = error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, UNEXPECTED_ERROR)
        duration_ms = round((time.perf_counter() - start) * 1000, 2)
        response.headers["X-Process-Time"] = str(duration_ms)
        logger.info(
            f"{request.method} {request.url.path} {response.status_code} {duration_ms}ms",
            extra={
                "method": request.method,
                "path": request.url.path,
                "status_code": response.status_code,
                "duration_ms": duration_ms,
            },
        )
        return response
