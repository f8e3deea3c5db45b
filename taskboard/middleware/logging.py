"""
Access Logging Middleware

Logs every API request with its duration and flags slow ones.
"""

import time
import uuid
from typing import Callable
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from taskboard.core.config import settings
from taskboard.logging import get_logger

logger = get_logger(__name__)


class AccessLoggingMiddleware(BaseHTTPMiddleware):
    """
    Logs method, path, status and duration of each request.

    A request slower than SLOW_REQUEST_THRESHOLD is also logged at the
    `slow` level. Every response carries an X-Request-ID header for
    correlation with the logs.
    """

    def __init__(self, app: ASGIApp, enabled: bool = True):
        """
        Args:
            app: FastAPI application
            enabled: Whether request logging is enabled
        """
        super().__init__(app)
        self.enabled = enabled

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = request.headers.get("x-request-id") or str(uuid.uuid4())
        request.state.request_id = request_id

        # Skip logging for health check and docs
        if not self.enabled or request.url.path in ["/", "/health", "/docs", "/openapi.json"]:
            response = await call_next(request)
            response.headers["X-Request-ID"] = request_id
            return response

        start_time = time.perf_counter()
        response = await call_next(request)
        duration = round(time.perf_counter() - start_time, 4)

        logger.request(
            "API request",
            method=request.method,
            path=request.url.path,
            status_code=response.status_code,
            duration=duration,
            request_id=request_id,
            client_ip=self._get_client_ip(request),
        )
        if duration > settings.SLOW_REQUEST_THRESHOLD:
            logger.slow(
                "Slow request",
                duration=duration,
                threshold=settings.SLOW_REQUEST_THRESHOLD,
                method=request.method,
                path=request.url.path,
                request_id=request_id,
            )

        response.headers["X-Request-ID"] = request_id
        return response

    def _get_client_ip(self, request: Request) -> str:
        """
        Client IP, preferring the first X-Forwarded-For entry set by proxies.
        """
        forwarded_for = request.headers.get("x-forwarded-for")
        if forwarded_for:
            return forwarded_for.split(",")[0].strip()

        if request.client:
            return request.client.host

        return "unknown"
