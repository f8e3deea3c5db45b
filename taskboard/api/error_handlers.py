"""
Global exception handlers.

- ServiceError -> status and body defined by the error class (404, 409)
- Exception (catch-all) -> 500, reported to Sentry, no internal detail leaked
"""

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from taskboard.core.errors import ServiceError
from taskboard.core.logging import capture_error
from taskboard.logging import get_logger

logger = get_logger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""

    @app.exception_handler(ServiceError)
    async def service_error_handler(request: Request, exc: ServiceError):
        logger.warning(exc.message, code=exc.code, path=request.url.path)
        return JSONResponse(status_code=exc.http_status, content=exc.to_response())

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled error: {exc}", path=request.url.path, method=request.method)
        event_id = capture_error(
            exc,
            context={"request": {"path": request.url.path, "method": request.method}},
        )
        content = {"detail": "Internal server error", "code": "internal_error"}
        if event_id:
            content["event_id"] = event_id
        return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=content)
