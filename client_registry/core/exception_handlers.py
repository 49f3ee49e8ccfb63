"""
Exception handlers.

Every failure leaves the service as ``{"error": message}``. Application
errors take their status from ``STATUS_BY_ERROR``; router errors keep the
router's status and headers; anything else is a 500 that hides its detail.

Records logged while the request middleware is active already carry the
request ID, method and path from the structlog context.
"""

from fastapi import FastAPI, Request
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import Response

from client_registry.core.exceptions import (
    INTERNAL_ERROR_MESSAGE,
    ApplicationError,
    BadRequestError,
    NotFoundError,
)
from client_registry.core.logging import get_logger
from client_registry.core.responses import respond_with_error

logger = get_logger(__name__)

STATUS_BY_ERROR: dict[type[ApplicationError], int] = {
    NotFoundError: 404,
    BadRequestError: 400,
}


def status_for(exc: ApplicationError) -> int:
    """Status of the nearest mapped class in the error's MRO, else 500."""
    for error_type in type(exc).__mro__:
        if error_type in STATUS_BY_ERROR:
            return STATUS_BY_ERROR[error_type]
    return 500


async def application_error_handler(request: Request, exc: ApplicationError) -> Response:
    status_code = status_for(exc)
    log = logger.error if status_code >= 500 else logger.warning
    log(exc.message, extra={"code": exc.code, "status": status_code})
    return respond_with_error(status_code, exc.message)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> Response:
    # 404 for unknown paths, 405 (with Allow) for unrouted methods, 503 from readiness
    logger.warning("HTTP error", extra={"status": exc.status_code, "detail": exc.detail})
    return respond_with_error(exc.status_code, str(exc.detail), headers=exc.headers)


async def unhandled_exception_handler(request: Request, exc: Exception) -> Response:
    """
    Last resort for anything not raised on purpose.

    Runs outside the request middleware, so the request ID is read back
    from ``request.state`` for the log record.
    """
    logger.exception(
        "Unhandled exception",
        extra={
            "request_id": getattr(request.state, "request_id", None),
            "method": request.method,
            "path": request.url.path,
        },
    )
    return respond_with_error(500, INTERNAL_ERROR_MESSAGE)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApplicationError, application_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
