"""
Request context middleware.

Plain ASGI middleware: it touches only the response start message, so
bodies stream through untouched.
"""

import time
import uuid

import structlog
from starlette.datastructures import Headers, MutableHeaders
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from client_registry.core.logging import get_logger

logger = get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"
RESPONSE_TIME_HEADER = "X-Response-Time"


class RequestContextMiddleware:
    """
    Tag every HTTP request with an ID and time it.

    The ID comes from the caller's ``X-Request-ID`` header or is generated.
    It is exposed to handlers as ``request.state.request_id``, bound into the
    structlog context with the method and path for the duration of the
    request, and echoed back along with ``X-Response-Time``.
    """

    def __init__(self, app: ASGIApp) -> None:
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        request_id = Headers(scope=scope).get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        scope.setdefault("state", {})["request_id"] = request_id
        started = time.perf_counter()

        async def send_with_context(message: Message) -> None:
            if message["type"] == "http.response.start":
                elapsed_ms = int((time.perf_counter() - started) * 1000)
                headers = MutableHeaders(scope=message)
                headers[REQUEST_ID_HEADER] = request_id
                headers[RESPONSE_TIME_HEADER] = f"{elapsed_ms}ms"
                logger.debug(
                    "Request completed",
                    extra={"status_code": message["status"], "duration_ms": elapsed_ms},
                )
            await send(message)

        with structlog.contextvars.bound_contextvars(
            request_id=request_id,
            method=scope["method"],
            path=scope["path"],
        ):
            await self.app(scope, receive, send_with_context)
