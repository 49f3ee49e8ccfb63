"""
JSON Response Helpers.

Every response the API writes goes through these helpers, so all bodies
are JSON with Content-Type: application/json and all errors share the
``{"error": "<message>"}`` shape.

Usage:
    from client_registry.core.responses import respond_with_error, respond_with_json

    return respond_with_json(201, client.model_dump())
    return respond_with_error(404, "Cliente não encontrado")
"""

from typing import Any

from fastapi.responses import JSONResponse
from starlette.responses import Response

from client_registry.core.logging import get_logger

logger = get_logger(__name__)


class SafeJSONResponse(JSONResponse):
    """
    JSONResponse that never fails while rendering its body.

    Status and headers are decided before the body is encoded. If encoding
    fails the error is logged and the response goes out with an empty body.
    """

    def render(self, content: Any) -> bytes:
        try:
            return super().render(content)
        except (TypeError, ValueError) as e:
            logger.error(
                "Failed to encode JSON response",
                extra={"error": str(e), "payload_type": type(content).__name__},
            )
            return b""


def respond_with_json(
    status_code: int,
    payload: Any = None,
    headers: dict[str, str] | None = None,
) -> Response:
    """
    Build a JSON response.

    Args:
        status_code: HTTP status code
        payload: JSON-compatible content; None sends an empty body
        headers: Extra response headers

    Returns:
        Response with Content-Type: application/json
    """
    if payload is None:
        return Response(
            status_code=status_code,
            headers=headers,
            media_type="application/json",
        )
    return SafeJSONResponse(content=payload, status_code=status_code, headers=headers)


def respond_with_error(
    status_code: int,
    message: str,
    headers: dict[str, str] | None = None,
) -> Response:
    """Build an ``{"error": message}`` response."""
    return respond_with_json(status_code, {"error": message}, headers=headers)
