"""
Clients API Endpoints.

REST API endpoints for client management.

Create and replace read the raw request body instead of declaring a body
parameter: a replace must answer 404 for an unknown ID before the body
is decoded, and undecodable bodies answer 400 rather than 422.
"""

from fastapi import APIRouter, Request
from starlette.responses import Response

from client_registry.core.dependencies import ClientServiceDep
from client_registry.core.responses import respond_with_json
from client_registry.schemas.base import ErrorResponse
from client_registry.schemas.client import Client, ClientPayload, parse_client_payload

router = APIRouter()

_CLIENT_BODY = {
    "requestBody": {
        "required": True,
        "content": {"application/json": {"schema": ClientPayload.model_json_schema()}},
    },
}
_NOT_FOUND = {404: {"model": ErrorResponse, "description": "Client not found"}}
_BAD_REQUEST = {400: {"model": ErrorResponse, "description": "Invalid JSON body"}}


@router.get(
    "",
    response_model=list[Client],
    summary="List clients",
    description="Get every stored client. An empty registry returns an empty list.",
)
async def list_clients(service: ClientServiceDep) -> Response:
    """List all clients."""
    clients = service.list_clients()
    return respond_with_json(200, [client.model_dump() for client in clients])


@router.get(
    "/{client_id}",
    response_model=Client,
    responses=_NOT_FOUND,
    summary="Get a client",
    description="Get a single client by ID.",
)
async def get_client(client_id: str, service: ClientServiceDep) -> Response:
    """Get a client by ID."""
    client = service.get_client(client_id)
    return respond_with_json(200, client.model_dump())


@router.post(
    "",
    response_model=Client,
    status_code=201,
    responses=_BAD_REQUEST,
    openapi_extra=_CLIENT_BODY,
    summary="Create a client",
    description="Create a client. Any id in the body is ignored; the server assigns one.",
)
async def create_client(request: Request, service: ClientServiceDep) -> Response:
    """Create a new client."""
    payload = parse_client_payload(await request.body())
    client = service.create_client(payload)
    return respond_with_json(201, client.model_dump())


@router.put(
    "/{client_id}",
    response_model=Client,
    responses={**_NOT_FOUND, **_BAD_REQUEST},
    openapi_extra=_CLIENT_BODY,
    summary="Replace a client",
    description="Replace every field of a client. Omitted fields become empty.",
)
async def update_client(
    client_id: str,
    request: Request,
    service: ClientServiceDep,
) -> Response:
    """Replace a client."""
    service.ensure_client_exists(client_id)
    payload = parse_client_payload(await request.body())
    client = service.replace_client(client_id, payload)
    return respond_with_json(200, client.model_dump())


@router.delete(
    "/{client_id}",
    status_code=204,
    responses=_NOT_FOUND,
    summary="Delete a client",
    description="Permanently delete a client.",
)
async def delete_client(client_id: str, service: ClientServiceDep) -> Response:
    """Delete a client."""
    service.delete_client(client_id)
    return respond_with_json(204)
