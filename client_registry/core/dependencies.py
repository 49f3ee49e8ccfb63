"""
FastAPI Dependencies.

Shared dependencies for request handling.
"""

from typing import Annotated

from fastapi import Depends, Request

from client_registry.repositories.client import ClientStore
from client_registry.services.client import ClientService


def get_client_store(request: Request) -> ClientStore:
    """Return the store owned by the running application."""
    return request.app.state.client_store


ClientStoreDep = Annotated[ClientStore, Depends(get_client_store)]


def get_client_service(store: ClientStoreDep) -> ClientService:
    """Build a ClientService bound to the application's store."""
    return ClientService(store)


ClientServiceDep = Annotated[ClientService, Depends(get_client_service)]
