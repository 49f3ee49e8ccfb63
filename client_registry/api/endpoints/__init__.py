"""
API Router.

Aggregates all endpoint routers.
"""

from fastapi import APIRouter

from client_registry.api.endpoints import clients

router = APIRouter()

# Clients endpoints
router.include_router(clients.router, prefix="/clients", tags=["clients"])
