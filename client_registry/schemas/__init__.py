# Pydantic schemas package
from client_registry.schemas.base import ErrorResponse
from client_registry.schemas.client import Client, ClientPayload

__all__ = [
    "Client",
    "ClientPayload",
    "ErrorResponse",
]
