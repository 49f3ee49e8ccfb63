"""
Client Service.

Business logic layer for clients. Wraps the client store and logs
every mutation.
"""

from client_registry.core.exceptions import NotFoundError
from client_registry.repositories.client import ClientStore
from client_registry.schemas.client import Client, ClientPayload
from client_registry.services.base import BaseService


class ClientService(BaseService):
    """Service for client registry operations."""

    def __init__(self, store: ClientStore) -> None:
        super().__init__()
        self.store = store

    def list_clients(self) -> list[Client]:
        """
        List every stored client.

        Returns:
            All clients, possibly empty
        """
        clients = self.store.list_all()
        self._log_debug("Listing clients", count=len(clients))
        return clients

    def get_client(self, client_id: str) -> Client:
        """
        Get a client by ID.

        Raises:
            NotFoundError: If client not found
        """
        return self.store.get(client_id)

    def ensure_client_exists(self, client_id: str) -> None:
        """
        Check that a client exists without reading it.

        Raises:
            NotFoundError: If client not found
        """
        if not self.store.exists(client_id):
            raise NotFoundError()

    def create_client(self, payload: ClientPayload) -> Client:
        """
        Create a new client with a server-assigned ID.

        Args:
            payload: Decoded request body

        Returns:
            Stored client
        """
        client = self.store.create(payload)
        self._log_operation("Client created", client_id=client.id)
        return client

    def replace_client(self, client_id: str, payload: ClientPayload) -> Client:
        """
        Replace a client's fields with the payload.

        Args:
            client_id: ID of the client to replace
            payload: Decoded request body

        Returns:
            Updated client

        Raises:
            NotFoundError: If client not found
        """
        client = self.store.replace(client_id, payload)
        self._log_operation("Client replaced", client_id=client_id)
        return client

    def delete_client(self, client_id: str) -> None:
        """
        Delete a client.

        Raises:
            NotFoundError: If client not found
        """
        self.store.delete(client_id)
        self._log_operation("Client deleted", client_id=client_id)
