"""
Client Repository.

In-memory storage for client records. The store owns a mapping from
client ID to record and the counter used to mint new IDs. One store is
created per application and shared by every request.

Usage:
    from client_registry.repositories.client import ClientStore

    store = ClientStore()
    client = store.create(ClientPayload(name="Ana"))
    store.get(client.id)
"""

import threading
from collections.abc import Iterable

from client_registry.core.exceptions import NotFoundError
from client_registry.core.logging import get_logger
from client_registry.schemas.client import Client, ClientPayload

logger = get_logger(__name__)


class ClientStore:
    """
    Thread-safe in-memory client store.

    Every operation holds a single lock, so ID minting and map mutations
    stay atomic when handlers run concurrently.

    The counter is incremented before use and never decremented: IDs are
    unique for the lifetime of the store, even after deletion.
    """

    def __init__(self) -> None:
        self._clients: dict[str, Client] = {}
        self._counter = 0
        self._lock = threading.RLock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._clients)

    def list_all(self) -> list[Client]:
        """Return a snapshot of every stored client."""
        with self._lock:
            return list(self._clients.values())

    def get(self, client_id: str) -> Client:
        """
        Get a client by ID.

        Raises:
            NotFoundError: If no client has this ID
        """
        with self._lock:
            client = self._clients.get(client_id)
        if client is None:
            raise NotFoundError()
        return client

    def exists(self, client_id: str) -> bool:
        """Check if a client exists by ID."""
        with self._lock:
            return client_id in self._clients

    def create(self, payload: ClientPayload) -> Client:
        """Mint a new ID and store the payload under it."""
        with self._lock:
            self._counter += 1
            client = Client(id=str(self._counter), **payload.model_dump())
            self._clients[client.id] = client
        return client

    def replace(self, client_id: str, payload: ClientPayload) -> Client:
        """
        Replace an existing client entirely.

        Fields missing from the payload do not carry over from the old record.

        Raises:
            NotFoundError: If no client has this ID
        """
        with self._lock:
            if client_id not in self._clients:
                raise NotFoundError()
            client = Client(id=client_id, **payload.model_dump())
            self._clients[client_id] = client
        return client

    def delete(self, client_id: str) -> None:
        """
        Delete a client by ID.

        Raises:
            NotFoundError: If no client has this ID
        """
        with self._lock:
            if self._clients.pop(client_id, None) is None:
                raise NotFoundError()


def build_client_store(seed: Iterable[ClientPayload] = ()) -> ClientStore:
    """
    Create a store and insert seed records.

    Seed records go through the normal create path, so they take IDs
    "1", "2", ... in order.
    """
    store = ClientStore()
    for payload in seed:
        store.create(payload)
    logger.debug("Client store initialized", extra={"seeded": len(store)})
    return store
