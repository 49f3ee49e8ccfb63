"""
Root Pytest Fixtures.

Shared fixtures available to all test types.

Every test that needs a store or an application gets a fresh one, so no
test can see records created by another.
"""

import pytest

from client_registry.repositories.client import ClientStore, build_client_store
from client_registry.schemas.client import ClientPayload


# =============================================================================
# Payload Fixtures
# =============================================================================


@pytest.fixture
def ana_payload() -> ClientPayload:
    """A complete client payload."""
    return ClientPayload(
        name="Ana",
        birth_date="02/02/1991",
        address="Rua A",
        phone="111",
    )


@pytest.fixture
def seed_payload() -> ClientPayload:
    """The record the application seeds at startup."""
    return ClientPayload(
        name="John Doe",
        birth_date="01/01/1990",
        address="123 Main St",
        phone="555-5555",
    )


# =============================================================================
# Store Fixtures
# =============================================================================


@pytest.fixture
def store() -> ClientStore:
    """Provide an empty client store."""
    return ClientStore()


@pytest.fixture
def seeded_store(seed_payload: ClientPayload) -> ClientStore:
    """Provide a store holding the seed record under ID "1"."""
    return build_client_store([seed_payload])


# =============================================================================
# Utility Fixtures
# =============================================================================


@pytest.fixture
def anyio_backend() -> str:
    """Specify the async backend for anyio."""
    return "asyncio"
