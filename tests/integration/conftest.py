"""
Integration Test Fixtures.

Each test drives a freshly built application, with its own seeded store,
in-process through httpx.
"""

from collections.abc import AsyncGenerator
from typing import Any

import httpx
import pytest
from fastapi import FastAPI

from client_registry.main import create_app


@pytest.fixture
def app() -> FastAPI:
    return create_app()


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[httpx.AsyncClient, None]:
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


class ApiAssertions:
    """Status, content type and body shape checks shared by the API tests."""

    @staticmethod
    def _json(response: httpx.Response, expected_status: int) -> Any:
        assert response.status_code == expected_status, (
            f"{response.request.method} {response.request.url.path}: "
            f"expected {expected_status}, got {response.status_code} {response.text}"
        )
        assert response.headers["content-type"].startswith("application/json")
        return response.json()

    def assert_success(self, response: httpx.Response, expected_status: int = 200) -> Any:
        return self._json(response, expected_status)

    def assert_error(
        self,
        response: httpx.Response,
        expected_status: int,
        expected_message: str | None = None,
    ) -> dict[str, str]:
        """The body must be exactly ``{"error": <str>}``."""
        data = self._json(response, expected_status)
        assert list(data) == ["error"] and isinstance(data["error"], str), data
        if expected_message is not None:
            assert data["error"] == expected_message
        return data


@pytest.fixture
def api() -> ApiAssertions:
    return ApiAssertions()
