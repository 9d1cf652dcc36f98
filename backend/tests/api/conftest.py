"""API test fixtures — fresh GameService per test + FastAPI test client.

Invariants:
    - Every test gets its own InMemoryGameStore (no state leaks between tests)
    - get_game_service dependency overridden, restored after each test

Design Decisions:
    - httpx AsyncClient over ASGITransport: exercises the real app, no network
"""

import pytest
from httpx import ASGITransport, AsyncClient

from tictactoe.api.dependencies import get_game_service
from tictactoe.infrastructure.memory_store import InMemoryGameStore
from tictactoe.main import app
from tictactoe.services.game_service import GameService


@pytest.fixture
def service():
    return GameService(InMemoryGameStore())


@pytest.fixture
async def client(service):
    """FastAPI test client bound to the per-test service."""
    app.dependency_overrides[get_game_service] = lambda: service

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
def gql(client):
    """POST a GraphQL operation and return (status_code, json body)."""
    async def _run(query: str, variables: dict | None = None):
        res = await client.post(
            "/graphql", json={"query": query, "variables": variables},
        )
        return res.status_code, res.json()
    return _run
