"""API test fixtures — FastAPI test client over a fresh in-memory store.

Invariants:
    - Every test gets its own UserStore (get_user_store overridden)
    - Overrides cleared after each test
"""

import pytest
from httpx import ASGITransport, AsyncClient

from apicrud.api.dependencies import get_user_store
from apicrud.core.user_store import UserStore
from apicrud.main import app


@pytest.fixture
def user_store() -> UserStore:
    return UserStore()


@pytest.fixture
async def client(user_store):
    """FastAPI test client with the store dependency overridden."""
    app.dependency_overrides[get_user_store] = lambda: user_store

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
def valid_body() -> dict:
    return {
        "firstName": "Ana",
        "lastName": "Silva",
        "biography": "Software engineer who writes about APIs.",
    }
