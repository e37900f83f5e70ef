"""Test fixtures — an in-memory document store per test.

Learn: Testing pattern for motor + FastAPI:

1. Each test gets a fresh mongomock-motor database (function-scoped),
   with the same unique indexes the app creates at startup.
2. The app's get_db dependency is overridden to return it, so every
   request in the test reads and writes the in-memory store.
3. httpx drives the ASGI app directly; lifespan never runs, so no real
   MongoDB connection is opened.

Auth is never mocked: tests register, log in, and send real tokens.
"""

import os

os.environ.setdefault("ACCESS_TOKEN_SECRET", "test-access-secret")
os.environ.setdefault("REFRESH_TOKEN_SECRET", "test-refresh-secret")
os.environ.setdefault("JWT_TOKEN_EXPIRATION", "15m")
os.environ.setdefault("BCRYPT_ROUNDS", "4")

import uuid  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from mongomock_motor import AsyncMongoMockClient  # noqa: E402

from postboard.db.client import ensure_indexes, get_db  # noqa: E402
from postboard.main import app  # noqa: E402


@pytest_asyncio.fixture()
async def db():
    """Fresh in-memory database with production indexes."""
    database = AsyncMongoMockClient()[f"postboard_test_{uuid.uuid4().hex[:8]}"]
    await ensure_indexes(database)
    yield database


@pytest_asyncio.fixture()
async def client(db):
    """HTTP client with the app's get_db pointed at the test database."""
    async def override_get_db():
        return db

    app.dependency_overrides[get_db] = override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


def bearer(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture()
def make_user(client):
    """Factory: register + log in a user, return ids, tokens, and headers."""

    async def _make(username=None, password="password_123"):
        username = username or f"user-{uuid.uuid4().hex[:8]}"
        r = await client.post(
            "/auth/register",
            json={
                "username": username,
                "email": f"{username}@example.com",
                "password": password,
            },
        )
        assert r.status_code == 200, r.text
        user_id = r.json()["_id"]

        r = await client.post(
            "/auth/login", json={"username": username, "password": password}
        )
        assert r.status_code == 200, r.text
        tokens = r.json()
        return {
            "id": user_id,
            "username": username,
            "password": password,
            "access": tokens["accessToken"],
            "refresh": tokens["refreshToken"],
            "headers": bearer(tokens["accessToken"]),
        }

    return _make
