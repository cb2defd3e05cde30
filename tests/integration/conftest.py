"""API-test fixtures.

Each test gets a fresh app wired to a temporary SQLite snapshot database,
so no test sees another's users or trades.
"""

import uuid
from collections.abc import AsyncGenerator
from pathlib import Path

import pytest
from httpx import ASGITransport, AsyncClient

from src.container import ServiceContainer, build_container
from src.main import create_app
from src.st_common.database import make_engine, make_session_factory
from src.st_gateway.user.snapshot_store import SnapshotUserStore


@pytest.fixture
def snapshot_store(tmp_path: Path) -> SnapshotUserStore:
    factory = make_session_factory(make_engine(f"sqlite:///{tmp_path / 'users.db'}"))
    return SnapshotUserStore(factory, key="users")


@pytest.fixture
def container(snapshot_store: SnapshotUserStore) -> ServiceContainer:
    return build_container(store=snapshot_store)


@pytest.fixture
async def client(container: ServiceContainer) -> AsyncGenerator[AsyncClient, None]:
    transport = ASGITransport(app=create_app(container))
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


def unique_user() -> dict[str, str]:
    """Generate unique credentials to avoid test pollution."""
    return {"username": f"trader_{uuid.uuid4().hex[:8]}", "password": "TestPass1"}


@pytest.fixture
async def auth_client(client: AsyncClient) -> AsyncClient:
    """Client with a freshly registered user's Bearer token injected."""
    creds = unique_user()
    await client.post("/api/v1/auth/register", json=creds)
    login_resp = await client.post("/api/v1/auth/login", json=creds)
    token = login_resp.json()["data"]["access_token"]
    client.headers.update({"Authorization": f"Bearer {token}"})
    return client
