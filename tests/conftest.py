"""
Shared fixtures: a throwaway SQLite database per test.
"""

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from config.settings import Settings
from database.session import build_engine, build_session_factory, create_tables
from main import create_app


def _settings(tmp_path, **overrides) -> Settings:
    values = dict(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'test.db'}",
        jwt_secret="test-secret",
        bcrypt_rounds=4,
        debug=True,
        _env_file=None,
    )
    values.update(overrides)
    return Settings(**values)


@pytest.fixture
def settings(tmp_path) -> Settings:
    return _settings(tmp_path)


@pytest.fixture
def make_client(tmp_path):
    """Factory for a started TestClient; extra kwargs override settings."""
    clients = []

    def _make(**overrides) -> TestClient:
        client = TestClient(create_app(_settings(tmp_path, **overrides)), raise_server_exceptions=False)
        client.__enter__()
        clients.append(client)
        return client

    yield _make
    for c in clients:
        c.__exit__(None, None, None)


@pytest.fixture
def client(make_client) -> TestClient:
    return make_client()


def _signup_and_login(client: TestClient, email: str, password: str = "secret-pw", name: str = "Tester"):
    r = client.post("/api/signup", json={"email": email, "password": password, "name": name})
    assert r.status_code == 201, r.text
    r = client.post("/api/login", json={"email": email, "password": password})
    assert r.status_code == 200, r.text
    body = r.json()
    return body["token"], body["user"]


@pytest.fixture
def signup_and_login():
    """Register and log in; the returned callable gives ``(token, user_summary)``."""
    return _signup_and_login


@pytest_asyncio.fixture
async def db(tmp_path):
    """An ``AsyncSession`` on a fresh database with tables created."""
    engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'store.db'}")
    await create_tables(engine)
    factory = build_session_factory(engine)
    async with factory() as session:
        yield session
    await engine.dispose()
