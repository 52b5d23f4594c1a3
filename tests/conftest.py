"""Shared test fixtures for the LinguaContent API tests."""

import os
import tempfile

_TMP_DIR = tempfile.mkdtemp(prefix="linguacontent-tests-")

# Must be in place before the application modules are imported
os.environ["JWT_SECRET_KEY"] = "test-access-secret-0123456789abcdef0123456789"
os.environ["JWT_REFRESH_SECRET_KEY"] = "test-refresh-secret-0123456789abcdef01234567"
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_TMP_DIR}/unused.db"
os.environ["LOG_DIR"] = os.path.join(_TMP_DIR, "logs")
os.environ["SEED_ON_STARTUP"] = "false"

import pytest
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker
from sqlalchemy.pool import NullPool

from linguacontent.database.init_db import create_tables, drop_tables
from linguacontent.database.setup import get_db
from linguacontent.main import app
from linguacontent.models.user_model import UserModel
from linguacontent.repositories.seed_repository import SeedRepository
from linguacontent.utils.hash_password import PasswordHash


DEFAULT_PASSWORD = "s3cure-Passw0rd"


@pytest.fixture
async def engine(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path}/test.db", poolclass=NullPool)
    await create_tables(engine)
    yield engine
    await drop_tables(engine)
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(bind=engine, expire_on_commit=False)


@pytest.fixture
async def db(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
async def seeded(session_factory):
    async with session_factory() as session:
        return await SeedRepository(session).seed()


@pytest.fixture
async def client(session_factory):
    async def override_get_db():
        async with session_factory() as session:
            try:
                yield session
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db
    # https so the secure refresh token cookie is sent back
    async with AsyncClient(transport=ASGITransport(app=app), base_url="https://test") as ac:
        yield ac
    app.dependency_overrides.clear()


def bearer(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def register_user(client):
    """Register an account through the API; the result carries ready-made auth headers."""
    async def _register(username: str, password: str = DEFAULT_PASSWORD) -> dict:
        response = await client.post("/api/register", json={
            "username": username,
            "email": f"{username}@example.com",
            "password": password,
        })
        assert response.status_code == 201, response.text
        data = response.json()
        data["headers"] = bearer(data["access_token"])
        return data

    return _register


@pytest.fixture
async def user_headers(register_user):
    data = await register_user("reader")
    return data["headers"]


@pytest.fixture
async def admin_headers(client, session_factory):
    async with session_factory() as session:
        session.add(UserModel(
            username="moderator",
            email="moderator@example.com",
            password=PasswordHash().hash_password(DEFAULT_PASSWORD),
            role="admin",
        ))
        await session.commit()

    response = await client.post("/api/login", json={"username": "moderator", "password": DEFAULT_PASSWORD})
    assert response.status_code == 200, response.text
    return bearer(response.json()["access_token"])
