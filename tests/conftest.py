"""
Shared fixtures.

Settings are read once at import, so the environment is pinned here before
anything from puppymatch is imported. Every test gets a fresh in-memory
SQLite database; the API client routes its sessions there through a get_db
override.
"""

import os

os.environ["APP_ENV"] = "test"
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["SECRET_KEY"] = "test-secret-key-that-is-long-enough-for-hs256"
os.environ["BCRYPT_ROUNDS"] = "4"

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from puppymatch.api.dependencies.database import get_db
from puppymatch.api.main import app
from puppymatch.shared.db import session_scope
from puppymatch.shared.models import Base
from puppymatch.shared.repositories.user_repository import UserRepository
from puppymatch.shared.utils.security import SecurityUtils


PASSWORD = "hunter22"


@pytest.fixture
async def engine():
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


@pytest.fixture
async def db(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
def make_user(db):
    """Insert a user directly through the repository."""

    async def _make_user(email: str, password: str = PASSWORD, **profile):
        repo = UserRepository(db)
        user = await repo.insert_user(email, SecurityUtils.hash_password(password))
        if profile:
            user = await repo.update_profile(user.id, **profile)
        return user

    return _make_user


@pytest.fixture
async def client(session_factory):
    async def override_get_db():
        async with session_scope(session_factory) as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
def register(client):
    """Register through the API and return (token, user_id)."""

    async def _register(email: str, password: str = PASSWORD):
        response = await client.post("/auth/register", json={"email": email, "password": password})
        assert response.status_code == 201, response.text
        body = response.json()
        return body["token"], body["userId"]

    return _register


def auth(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}
