import os

# Settings must be in place before config.py is imported
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("JWT_SECRET", "test-secret")

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from models import Base, get_session
from security import ROLE_ADMIN, ROLE_USER, Principal, create_access_token


@pytest.fixture
async def engine():
    engine = create_async_engine("sqlite+aiosqlite://", poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def session(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
def admin():
    return Principal("admin", frozenset({ROLE_USER, ROLE_ADMIN}))


@pytest.fixture
def user():
    return Principal("user", frozenset({ROLE_USER}))


@pytest.fixture
def admin_headers():
    return {"Authorization": f"Bearer {create_access_token('admin', {ROLE_USER, ROLE_ADMIN})}"}


@pytest.fixture
def user_headers():
    return {"Authorization": f"Bearer {create_access_token('user', {ROLE_USER})}"}


@pytest.fixture
async def client(session_factory):
    from app import create_app

    app = create_app(lifespan=None)

    async def override_session():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_session] = override_session
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client
