"""Shared fixtures: a fresh SQLite file per test plus the demo data.

Seeded rows (see ``cashcards.db.seed``):
    sarah1  -> 99: 123.45, 100: 1.00, 101: 150.00
    kumar2  -> 102: 200.00
    hank-owns-no-cards -> viewer role, no cards
"""

import os

os.environ.setdefault("DATABASE__URL", "sqlite+aiosqlite:///./test-cashcards.db")
os.environ.setdefault("SECURITY__SECRET_KEY", "test-secret-key")
os.environ.setdefault("SECURITY__BCRYPT_ROUNDS", "4")

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from cashcards.db import models  # noqa: F401
from cashcards.db.seed import seed_demo_data
from cashcards.infrastructure.database import Base
from cashcards.interfaces.http.deps import get_db_session
from cashcards.main import app

SARAH = ("sarah1", "abc123")
KUMAR = ("kumar2", "xyz789")
HANK = ("hank-owns-no-cards", "qrs456")


@pytest.fixture
async def test_engine(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'cashcards.db'}", echo=False)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def seeded(test_session_factory):
    async with test_session_factory() as session:
        await seed_demo_data(session)
        await session.commit()


@pytest.fixture
async def test_db(test_session_factory, seeded):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def client(test_session_factory, seeded):
    """FastAPI test client with the session dependency pointed at the test DB."""

    async def override_get_db_session():
        async with test_session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db_session] = override_get_db_session
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c
    app.dependency_overrides.clear()
