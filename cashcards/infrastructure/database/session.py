"""Engine and session lifecycle for the card store.

The engine is created on first use from ``database.*`` settings and torn
down by :func:`dispose_engine` when the application shuts down. Request
handlers get one session each; it commits when the handler returns and
rolls back when it raises.
"""

from __future__ import annotations

from collections.abc import AsyncGenerator
from typing import Any

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from cashcards.core.config import DatabaseSettings, get_settings
from cashcards.infrastructure.database.base import Base

_engine: AsyncEngine | None = None
AsyncSessionFactory: async_sessionmaker[AsyncSession] | None = None


def _engine_options(database: DatabaseSettings, debug: bool) -> dict[str, Any]:
    options: dict[str, Any] = {"echo": database.echo or debug}
    # pool sizing does not apply to SQLite files
    if make_url(database.url).get_backend_name() == "sqlite":
        return options

    options["pool_pre_ping"] = True
    if database.pool_size is not None:
        options["pool_size"] = database.pool_size
    if database.max_overflow is not None:
        options["max_overflow"] = database.max_overflow
    return options


def get_engine() -> AsyncEngine:
    global _engine, AsyncSessionFactory
    if _engine is None:
        settings = get_settings()
        _engine = create_async_engine(
            settings.database_url,
            **_engine_options(settings.database, settings.debug),
        )
        AsyncSessionFactory = async_sessionmaker(
            bind=_engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )
    return _engine


async def dispose_engine() -> None:
    global _engine, AsyncSessionFactory
    if _engine is not None:
        await _engine.dispose()
    _engine = None
    AsyncSessionFactory = None


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    if AsyncSessionFactory is None:
        get_engine()

    assert AsyncSessionFactory is not None  # for mypy
    async with AsyncSessionFactory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


async def init_db() -> None:
    """Create missing tables; deployed databases are managed by Alembic."""
    # deferred so the models register on Base.metadata without an import cycle
    from cashcards.db import models  # noqa: F401

    async with get_engine().begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
