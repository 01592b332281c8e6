"""Engine options and lifecycle."""

from cashcards.core.config import DatabaseSettings
from cashcards.infrastructure.database import session as db_session


def test_sqlite_engine_skips_pool_sizing():
    options = db_session._engine_options(
        DatabaseSettings(url="sqlite+aiosqlite:///./cards.db", pool_size=5, max_overflow=2),
        debug=False,
    )
    assert options == {"echo": False}


def test_server_engine_gets_pool_settings():
    options = db_session._engine_options(
        DatabaseSettings(url="postgresql+asyncpg://cards@db/cards", pool_size=5, max_overflow=2),
        debug=True,
    )
    assert options == {"echo": True, "pool_pre_ping": True, "pool_size": 5, "max_overflow": 2}


async def test_dispose_engine_resets_the_factory():
    first = db_session.get_engine()
    assert db_session.AsyncSessionFactory is not None

    await db_session.dispose_engine()
    assert db_session.AsyncSessionFactory is None

    second = db_session.get_engine()
    assert second is not first
    await db_session.dispose_engine()
