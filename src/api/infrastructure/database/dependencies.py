"""Database dependency injection for FastAPI.

Provides the async session factory with proper transaction management
and connection pooling.
"""

from __future__ import annotations

import threading
from typing import AsyncGenerator

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from infrastructure.database.engines import create_engine_from_settings
from infrastructure.observability import DefaultConnectionProbe
from infrastructure.settings import get_database_settings

# Module-level probe for observability
_probe = DefaultConnectionProbe()

# Module-level engine instance (created on first use)
_engine: AsyncEngine | None = None

# Module-level sessionmaker instance (created with the engine)
_sessionmaker: async_sessionmaker[AsyncSession] | None = None

# Thread lock for safe engine initialization
_engine_lock = threading.Lock()


def get_engine() -> AsyncEngine:
    """Get the database engine (singleton).

    Creates engine on first call and caches for subsequent calls.
    Uses double-check locking for thread-safe initialization.
    Also creates and caches the sessionmaker for efficient session creation.

    Returns:
        Configured async engine
    """
    global _engine, _sessionmaker
    if _engine is None:
        with _engine_lock:
            # Double-check after acquiring lock
            if _engine is None:
                settings = get_database_settings()
                _engine = create_engine_from_settings(settings)
                _sessionmaker = async_sessionmaker(
                    _engine,
                    expire_on_commit=False,
                    class_=AsyncSession,
                )
                _probe.engine_created(host=settings.host, database=settings.database)
    return _engine


async def get_write_session() -> AsyncGenerator[AsyncSession, None]:
    """Provide a session for the current request (FastAPI dependency).

    The session is configured to NOT auto-commit. Callers must explicitly
    manage transactions using `async with session.begin()`. FastAPI caches
    the dependency, so every service resolved for one request shares it.

    Usage:
        @router.post("/api/chat/start")
        async def start(session: AsyncSession = Depends(get_write_session)):
            async with session.begin():
                # mutations here
                # transaction commits at end of `with` block

    Yields:
        AsyncSession for database operations
    """
    get_engine()
    assert _sessionmaker is not None

    async with _sessionmaker() as session:
        yield session


async def check_database_connection() -> bool:
    """Run a trivial query to verify the database answers.

    Returns:
        True if the database answered, False otherwise
    """
    engine = get_engine()
    try:
        async with engine.connect() as connection:
            await connection.execute(text("SELECT 1"))
    except (SQLAlchemyError, OSError) as e:
        _probe.health_check_failed(error=e)
        return False
    return True


async def close_database_connections() -> None:
    """Close the database engine's connections.

    Should be called on application shutdown to properly cleanup connections.
    Also resets the sessionmaker to allow reinitialization.
    """
    global _engine, _sessionmaker

    if _engine is not None:
        await _engine.dispose()
        _probe.pool_closed()
        _engine = None
        _sessionmaker = None
