"""PostgreSQL engine and session factory."""

import logfire
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from hub.config import DatabaseSettings


def create_engine(database: DatabaseSettings, echo: bool = False) -> AsyncEngine:
    """Create the asyncpg engine sized from the pool settings.

    Connections are pinged on checkout and recycled after
    ``database.pool_recycle_seconds`` so an idle pool survives server-side
    connection timeouts.

    Args:
        database: Database settings (URL and pool sizing)
        echo: Log every statement, used in debug mode
    """
    engine = create_async_engine(
        database.url,
        echo=echo,
        pool_pre_ping=True,
        pool_size=database.pool_size,
        max_overflow=database.max_overflow,
        pool_recycle=database.pool_recycle_seconds,
    )
    logfire.info(
        "Database engine created",
        host=engine.url.host,
        database=engine.url.database,
        pool_size=database.pool_size,
    )
    return engine


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)
