# backend/evcharge/core/database.py
from collections.abc import AsyncIterator

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from evcharge.core.config import Settings, settings
from evcharge.models.base import Base


def create_engine(config: Settings) -> AsyncEngine:
    """Create the async engine; it owns the connection pool."""
    return create_async_engine(
        config.database_url,
        echo=config.database_echo,
        pool_pre_ping=True,
    )


def create_session_factory(bind: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(bind, expire_on_commit=False)


engine = create_engine(settings)
AsyncSessionLocal = create_session_factory(engine)


async def get_session() -> AsyncIterator[AsyncSession]:
    """Yield one session per request and release it on every exit path."""
    async with AsyncSessionLocal() as session:
        yield session


async def init_db(bind: AsyncEngine | None = None) -> None:
    """Create all tables that do not exist yet."""
    # Register models on Base.metadata
    import evcharge.models  # noqa: F401

    async with (bind or engine).begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def drop_db(bind: AsyncEngine | None = None) -> None:
    import evcharge.models  # noqa: F401

    async with (bind or engine).begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
