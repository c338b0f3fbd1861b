"""Database engine and session management."""

from collections.abc import AsyncIterator
from typing import Any

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from ledger_tamagotchi.core.config import settings
from ledger_tamagotchi.models.base import Base


def _get_engine_kwargs(database_url: str) -> dict[str, Any]:
    """Get engine kwargs based on database type."""
    kwargs: dict[str, Any] = {"echo": settings.debug}

    # SQLite doesn't support connection pooling options
    if not database_url.startswith("sqlite"):
        kwargs.update(
            {
                "pool_size": 5,
                "max_overflow": 10,
                "pool_pre_ping": True,
            }
        )

    return kwargs


engine = create_async_engine(settings.database_url, **_get_engine_kwargs(settings.database_url))

async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


async def get_session() -> AsyncIterator[AsyncSession]:
    """Yield a session scoped to one request."""
    async with async_session_factory() as session:
        yield session


async def create_tables(bind: AsyncEngine | None = None) -> None:
    """Create all tables directly, bypassing migrations.

    Only meant for SQLite development databases and tests.
    """
    async with (bind or engine).begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def close_database() -> None:
    """Close database connections."""
    await engine.dispose()
