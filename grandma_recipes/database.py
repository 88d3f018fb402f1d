"""
Grandma Recipes API: Database Session Management
=================================================

What:  Async SQLAlchemy engine, session factory, declarative base and the
       per-request session dependency.
How:   Every request receives its own AsyncSession. The dependency commits
       when the handler returns, rolls back when it raises and always closes
       the session, so the connection goes back to the pool on every path.
"""

from typing import Any, AsyncGenerator, Dict

from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from grandma_recipes.config import settings


def _engine_options() -> Dict[str, Any]:
    """Pool sizing applies to server databases only; SQLite uses its own pools."""
    options: Dict[str, Any] = {"echo": settings.log_level == "DEBUG"}
    if not settings.is_sqlite:
        options.update(
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
            pool_pre_ping=settings.db_pool_pre_ping,
            pool_recycle=3600,
        )
    return options


engine = create_async_engine(settings.database_url, **_engine_options())

# expire_on_commit=False keeps attributes readable after the dependency commits
async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


class Base(DeclarativeBase):
    """Base class for all ORM models; its metadata is what Alembic tracks."""
    pass


# Primary keys are 32-bit INTEGER columns on every supported backend
MAX_ROW_ID = 2**31 - 1


def is_storable_id(value: int) -> bool:
    """True when `value` fits an INTEGER primary key and could match a row."""
    return 1 <= value <= MAX_ROW_ID


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides a database session per request.

    1. Creates a new session from the factory
    2. Yields it to the route handler
    3. On success: commits the transaction
    4. On error: rolls back and re-raises for the global handlers
    5. Always: closes the session

    Example usage in a route:
        @router.get("/grandmas")
        async def list_grandmas(db: AsyncSession = Depends(get_db_session)):
            ...
    """
    async with async_session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


async def dispose_engine() -> None:
    """Closes every pooled connection; called from the shutdown lifespan hook."""
    await engine.dispose()
