"""
Grandma Recipes API: Test Configuration (conftest.py)
======================================================

What:  Shared pytest fixtures for the whole suite.
How:   Every test gets a fresh in-memory SQLite database (aiosqlite +
       StaticPool so all sessions share the one connection). The app's
       get_db_session dependency is overridden to use it.

Fixture hierarchy (all function-scoped):
    ├── mock_db_session:  AsyncMock session for storage-failure tests
    ├── db_engine:        in-memory engine with every table created
    │   └── session_factory: sessions bound to db_engine
    │       └── test_client:  httpx AsyncClient over ASGITransport
    └── auth_headers:     Authorization header for a freshly signed-up user
"""

import os

# Must be set before anything imports grandma_recipes.config
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["TOKEN_SECRET_KEY"] = "test-secret-not-real"
os.environ["LOG_LEVEL"] = "WARNING"
# Cheap hashes keep the suite fast
os.environ["PASSWORD_HASH_METHOD"] = "pbkdf2:sha256:1000"

from typing import Dict  # noqa: E402
from unittest.mock import AsyncMock, MagicMock  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy import func, select  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool  # noqa: E402

import grandma_recipes.models  # noqa: E402,F401
from grandma_recipes.database import Base, get_db_session  # noqa: E402


TEST_EMAIL = "abuela.fan@example.com"
TEST_PASSWORD = "croquetas123"


def recipe_payload(**overrides) -> dict:
    """A complete, valid POST /recipes/new body in wire (camelCase) form."""
    payload = {
        "nameRecipe": "Tortilla de patatas",
        "descRecipe": "Thick potato omelette",
        "cookingTime": 45,
        "ingredients": [
            {"nameIngredient": "potatoes", "quantity": 4, "unit": "units"},
            {"nameIngredient": "eggs", "quantity": 6, "unit": "units"},
        ],
        "directions": "Fry the potatoes slowly, mix with beaten eggs, set both sides.",
        "background": "Sunday lunch in Betanzos",
        "images": ["https://img.example.com/tortilla-1.jpg", "https://img.example.com/tortilla-2.jpg"],
        "grandma": {
            "nameGrandma": {"name": "Carmen", "lastname": "Vázquez"},
            "location": {"city": "Betanzos", "province": "A Coruña"},
            "photo": "https://img.example.com/carmen.jpg",
        },
    }
    payload.update(overrides)
    return payload


async def count_rows(session_factory, model) -> int:
    """Counts rows of `model` through a fresh session."""
    async with session_factory() as session:
        result = await session.execute(select(func.count()).select_from(model))
        return result.scalar_one()


@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Usage:
        mock_db_session.execute.side_effect = OperationalError("SELECT", {}, Exception())
        with pytest.raises(StorageError):
            await user_service.list_users(mock_db_session)
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.flush = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session


@pytest_asyncio.fixture
async def db_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    return async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def test_client(session_factory):
    """
    HTTPX AsyncClient talking to the app through ASGITransport.

    The session override keeps the commit/rollback contract of
    get_db_session so transactional behavior is tested as deployed.
    """
    from grandma_recipes.main import app

    async def override_get_db_session():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db_session] = override_get_db_session
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def auth_headers(test_client) -> Dict[str, str]:
    """Signs up and logs in TEST_EMAIL, returning a Bearer header."""
    response = await test_client.post(
        "/signup", json={"email": TEST_EMAIL, "password": TEST_PASSWORD}
    )
    assert response.status_code == 201
    response = await test_client.post(
        "/login", json={"email": TEST_EMAIL, "password": TEST_PASSWORD}
    )
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['token']}"}
