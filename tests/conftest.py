# tests/conftest.py

"""Pytest configuration and fixtures."""

from typing import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool
from squadforge.db.functions import register_sqlite_functions
from squadforge.db.models import Base, Player
from squadforge.db.session import get_db
from squadforge.main import app

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """A fresh in-memory database per test, schema already created."""
    test_engine = create_async_engine(TEST_DATABASE_URL, poolclass=StaticPool)
    register_sqlite_functions(test_engine.sync_engine)
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield test_engine
    await test_engine.dispose()


@pytest.fixture
async def db_session(engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """Fixture to provide a database session to a test."""
    session_factory = async_sessionmaker(
        bind=engine, expire_on_commit=False, autocommit=False, autoflush=False
    )
    async with session_factory() as session:
        yield session


@pytest.fixture
async def async_client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """Fixture to provide an async test client for the API."""

    # Override the get_db dependency to use the test database
    async def override_get_db() -> AsyncGenerator[AsyncSession, None]:
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    transport = ASGITransport(app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    # Clean up the override after the test
    del app.dependency_overrides[get_db]


@pytest.fixture
def seed_players(db_session: AsyncSession):
    """Insert players straight into the database, bypassing the API.

    Each row is a dict of Player column values; ``skills`` may be omitted
    or set to None to mimic legacy rows. Returns the players in insertion
    order.
    """

    async def _seed(*rows: dict) -> list[Player]:
        players = []
        for row in rows:
            fields = dict(row)
            player = Player(name=fields.pop("name"), **fields)
            db_session.add(player)
            # Flush one at a time so the insertion order is fixed
            await db_session.flush()
            players.append(player)
        await db_session.commit()
        return players

    return _seed
