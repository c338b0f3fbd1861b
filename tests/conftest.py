"""Test fixtures and configuration."""

from collections.abc import AsyncIterator

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from ledger_tamagotchi import __version__
from ledger_tamagotchi.api.routes import get_clock, router
from ledger_tamagotchi.core.database import create_tables, get_session
from ledger_tamagotchi.services.clock import ManualClock
from ledger_tamagotchi.services.pet_engine import PetEngine

# Use SQLite for testing (in-memory, one shared connection)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

# 2023-11-14T22:13:20Z
START_TIME = 1_700_000_000

OWNER = "GALICE"
OTHER_OWNER = "GBOB"


class MockAllAuths:
    """Authorizer that approves every owner and records who was checked."""

    def __init__(self) -> None:
        self.checked: list[str] = []

    def require_auth(self, owner: str) -> None:
        self.checked.append(owner)


@pytest.fixture
async def test_engine() -> AsyncIterator[AsyncEngine]:
    """Create an in-memory database with all tables."""
    engine = create_async_engine(TEST_DATABASE_URL, echo=False, poolclass=StaticPool)
    await create_tables(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(test_engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def test_db(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncIterator[AsyncSession]:
    """Provide a session on the test database."""
    async with session_factory() as session:
        yield session


@pytest.fixture
def clock() -> ManualClock:
    return ManualClock(START_TIME)


@pytest.fixture
def auths() -> MockAllAuths:
    return MockAllAuths()


@pytest.fixture
def pet_engine(test_db: AsyncSession, auths: MockAllAuths, clock: ManualClock) -> PetEngine:
    """Pet engine with every owner authorized and a manual clock."""
    return PetEngine(test_db, auths, clock)


def create_api_test_app(
    session_factory: async_sessionmaker[AsyncSession], clock: ManualClock
) -> FastAPI:
    """Create a test FastAPI app with the production router."""
    test_app = FastAPI(title="Ledger Tamagotchi Test", version=__version__)
    test_app.include_router(router)

    async def get_test_session() -> AsyncIterator[AsyncSession]:
        async with session_factory() as session:
            yield session

    test_app.dependency_overrides[get_session] = get_test_session
    test_app.dependency_overrides[get_clock] = lambda: clock

    return test_app


@pytest.fixture
async def async_client(
    session_factory: async_sessionmaker[AsyncSession], clock: ManualClock
) -> AsyncIterator[AsyncClient]:
    """Create async test client for API testing with test database."""
    test_app = create_api_test_app(session_factory, clock)

    async with AsyncClient(
        transport=ASGITransport(app=test_app),
        base_url="http://test",
    ) as ac:
        yield ac
