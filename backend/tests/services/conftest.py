"""Service test fixtures — async DB, stores, and FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db and get_identity_gate dependencies overridden for route tests
    - db_manager patched so the readiness probe sees the test engine
    - Stores built with a pinned clock so start_time is deterministic

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for store and route tests
"""

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

from taskboard.api.dependencies import get_identity_gate
from taskboard.core.identity_gate import IdentityGate
from taskboard.core.storage_limits import StorageLimits
from taskboard.db.base import Base
from taskboard.infrastructure.database import get_db, DatabaseSessionManager
import taskboard.infrastructure.database as db_module
from taskboard.main import app
from tests.services.board_fixtures import ADMIN, as_caller, make_board


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def gate():
    return IdentityGate(ADMIN)


@pytest.fixture
def limits():
    return StorageLimits()


@pytest.fixture
def board(test_db, gate, limits):
    return make_board(test_db, gate, limits)


@pytest.fixture
async def client(test_engine, test_session_factory, gate):
    """FastAPI test client with DB and identity gate overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_identity_gate] = lambda: gate

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
def admin_headers():
    return as_caller(ADMIN)
