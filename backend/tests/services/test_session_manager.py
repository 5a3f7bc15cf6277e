"""Session Manager — rollback and error mapping of DatabaseSessionManager.

Tests cover:
    - Integrity violations surface as DatabaseError("commit") and roll back
    - Domain errors raised inside a session propagate unchanged
"""

import pytest

from taskboard.core.errors import DatabaseError, NotFoundError
from taskboard.infrastructure.database import DatabaseSessionManager
from taskboard.models.member import Member as MemberRow


@pytest.fixture
async def manager():
    manager = DatabaseSessionManager("sqlite+aiosqlite:///:memory:")
    await manager.create_tables()
    yield manager
    await manager.dispose()


async def test_duplicate_primary_key_is_database_error(manager):
    async with manager.session() as db:
        db.add(MemberRow(id=1, identity="P1"))
        await db.commit()

    with pytest.raises(DatabaseError) as exc_info:
        async with manager.session() as db:
            db.add(MemberRow(id=1, identity="P2"))
            await db.commit()

    assert exc_info.value.operation == "commit"
    assert exc_info.value.http_status == 503
    async with manager.session() as db:
        assert (await db.get(MemberRow, 1)).identity == "P1"


async def test_domain_error_propagates_unchanged(manager):
    with pytest.raises(NotFoundError):
        async with manager.session():
            raise NotFoundError("Member", 7)


async def test_health_check_passes_on_live_engine(manager):
    assert await manager.health_check() is True
