"""Board Owner — tests for one-time administrator initialization."""

from sqlalchemy import select

from taskboard.models.board_owner import BoardOwner
from taskboard.services.board_owner import initialize_owner


async def test_first_initialization_persists_owner(test_db):
    gate = await initialize_owner(test_db, "admin-A")
    assert gate.admin_identity == "admin-A"
    result = await test_db.execute(select(BoardOwner))
    assert [o.identity for o in result.scalars().all()] == ["admin-A"]


async def test_stored_owner_wins_over_later_configuration(test_db):
    await initialize_owner(test_db, "admin-A")
    gate = await initialize_owner(test_db, "admin-B")
    assert gate.admin_identity == "admin-A"
    assert gate.is_admin("admin-A")
    assert not gate.is_admin("admin-B")


async def test_reinitialization_with_same_owner_is_noop(test_db):
    await initialize_owner(test_db, "admin-A")
    gate = await initialize_owner(test_db, "admin-A")
    assert gate.admin_identity == "admin-A"
    result = await test_db.execute(select(BoardOwner))
    assert len(result.scalars().all()) == 1
