"""Member Store — the member collection: registration, lookup, membership predicate.

Invariants:
    - Mutations (add, remove, update) pass the identity gate before anything else
    - Every check runs before the first write; one commit per successful mutation
    - update on an absent id inserts it (documented edge case) and advances the
      member counter so a later add can never collide with it
    - list_all on an empty collection is an EmptyCollectionError, not []
    - Duplicate identities under different ids are allowed

Design Decisions:
    - Records returned as frozen core.records.Member snapshots, never ORM rows
"""

import logging

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from taskboard.core.domain_types import Collection, MAX_ID
from taskboard.core.enforce_members import validate_member_update
from taskboard.core.errors import EmptyCollectionError, NotFoundError
from taskboard.core.id_allocation import check_id_in_range
from taskboard.core.identity_gate import IdentityGate
from taskboard.core.records import Member
from taskboard.core.result import Err, Ok, Result
from taskboard.core.storage_limits import (
    StorageLimits, check_capacity, check_value_size,
)
from taskboard.models.member import Member as MemberRow
from taskboard.services.id_allocator import IdAllocator
from taskboard.services.rejections import reject

logger = logging.getLogger(__name__)

COLLECTION = Collection.MEMBERS.value


def _to_record(row: MemberRow) -> Member:
    return Member(id=row.id, identity=row.identity)


class MemberStore:
    """Owns the members table."""

    def __init__(
        self, db: AsyncSession, gate: IdentityGate,
        allocator: IdAllocator, limits: StorageLimits,
    ):
        self.db = db
        self.gate = gate
        self.allocator = allocator
        self.limits = limits

    async def _find(self, member_id: int) -> MemberRow | None:
        if check_id_in_range(member_id) is not None:
            return None
        return await self.db.get(MemberRow, member_id)

    async def count(self) -> int:
        result = await self.db.execute(select(func.count()).select_from(MemberRow))
        return result.scalar_one()

    async def add(self, caller: str, identity: str) -> Result[int]:
        """Register identity under a fresh id. Admin only."""
        error = self.gate.require_admin(caller, "add new members")
        if error:
            return reject(error, "add_member", caller)

        check_capacity(self.limits, await self.count(), COLLECTION)
        # widest id gives the largest record
        check_value_size(self.limits, Member(MAX_ID, identity).to_dict(), COLLECTION)

        member_id = await self.allocator.next(Collection.MEMBERS)
        self.db.add(MemberRow(id=member_id, identity=identity))
        await self.db.commit()
        logger.info(
            f"Member {member_id} added",
            extra={"member_id": member_id, "caller": caller},
        )
        return Ok(member_id)

    async def remove(self, caller: str, member_id: int) -> Result[str]:
        """Delete a member. Tasks assigned to it are left untouched. Admin only."""
        error = self.gate.require_admin(caller, "delete members")
        if error:
            return reject(error, "delete_member", caller)

        row = await self._find(member_id)
        if row is None:
            return reject(NotFoundError("Member", member_id), "delete_member", caller)

        await self.db.delete(row)
        await self.db.commit()
        logger.info(
            f"Member {member_id} deleted",
            extra={"member_id": member_id, "caller": caller},
        )
        return Ok("Member has been deleted")

    async def get(self, member_id: int) -> Result[Member]:
        row = await self._find(member_id)
        if row is None:
            return Err(NotFoundError("Member", member_id))
        return Ok(_to_record(row))

    async def update(self, caller: str, member_id: int, new_identity: str) -> Result[int]:
        """Overwrite the identity stored at member_id, inserting it if absent. Admin only."""
        error = self.gate.require_admin(caller, "update members")
        if error:
            return reject(error, "update_member", caller)

        error = validate_member_update(member_id, new_identity)
        if error:
            return reject(error, "update_member", caller)

        check_value_size(
            self.limits, Member(member_id, new_identity).to_dict(), COLLECTION,
        )
        row = await self._find(member_id)
        if row is not None:
            row.identity = new_identity
        else:
            check_capacity(self.limits, await self.count(), COLLECTION)
            self.db.add(MemberRow(id=member_id, identity=new_identity))
            await self.allocator.advance_to(Collection.MEMBERS, member_id)
            logger.warning(
                f"update_member inserted absent member {member_id}",
                extra={"member_id": member_id, "caller": caller},
            )

        await self.db.commit()
        logger.info(
            f"Member {member_id} updated",
            extra={"member_id": member_id, "caller": caller},
        )
        return Ok(member_id)

    async def list_all(self) -> Result[list[Member]]:
        result = await self.db.execute(select(MemberRow).order_by(MemberRow.id))
        members = [_to_record(row) for row in result.scalars().all()]
        if not members:
            return Err(EmptyCollectionError("No members yet"))
        return Ok(members)

    async def is_member(self, identity: str) -> bool:
        """True iff some registered member has exactly this identity."""
        result = await self.db.execute(
            select(MemberRow.id).where(MemberRow.identity == identity).limit(1),
        )
        return result.first() is not None
