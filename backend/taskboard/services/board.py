"""Board — per-request bundle of the stores sharing one session and one gate.

Invariants:
    - All stores in a Board share the same AsyncSession (one transaction scope)
    - The gate is the immutable IdentityGate built at startup
"""

from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession

from taskboard.core.identity_gate import IdentityGate
from taskboard.core.storage_limits import StorageLimits
from taskboard.services.id_allocator import IdAllocator
from taskboard.services.member_store import MemberStore
from taskboard.services.query_engine import QueryEngine
from taskboard.services.task_store import TaskStore


@dataclass
class Board:
    gate: IdentityGate
    members: MemberStore
    tasks: TaskStore
    queries: QueryEngine


def build_board(
    db: AsyncSession, gate: IdentityGate, limits: StorageLimits,
) -> Board:
    allocator = IdAllocator(db)
    members = MemberStore(db, gate, allocator, limits)
    tasks = TaskStore(db, gate, allocator, members, limits)
    return Board(
        gate=gate, members=members, tasks=tasks, queries=QueryEngine(tasks),
    )
