"""Task Store — the task collection: creation, completion, lookup, deletion.

Invariants:
    - add and remove are admin only; complete admits the admin or the assignee
    - Authorization is evaluated before any validation; all validation runs
      before the id is allocated, so rejected creations consume no id
    - start_time is stamped from the injected clock (nanoseconds) at creation
    - assigned_to is checked against members at creation only and never cascaded
    - Completing an already completed task is a no-op that still returns Ok(id)
    - list_all on an empty collection is an EmptyCollectionError, not []

Design Decisions:
    - Clock injected (defaults to time.time_ns): tests pin start_time without patching
    - snapshot() is public: the query engine filters the same ordered snapshot
"""

import logging
import time
from typing import Callable

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from taskboard.core.domain_types import Collection, MAX_ID
from taskboard.core.enforce_tasks import validate_task_payload
from taskboard.core.errors import EmptyCollectionError, NotFoundError
from taskboard.core.id_allocation import check_id_in_range
from taskboard.core.identity_gate import IdentityGate
from taskboard.core.records import Task, TaskPayload
from taskboard.core.result import Err, Ok, Result
from taskboard.core.storage_limits import (
    StorageLimits, check_capacity, check_value_size,
)
from taskboard.models.task import Task as TaskRow
from taskboard.services.id_allocator import IdAllocator
from taskboard.services.member_store import MemberStore
from taskboard.services.rejections import reject

logger = logging.getLogger(__name__)

COLLECTION = Collection.TASKS.value


def _to_record(row: TaskRow) -> Task:
    return Task(
        id=row.id,
        title=row.title,
        description=row.description,
        assigned_to=row.assigned_to,
        is_done=row.is_done,
        start_time=row.start_time,
        deadline_hours=row.deadline_hours,
    )


class TaskStore:
    """Owns the tasks table."""

    def __init__(
        self, db: AsyncSession, gate: IdentityGate, allocator: IdAllocator,
        members: MemberStore, limits: StorageLimits,
        clock: Callable[[], int] = time.time_ns,
    ):
        self.db = db
        self.gate = gate
        self.allocator = allocator
        self.members = members
        self.limits = limits
        self.clock = clock

    async def _find(self, task_id: int) -> TaskRow | None:
        if check_id_in_range(task_id) is not None:
            return None
        return await self.db.get(TaskRow, task_id)

    async def count(self) -> int:
        result = await self.db.execute(select(func.count()).select_from(TaskRow))
        return result.scalar_one()

    async def add(self, caller: str, payload: TaskPayload) -> Result[int]:
        """Validate payload, then allocate an id and store a fresh open task. Admin only."""
        error = self.gate.require_admin(caller, "add tasks")
        if error:
            return reject(error, "add_task", caller)

        assignee_is_member = await self.members.is_member(payload.assigned_to)
        error = validate_task_payload(payload, assignee_is_member)
        if error:
            return reject(error, "add_task", caller)

        start_time = self.clock()
        draft = Task(
            id=MAX_ID,
            title=payload.title,
            description=payload.description,
            assigned_to=payload.assigned_to,
            is_done=False,
            start_time=start_time,
            deadline_hours=payload.deadline_hours,
        )
        check_capacity(self.limits, await self.count(), COLLECTION)
        check_value_size(self.limits, draft.to_dict(), COLLECTION)

        task_id = await self.allocator.next(Collection.TASKS)
        self.db.add(TaskRow(
            id=task_id,
            title=draft.title,
            description=draft.description,
            assigned_to=draft.assigned_to,
            is_done=False,
            start_time=start_time,
            deadline_hours=draft.deadline_hours,
        ))
        await self.db.commit()
        logger.info(
            f"Task {task_id} added for {payload.assigned_to}",
            extra={"task_id": task_id, "caller": caller},
        )
        return Ok(task_id)

    async def remove(self, caller: str, task_id: int) -> Result[str]:
        error = self.gate.require_admin(caller, "delete tasks")
        if error:
            return reject(error, "delete_task", caller)

        row = await self._find(task_id)
        if row is None:
            return reject(NotFoundError("Task", task_id), "delete_task", caller)

        await self.db.delete(row)
        await self.db.commit()
        logger.info(
            f"Task {task_id} deleted",
            extra={"task_id": task_id, "caller": caller},
        )
        return Ok("Task deleted")

    async def get(self, task_id: int) -> Result[Task]:
        row = await self._find(task_id)
        if row is None:
            return Err(NotFoundError("Task", task_id))
        return Ok(_to_record(row))

    async def snapshot(self) -> list[Task]:
        """Every task, in id order."""
        result = await self.db.execute(select(TaskRow).order_by(TaskRow.id))
        return [_to_record(row) for row in result.scalars().all()]

    async def list_all(self) -> Result[list[Task]]:
        tasks = await self.snapshot()
        if not tasks:
            return Err(EmptyCollectionError("No tasks yet"))
        return Ok(tasks)

    async def complete(self, caller: str, task_id: int) -> Result[int]:
        """Mark a task done. Allowed for the administrator or the task's assignee."""
        row = await self._find(task_id)
        if row is None:
            return reject(NotFoundError("Task", task_id), "complete_task", caller)

        error = self.gate.require_admin_or(caller, row.assigned_to, "complete this task")
        if error:
            return reject(error, "complete_task", caller)

        if row.is_done:
            return Ok(task_id)

        row.is_done = True
        await self.db.commit()
        logger.info(
            f"Task {task_id} completed",
            extra={"task_id": task_id, "caller": caller},
        )
        return Ok(task_id)
